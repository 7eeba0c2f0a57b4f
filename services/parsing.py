"""
表单输入解析 — 文本 → 非负数 / 日期

计算器不做校验，所有用户输入先经过这里：
非法或空文本一律归零（静默回退，不报错）。
"""
from __future__ import annotations

import math
import re
from datetime import date
from typing import Optional

# 与 JS parseFloat 一致：取开头的十进制数前缀
_LEADING_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def _non_negative(value: float) -> float:
    if math.isnan(value) or math.isinf(value) or value < 0:
        return 0.0
    return value


def parse_number(text: Optional[str]) -> float:
    """
    解析价格/手数/成本价输入

    "123"   → 123.0
    "12.5x" → 12.5（忽略尾部垃圾）
    ""、"abc"、"-5" → 0.0
    """
    if text is None:
        return 0.0
    match = _LEADING_NUMBER.match(str(text).strip())
    if not match:
        return 0.0
    return _non_negative(float(match.group(0)))


def parse_formatted_number(text: Optional[str]) -> float:
    """
    解析印尼格式数字（千分位 "."，小数点 ","）

    "1.234.567"  → 1234567.0
    "1.234,5"    → 1234.5
    """
    if not text:
        return 0.0
    cleaned = str(text).replace(".", "").replace(",", ".", 1)
    return parse_number(cleaned)


def parse_date(text: Optional[str]) -> Optional[date]:
    """ISO 日期文本 → date，无法解析返回 None（调用方保留旧日期）"""
    if not text:
        return None
    try:
        return date.fromisoformat(str(text).strip())
    except ValueError:
        return None
