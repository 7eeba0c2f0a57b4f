"""格式化工具 — 印尼数字格式、盈亏文本、日期、ticker 占位图标"""
import math
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from config import ICON_COLORS

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sept", "Oct", "Nov", "Dec")


def _format_id(value: float, min_frac: int, max_frac: int) -> str:
    """id-ID 数字格式：千分位 '.'，小数点 ','，半数进位"""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-∞" if value < 0 else "∞"

    d = Decimal(repr(value)).quantize(Decimal(1).scaleb(-max_frac), rounding=ROUND_HALF_UP)
    sign = "-" if d < 0 else ""
    int_part, _, frac = f"{abs(d):f}".partition(".")
    frac = frac.rstrip("0").ljust(min_frac, "0")

    grouped = f"{int(int_part):,}".replace(",", ".")
    return f"{sign}{grouped},{frac}" if frac else f"{sign}{grouped}"


def format_number(value: float) -> str:
    """738000 → '738.000'，最多 3 位小数"""
    return _format_id(value, 0, 3)


def format_decimal(value: float, decimals: int = 2) -> str:
    """固定小数位：30000 → '30.000,00'"""
    return _format_id(value, decimals, decimals)


def format_percent(percent: float) -> str:
    """带符号百分比：4.2372 → '+4,24%'，-15.25 → '-15,25%'"""
    sign = "+" if percent >= 0 else ""
    return f"{sign}{format_decimal(percent)}%"


def format_realized_gain(value: float, percent: float) -> str:
    """已实现盈亏文本：'+30.000,00 (+4,24%)' / '-5.000,00 (-2,50%)'"""
    sign = "+" if value >= 0 else ""
    return f"{sign}{format_decimal(value)} ({format_percent(percent)})"


def format_date(d: date) -> str:
    """date → '1 Oct 2025'"""
    return f"{d.day} {_MONTHS[d.month - 1]} {d.year}"


# ═══════════════════════════════════════════════════════
#  ticker 占位图标
# ═══════════════════════════════════════════════════════

def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def ticker_color(ticker: str) -> str:
    """同一 ticker 永远得到同一种颜色（与前端的字符串哈希一致）"""
    h = 0
    for ch in ticker or "":
        h = ord(ch) + (_to_int32(_to_int32(h) << 5) - h)
    return ICON_COLORS[abs(h) % len(ICON_COLORS)]


def ticker_initials(ticker: str) -> str:
    """ticker 前两位大写"""
    return (ticker or "")[:2].upper()
