"""
股票图标 — 自定义上传 / Stockbit logo / 首字母占位

优先级：用户上传 > 拉取到的 logo > 彩色圆形占位（ticker 前两位）
"""
from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Optional

from config import ACCEPTED_ICON_TYPES
from utils.format import ticker_color, ticker_initials


class IconUploadError(ValueError):
    """上传的 logo 为空或类型不支持"""


@dataclass(frozen=True)
class IconSpec:
    """
    卡片图标的渲染描述

    src 非空时渲染 <img>，否则渲染 color + initials 占位圆圈。
    """
    src: Optional[str] = None
    color: str = ""
    initials: str = ""

    @property
    def is_image(self) -> bool:
        return bool(self.src)


def to_data_uri(data: bytes, mime: str) -> str:
    """bytes → data URI"""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{encoded}"


def encode_icon(data: bytes, mime: str) -> str:
    """
    用户上传的 logo → data URI

    Raises:
        IconUploadError: 文件为空，或不是 PNG/JPEG
    """
    mime = (mime or "").lower()
    if mime == "image/jpg":
        mime = "image/jpeg"
    if mime not in ACCEPTED_ICON_TYPES:
        raise IconUploadError(f"不支持的图片类型: {mime or '未知'}，仅支持 PNG / JPEG")
    if not data:
        raise IconUploadError("上传的图片为空")
    return to_data_uri(data, mime)


def resolve_icon(
    ticker: str,
    custom_icon: Optional[str] = None,
    logo_bytes: Optional[bytes] = None,
) -> IconSpec:
    """按优先级决定卡片图标"""
    if custom_icon:
        return IconSpec(src=custom_icon)
    if ticker and logo_bytes:
        return IconSpec(src=to_data_uri(logo_bytes, "image/png"))
    return IconSpec(color=ticker_color(ticker), initials=ticker_initials(ticker))
