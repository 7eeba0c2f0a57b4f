"""
交易卡片渲染 — TransactionRecord → 自包含 HTML

全部使用内联样式：同一份 HTML 既用于页面预览，也作为下载文件。
只做渲染，不做任何计算（派生字段由 services.calculator 维护）。
"""
from __future__ import annotations

import html as _html
from typing import Any, List, Optional

from config import BOARD_BADGES
from config.theme import CARD_FONT, CARD_SHADOW, CARD_WIDTH, COLORS
from models import TransactionRecord
from services.icon import IconSpec, resolve_icon
from utils.format import format_date, format_number, format_realized_gain


def _esc(text: Any) -> str:
    """防御性 HTML 转义"""
    return _html.escape(str(text)) if text is not None else ""


def _icon_html(icon: IconSpec, alt: str, size: int = 40) -> str:
    if icon.is_image:
        return (
            f'<img src="{_esc(icon.src)}" alt="{_esc(alt)}" '
            f'style="width:{size}px;height:{size}px;border-radius:50%;'
            f'object-fit:cover;flex-shrink:0" />'
        )
    return (
        f'<div style="width:{size}px;height:{size}px;border-radius:50%;'
        f'background-color:{icon.color};display:flex;align-items:center;'
        f'justify-content:center;flex-shrink:0">'
        f'<span style="color:#ffffff;font-weight:600;font-size:{size * 0.4:g}px">'
        f'{_esc(icon.initials)}</span></div>'
    )


def _badge_html(record: TransactionRecord) -> str:
    badge = BOARD_BADGES.get(record.board)
    if badge == "dbx":
        return (
            f'<span style="border:1px solid {COLORS["badge_dbx"]};border-radius:4px;'
            f'padding:2px 5px;font-size:12px;color:{COLORS["badge_dbx"]};'
            f'line-height:1">DBX</span>'
        )
    if badge == "warning":
        return f'<span style="color:{COLORS["badge_warning"]};font-size:14px">⚠️</span>'
    return ""


def _data_row(label: str, value: str, *, bold: bool = False, color: Optional[str] = None) -> str:
    weight = 600 if bold else 400
    return (
        '<div style="display:flex;justify-content:space-between;'
        'align-items:center;min-height:17px">'
        f'<span style="font-size:14px;font-weight:{weight};color:{COLORS["text"]}">'
        f'{_esc(label)}</span>'
        f'<span style="font-size:14px;font-weight:{weight};color:{color or COLORS["text"]}">'
        f'{_esc(value)}</span></div>'
    )


def render_card_html(record: TransactionRecord, icon: Optional[IconSpec] = None) -> str:
    """
    渲染交易卡片

    Args:
        record: 当前交易记录
        icon:   图标描述；缺省时按 record 计算（不拉取网络 logo）

    Returns:
        单个 <div> 的 HTML 片段
    """
    if icon is None:
        icon = resolve_icon(record.ticker, record.icon_url)

    rows: List[str] = [
        _data_row("Date", format_date(record.date)),
        _data_row("Price", format_number(record.price)),
        _data_row("Lot Done", format_number(record.lot_done)),
        _data_row("Amount", format_number(record.amount)),
        _data_row("Total Fee", format_number(record.total_fee)),
        _data_row("Net Amount", format_number(record.net_amount), bold=True),
    ]
    # 已实现盈亏只在 SELL 显示
    if record.is_sell:
        color = COLORS["gain"] if record.realized_gain >= 0 else COLORS["loss"]
        rows.append(_data_row(
            "Realized Gain",
            format_realized_gain(record.realized_gain, record.realized_gain_percent),
            bold=True,
            color=color,
        ))

    title = f"{record.type.value} {record.ticker}".strip()

    return (
        f'<div class="tx-card" style="width:{CARD_WIDTH}px;'
        f'background-color:{COLORS["bg_card"]};border-radius:3px;position:relative;'
        f'box-shadow:{CARD_SHADOW};font-family:{_esc(CARD_FONT)}">'
        # 关闭按钮（装饰）
        f'<div style="position:absolute;top:0;right:0;width:56px;height:56px;'
        f'display:flex;align-items:center;justify-content:center;'
        f'color:{COLORS["text_close"]};font-size:18px">×</div>'
        # 标题
        f'<div style="padding:20px"><h2 style="font-size:18px;font-weight:600;'
        f'text-align:center;color:{COLORS["text"]};margin:0">{_esc(title)}</h2></div>'
        # 股票行
        f'<div style="padding:0 20px"><div style="border:1px solid {COLORS["border"]};'
        f'border-radius:4px;padding:12px 16px;display:flex;align-items:center">'
        f'{_icon_html(icon, record.ticker)}'
        f'<div style="margin-left:12px;flex:1">'
        f'<div style="display:flex;align-items:center;gap:6px">'
        f'<span style="font-size:14px;font-weight:600;color:{COLORS["text"]}">'
        f'{_esc(record.ticker)}</span>{_badge_html(record)}</div>'
        f'<div style="font-size:12px;color:{COLORS["text_muted"]};margin-top:3px">'
        f'{_esc(record.company_name)}</div></div>'
        f'<span style="color:{COLORS["text_muted"]};font-size:18px">›</span>'
        f'</div></div>'
        # 数据区
        f'<div style="padding:16px 20px 20px"><div style="border:1px solid {COLORS["border"]};'
        f'border-radius:4px;padding:16px">'
        f'<div style="display:flex;flex-direction:column;gap:8px">{"".join(rows)}</div>'
        f'</div></div>'
        f'</div>'
    )


def card_document(record: TransactionRecord, icon: Optional[IconSpec] = None) -> str:
    """完整 HTML 页面（下载用）"""
    title = _esc(f"{record.type.value} {record.ticker}".strip())
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en"><head><meta charset="utf-8" />'
        f"<title>{title}</title></head>"
        '<body style="margin:0;padding:24px;background:#ffffff;'
        'display:flex;justify-content:center">'
        f"{render_card_html(record, icon)}"
        "</body></html>\n"
    )


def card_filename(record: TransactionRecord, ext: str = "html") -> str:
    """下载文件名：SELL-APEX-2025-10-01.html"""
    return f"{record.type.value}-{record.ticker}-{record.date.isoformat()}.{ext}"
