"""
UI 组件库 — 统一导出

依赖方向：ui/ → config/ + models/ + streamlit
不引用 pages/
"""
from .components import UI
from .card import render_card_html, card_document, card_filename

__all__ = [
    "UI",
    "render_card_html",
    "card_document",
    "card_filename",
]
