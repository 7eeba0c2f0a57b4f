"""
UI 原子组件库 — 纯渲染，无业务逻辑

所有方法只做 HTML/Streamlit 渲染，不做任何业务计算。
依赖方向：ui/ → config/（主题）+ streamlit

设计原则：
- 用户文本经 html.escape() 防御处理
- 不引用 services/ 的计算逻辑 / pages/
"""
from __future__ import annotations

import html as _html
from contextlib import contextmanager
from typing import Any, Optional, Sequence

import streamlit as st

from config.theme import COLORS, GLOBAL_CSS, preview_panel_css


def _esc(text: Any) -> str:
    """防御性 HTML 转义"""
    return _html.escape(str(text)) if text is not None else ""


class UI:
    """
    原子级 UI 组件库

    使用示例::
        from ui import UI
        UI.inject_css()
        UI.header("Stockbit Card Generator")
        UI.readonly("Amount", "738.000")
    """

    # ── 全局样式注入 ──

    @staticmethod
    def inject_css():
        """注入全局 CSS（每页调用一次）"""
        if GLOBAL_CSS:
            st.markdown(GLOBAL_CSS, unsafe_allow_html=True)

    # ── 标题 ──

    @staticmethod
    def header(title: str, subtitle: str = ""):
        st.subheader(title)
        if subtitle:
            st.caption(subtitle)

    # ── 只读字段（派生值） ──

    @staticmethod
    def readonly(label: str, value: str, *, container: Optional[Any] = None):
        """派生字段：灰色不可编辑输入框"""
        target = container or st
        target.text_input(label, value=value, disabled=True)

    # ── 预览面板 ──

    @staticmethod
    @contextmanager
    def preview_panel(key: str = "card_preview"):
        """带浅灰底色的预览容器"""
        st.markdown(preview_panel_css(key), unsafe_allow_html=True)
        with st.container(key=key):
            yield

    @staticmethod
    def card(card_html: str):
        """居中显示卡片 HTML"""
        st.markdown(
            f'<div style="display:flex;justify-content:center;padding:12px 0">'
            f'{card_html}</div>',
            unsafe_allow_html=True,
        )

    # ── 文字块 ──

    @staticmethod
    def disclaimer(paragraphs: Sequence[str]):
        """页脚免责声明（多段）"""
        body = "".join(f"<p>{_esc(p)}</p>" for p in paragraphs)
        st.markdown(
            f'<div class="card-disclaimer" style="border-top:1px solid '
            f'{COLORS["border_panel"]};margin-top:32px;padding-top:16px">{body}</div>',
            unsafe_allow_html=True,
        )

    @staticmethod
    def footer(text: str, link: str = "", href: str = ""):
        """居中小字页脚，可带一个链接"""
        anchor = ""
        if link and href:
            anchor = (
                f' <a href="{_esc(href)}" target="_blank" rel="noopener noreferrer" '
                f'style="color:{COLORS["primary"]}">{_esc(link)}</a>'
            )
        st.markdown(
            f'<p style="text-align:center;font-size:0.75rem;color:{COLORS["text_caption"]};'
            f'padding-top:12px">{_esc(text)}{anchor}</p>',
            unsafe_allow_html=True,
        )

    @staticmethod
    def error(message: str):
        st.error(message)
