"""
主题配置 — 颜色、CSS、卡片字体

所有视觉风格的唯一定义处。UI 组件只引用此文件。
卡片本身用内联样式（导出的 HTML 需独立显示），页面用全局 CSS。
"""
from typing import Dict

# ═══════════════════════════════════════════════════════
#  颜色定义
# ═══════════════════════════════════════════════════════

COLORS: Dict[str, str] = {
    # 品牌色
    "primary":       "#00ab6b",
    "primary_hover": "#008f59",

    # 背景
    "bg_main":       "#ffffff",
    "bg_preview":    "#f5f5f5",
    "bg_card":       "#ffffff",

    # 边框
    "border":        "#ededed",
    "border_panel":  "#e1e1e1",

    # 文字
    "text":          "#333333",
    "text_muted":    "#b5b5b5",
    "text_close":    "rgba(0, 0, 0, 0.45)",
    "text_caption":  "#6e6e6e",

    # 盈亏色
    "gain":          "#00ab6b",
    "loss":          "#e84142",

    # 徽标
    "badge_dbx":     "#00ab6b",
    "badge_warning": "#f5a623",
}


# ═══════════════════════════════════════════════════════
#  卡片字体 / 阴影
# ═══════════════════════════════════════════════════════

CARD_FONT: str = (
    '-apple-system, "system-ui", "Segoe UI", Roboto, Oxygen, Ubuntu, '
    'Cantarell, "Open Sans", "Helvetica Neue", sans-serif'
)

CARD_SHADOW: str = (
    "rgba(0, 0, 0, 0.12) 0px 3px 6px -4px, "
    "rgba(0, 0, 0, 0.08) 0px 6px 16px 0px, "
    "rgba(0, 0, 0, 0.05) 0px 9px 28px 8px"
)

CARD_WIDTH: int = 520


# ═══════════════════════════════════════════════════════
#  全局 CSS
# ═══════════════════════════════════════════════════════

GLOBAL_CSS: str = f"""
<style>
    .stApp {{
        background: {COLORS["bg_main"]} !important;
        color: {COLORS["text"]};
    }}
    h1, h2, h3 {{
        color: {COLORS["text"]} !important;
        font-weight: 600 !important;
    }}
    .stButton > button, .stDownloadButton > button {{
        background: {COLORS["primary"]};
        color: #ffffff;
        border: none;
        border-radius: 6px;
        font-weight: 500;
    }}
    .stButton > button:hover, .stDownloadButton > button:hover {{
        background: {COLORS["primary_hover"]};
        color: #ffffff;
    }}
    .card-disclaimer {{
        font-size: 0.75rem;
        line-height: 1.6;
        color: {COLORS["text_caption"]};
    }}
</style>
"""


# ═══════════════════════════════════════════════════════
#  预览面板样式（st.container(key=...) 会带上 .st-key-<key> 类）
# ═══════════════════════════════════════════════════════

def preview_panel_css(key: str) -> str:
    """预览面板的 <style> 块，按容器 key 定位"""
    return (
        f"<style>.st-key-{key} {{"
        f"background: {COLORS['bg_preview']};"
        f"border: 1px solid {COLORS['border_panel']};"
        "border-radius: 6px;"
        "padding: 24px;"
        "}</style>"
    )
