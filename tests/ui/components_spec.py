"""UI 组件样式测试。"""
from __future__ import annotations

from config.theme import COLORS, preview_panel_css


def test_preview_panel_css_targets_keyed_container():
    css = preview_panel_css("card_preview")
    assert css.startswith("<style>.st-key-card_preview {")
    assert css.endswith("}</style>")
    assert COLORS["bg_preview"] in css
    assert COLORS["border_panel"] in css
