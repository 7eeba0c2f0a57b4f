"""
pages 包 — 视图层

每个页面只做：读 session_state → 调 Service → 调 UI 渲染
不直接做任何计算。
"""
from .generator import render as page_generator

__all__ = [
    "page_generator",
]
