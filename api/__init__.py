"""
api 模块 — 对外数据抓取接口
- logo: Stockbit 股票 logo
"""
from .logo import fetch_logo

__all__ = [
    "fetch_logo",
]
