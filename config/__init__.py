"""
config 包 — 常量、主题、运行时设置

- constants: 交易方向 / 板块 / 费率
- theme:     颜色 / CSS
- settings:  环境变量 + 日志
"""
from .constants import (
    PAGE_CONFIG,
    TransactionType,
    Board,
    DEFAULT_BOARD,
    BOARD_BADGES,
    LOT_SIZE,
    FEE_RATES,
    fee_rate,
    STOCK_SEARCH_LIMIT,
    ACCEPTED_ICON_TYPES,
    ACCEPTED_ICON_EXTENSIONS,
    ICON_COLORS,
)

__all__ = [
    "PAGE_CONFIG",
    "TransactionType",
    "Board",
    "DEFAULT_BOARD",
    "BOARD_BADGES",
    "LOT_SIZE",
    "FEE_RATES",
    "fee_rate",
    "STOCK_SEARCH_LIMIT",
    "ACCEPTED_ICON_TYPES",
    "ACCEPTED_ICON_EXTENSIONS",
    "ICON_COLORS",
]
