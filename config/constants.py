"""
交易卡片常量 — Single Source of Truth

本文件是整个系统中关于「交易方向」「上市板块」「费率」的唯一定义处。
任何新增/修改费率或板块都只改这一个文件。
"""
from enum import Enum
from typing import Dict, FrozenSet, Tuple

# ═══════════════════════════════════════════════════════
#  Streamlit 页面配置
# ═══════════════════════════════════════════════════════

PAGE_CONFIG: Dict = dict(
    page_title="Stockbit Card Generator",
    page_icon="🧾",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ═══════════════════════════════════════════════════════
#  交易方向
# ═══════════════════════════════════════════════════════

class TransactionType(str, Enum):
    """交易方向（买入 / 卖出）"""
    BUY  = "BUY"
    SELL = "SELL"


# ═══════════════════════════════════════════════════════
#  上市板块（只影响卡片上的徽标显示）
# ═══════════════════════════════════════════════════════

class Board(str, Enum):
    """
    IDX 上市板块

    - UTAMA:             主板
    - PENGEMBANGAN:      开发板（卡片显示 DBX 徽标）
    - PEMANTAUAN_KHUSUS: 特别监控板（卡片显示 ⚠️）
    - AKSELERASI:        加速板
    """
    UTAMA             = "Utama"
    PENGEMBANGAN      = "Pengembangan"
    PEMANTAUAN_KHUSUS = "Pemantauan Khusus"
    AKSELERASI        = "Akselerasi"


DEFAULT_BOARD: Board = Board.UTAMA

# 板块 → 徽标类型（未列出的板块不显示徽标）
BOARD_BADGES: Dict[Board, str] = {
    Board.PENGEMBANGAN:      "dbx",
    Board.PEMANTAUAN_KHUSUS: "warning",
}


# ═══════════════════════════════════════════════════════
#  交易数学
# ═══════════════════════════════════════════════════════

# 1 手 = 100 股
LOT_SIZE: int = 100

# Stockbit 费率：BUY 0.15%，SELL 0.25% + 0.1% PPh = 0.35%
FEE_RATES: Dict[TransactionType, float] = {
    TransactionType.BUY:  0.0015,
    TransactionType.SELL: 0.0035,
}


def fee_rate(tx_type: TransactionType) -> float:
    """按交易方向返回费率"""
    return FEE_RATES[TransactionType(tx_type)]


# ═══════════════════════════════════════════════════════
#  表单 / 搜索
# ═══════════════════════════════════════════════════════

# 股票搜索最多返回条数
STOCK_SEARCH_LIMIT: int = 50

# 允许上传的 logo 类型
ACCEPTED_ICON_TYPES: FrozenSet[str] = frozenset({
    "image/png", "image/jpeg",
})

# file_uploader 可接受的扩展名
ACCEPTED_ICON_EXTENSIONS: Tuple[str, ...] = ("png", "jpg", "jpeg")

# 无 logo 时占位圆圈的配色（按 ticker 哈希取色）
ICON_COLORS: Tuple[str, ...] = (
    "#f5a623",  # orange
    "#1890ff",  # blue
    "#00ab6b",  # green
    "#722ed1",  # purple
    "#e84142",  # red
)
