"""
交易派生字段计算器 — 纯函数，无 I/O

recalculate(previous, patch) 把 patch 合并进上一份记录，
然后按固定顺序重算派生字段：

    amount → total_fee → net_amount → realized_gain(_percent)

每一步只读取前面已经定稿的字段。每次按键都可以调用。
"""
from __future__ import annotations

import math
from dataclasses import replace
from datetime import date
from typing import Any, Callable, FrozenSet, Mapping, Optional, Tuple

from config import Board, LOT_SIZE, TransactionType, fee_rate
from models import TransactionRecord, check_fields, empty_record

Step = Callable[[TransactionRecord], TransactionRecord]


def round_half_up(value: float) -> float:
    """四舍五入到整数（.5 向上，与 JS Math.round 一致）"""
    return float(math.floor(value + 0.5))


# ═══════════════════════════════════════════════════════
#  重算步骤
# ═══════════════════════════════════════════════════════

def _recompute_amount(r: TransactionRecord) -> TransactionRecord:
    return replace(r, amount=r.price * r.lot_done * LOT_SIZE)


def _recompute_total_fee(r: TransactionRecord) -> TransactionRecord:
    return replace(r, total_fee=round_half_up(r.amount * fee_rate(r.type)))


def _recompute_net_amount(r: TransactionRecord) -> TransactionRecord:
    if r.type == TransactionType.SELL:
        return replace(r, net_amount=r.amount - r.total_fee)
    return replace(r, net_amount=r.amount + r.total_fee)


def _recompute_realized_gain(r: TransactionRecord) -> TransactionRecord:
    # BUY 或 buy_price 为 0 时保留旧值（卡片对 BUY 隐藏该行）
    if r.type != TransactionType.SELL or r.buy_price <= 0:
        return r
    diff = r.price - r.buy_price
    return replace(
        r,
        realized_gain=diff * r.lot_done * LOT_SIZE,
        realized_gain_percent=diff / r.buy_price * 100,
    )


# (触发字段, 步骤)；触发字段为 None 表示每次都执行。顺序即依赖顺序。
RECALC_PIPELINE: Tuple[Tuple[Optional[FrozenSet[str]], Step], ...] = (
    (frozenset({"price", "lot_done"}),         _recompute_amount),
    (frozenset({"price", "lot_done", "type"}), _recompute_total_fee),
    (None,                                     _recompute_net_amount),
    (None,                                     _recompute_realized_gain),
)


# ═══════════════════════════════════════════════════════
#  公开接口
# ═══════════════════════════════════════════════════════

def recalculate(previous: TransactionRecord, patch: Mapping[str, Any]) -> TransactionRecord:
    """
    合并 patch 并重算派生字段

    Args:
        previous: 上一份（满足不变量的）记录，不会被修改
        patch:    要覆盖的字段，数值应已由 parsing 层转换为非负数

    Returns:
        新的 TransactionRecord

    Raises:
        UnknownFieldError: patch 含有记录之外的字段
    """
    check_fields(patch.keys())
    touched = frozenset(patch.keys())

    record = replace(previous, **patch)
    for triggers, step in RECALC_PIPELINE:
        if triggers is None or touched & triggers:
            record = step(record)
    return record


def default_record() -> TransactionRecord:
    """
    会话初始记录：SELL APEX 60 手 @123，成本 118

    amount=738,000  fee(0.35%)=2,583  net=735,417
    realized_gain=30,000  gain%≈4.24
    """
    return recalculate(
        empty_record(),
        {
            "type": TransactionType.SELL,
            "ticker": "APEX",
            "company_name": "Apexindo Pratama Duta Tbk",
            "board": Board.PENGEMBANGAN,
            "date": date(2025, 10, 1),
            "price": 123.0,
            "lot_done": 60.0,
            "buy_price": 118.0,
        },
    )
