"""
交易卡片数据模型
"""
from dataclasses import dataclass, fields
from datetime import date
from typing import FrozenSet, Iterable, Optional

from config import Board, DEFAULT_BOARD, TransactionType


class UnknownFieldError(ValueError):
    """patch 中出现了记录不存在的字段"""


@dataclass(frozen=True)
class TransactionRecord:
    """
    单笔交易卡片记录（每个会话一份）

    派生字段（由计算器维护，不能由用户直接输入）：
    - amount:                price × lot_done × 100
    - total_fee:             round(amount × 费率)
    - net_amount:            SELL 减手续费，BUY 加手续费
    - realized_gain:         仅 SELL 且 buy_price > 0 时更新
    - realized_gain_percent: 同上，不做舍入（展示层再舍入）

    示例：
    - SELL 60 手 @123，成本 118 → amount=738000, total_fee=2583,
      net_amount=735417, realized_gain=30000
    """

    type: TransactionType            # BUY | SELL
    ticker: str                      # 股票代码，可为空
    company_name: str                # 公司名，选中股票前为空
    board: Board                     # 上市板块，只影响徽标
    date: date                       # 交易日期
    price: float                     # 成交价
    lot_done: float                  # 成交手数
    amount: float                    # 派生：成交额
    total_fee: float                 # 派生：手续费
    net_amount: float                # 派生：净额
    buy_price: float = 0.0           # 成本价（仅 SELL 有意义）
    realized_gain: float = 0.0       # 派生：已实现盈亏
    realized_gain_percent: float = 0.0  # 派生：已实现盈亏%
    icon_url: Optional[str] = None   # 用户上传的 logo（data URI）

    def __post_init__(self):
        """枚举字段接受字符串"""
        if not isinstance(self.type, TransactionType):
            object.__setattr__(self, "type", TransactionType(self.type))
        if not isinstance(self.board, Board):
            object.__setattr__(self, "board", Board(self.board))

    @property
    def is_sell(self) -> bool:
        return self.type == TransactionType.SELL


RECORD_FIELDS: FrozenSet[str] = frozenset(f.name for f in fields(TransactionRecord))


def check_fields(names: Iterable[str]) -> None:
    """
    校验 patch 的字段名

    Raises:
        UnknownFieldError: 存在不属于 TransactionRecord 的字段
    """
    unknown = sorted(set(names) - RECORD_FIELDS)
    if unknown:
        raise UnknownFieldError(f"未知字段: {unknown}，合法字段: {sorted(RECORD_FIELDS)}")


def empty_record() -> TransactionRecord:
    """全零记录（计算器的种子）"""
    return TransactionRecord(
        type=TransactionType.BUY,
        ticker="",
        company_name="",
        board=DEFAULT_BOARD,
        date=date.today(),
        price=0.0,
        lot_done=0.0,
        amount=0.0,
        total_fee=0.0,
        net_amount=0.0,
    )
