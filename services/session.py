"""
会话状态容器 — 持有当前交易记录

每个浏览器会话一个实例（存放在 st.session_state），
所有修改都经过 recalculate()，保证记录始终满足不变量。
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from models import TransactionRecord
from services.calculator import default_record, recalculate
from services.stocks import Stock, selection_patch

logger = logging.getLogger(__name__)


class TransactionSession:
    """
    单会话的交易记录

    使用示例::
        session = TransactionSession()
        session.apply({"price": 125})
        session.record.amount
    """

    def __init__(self, record: Optional[TransactionRecord] = None):
        self._record = record if record is not None else default_record()

    @property
    def record(self) -> TransactionRecord:
        return self._record

    def apply(self, patch: Mapping[str, Any]) -> TransactionRecord:
        """合并 patch、重算并保存为当前记录"""
        self._record = recalculate(self._record, patch)
        logger.debug("应用 patch %s → net_amount=%s", sorted(patch), self._record.net_amount)
        return self._record

    def select_stock(self, stock: Optional[Stock]) -> TransactionRecord:
        """选择（或取消选择）股票"""
        return self.apply(selection_patch(stock))

    def set_icon(self, data_uri: Optional[str]) -> TransactionRecord:
        """设置自定义 logo，None 表示恢复默认"""
        return self.apply({"icon_url": data_uri})

    def reset(self) -> TransactionRecord:
        """恢复初始记录"""
        self._record = default_record()
        logger.debug("会话记录已重置")
        return self._record
