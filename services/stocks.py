"""
股票列表服务 — 加载 IDX 股票清单、按代码/名称搜索

数据来源：data/stocks.json（CARD_STOCKS_PATH 可覆盖）
选中结果通过 selection_patch() 转成计算器可用的 patch。
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from config import Board, DEFAULT_BOARD, STOCK_SEARCH_LIMIT
from config.settings import get_stocks_path

logger = logging.getLogger(__name__)

_REQUIRED_COLUMNS = ("code", "name", "board")


class StockCatalogError(ValueError):
    """股票列表文件缺失或格式错误"""


@dataclass(frozen=True)
class Stock:
    """单只股票（搜索结果）"""
    code: str
    name: str
    board: Board
    listing_date: str = ""
    shares: str = ""


def selection_patch(stock: Optional[Stock]) -> Dict[str, Any]:
    """
    股票选择 → 计算器 patch

    取消选择时清空代码和名称，板块回到 Utama。
    """
    if stock is None:
        return {"ticker": "", "company_name": "", "board": DEFAULT_BOARD}
    return {"ticker": stock.code, "company_name": stock.name, "board": stock.board}


class StockCatalog:
    """
    股票清单

    使用示例::
        catalog = StockCatalog.load()
        catalog.search("bank")[:3]
    """

    def __init__(self, df: pd.DataFrame):
        self._df = df.reset_index(drop=True)
        # 预先算好小写列，搜索时不重复转换
        self._code_lc = self._df["code"].str.lower()
        self._name_lc = self._df["name"].str.lower()

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "StockCatalog":
        """
        从 JSON 文件加载

        Raises:
            StockCatalogError: 文件不存在、JSON 非法、缺列或板块非法
        """
        path = Path(path) if path else get_stocks_path()
        if not path.exists():
            raise StockCatalogError(f"股票列表不存在: {path}")
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise StockCatalogError(f"股票列表不是合法 JSON: {path} ({exc})") from exc
        if not isinstance(raw, list):
            raise StockCatalogError(f"股票列表应为数组: {path}")

        catalog = cls.from_records(raw)
        logger.info("已加载股票列表 %s（%d 只）", path, len(catalog))
        return catalog

    @classmethod
    def from_records(cls, records: List[Dict[str, Any]]) -> "StockCatalog":
        """从 dict 列表构建（字段同 stocks.json）"""
        df = pd.DataFrame(records, columns=["code", "name", "listingDate", "shares", "board"])
        missing = [c for c in _REQUIRED_COLUMNS if df[c].isna().any()]
        if missing:
            raise StockCatalogError(f"股票列表缺少字段: {missing}")

        valid_boards = {b.value for b in Board}
        bad = sorted(set(df["board"]) - valid_boards)
        if bad:
            raise StockCatalogError(f"未知板块: {bad}，合法值: {sorted(valid_boards)}")

        df = df.fillna("")
        df["code"] = df["code"].astype(str)
        df["name"] = df["name"].astype(str)
        return cls(df)

    def __len__(self) -> int:
        return len(self._df)

    def _row_to_stock(self, row: pd.Series) -> Stock:
        return Stock(
            code=row["code"],
            name=row["name"],
            board=Board(row["board"]),
            listing_date=str(row["listingDate"]),
            shares=str(row["shares"]),
        )

    def search(self, query: str, limit: int = STOCK_SEARCH_LIMIT) -> List[Stock]:
        """
        按代码或名称模糊搜索（不区分大小写，保持文件顺序）

        空查询返回前 limit 只。
        """
        q = (query or "").strip().lower()
        if q:
            mask = (
                self._code_lc.str.contains(q, regex=False)
                | self._name_lc.str.contains(q, regex=False)
            )
            hits = self._df[mask]
        else:
            hits = self._df
        return [self._row_to_stock(row) for _, row in hits.head(limit).iterrows()]

    def get(self, code: str) -> Optional[Stock]:
        """按代码精确查找（不区分大小写）"""
        if not code:
            return None
        hits = self._df[self._code_lc == code.strip().lower()]
        if hits.empty:
            return None
        return self._row_to_stock(hits.iloc[0])
