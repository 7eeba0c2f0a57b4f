"""
业务逻辑层

目录结构：
- services/calculator.py  派生字段计算器（纯函数）
- services/session.py     会话状态容器
- services/stocks.py      股票列表 / 搜索
- services/parsing.py     表单输入解析
- services/icon.py        卡片图标

架构规则：
- services/ → models/ + config/ + utils/（可以调用）
- 绝对禁止：services/ → ui/、services/ → pages/
"""
from services.calculator import recalculate, default_record, RECALC_PIPELINE
from services.session import TransactionSession
from services.stocks import Stock, StockCatalog, StockCatalogError, selection_patch
from services.parsing import parse_number, parse_formatted_number, parse_date
from services.icon import IconSpec, IconUploadError, encode_icon, resolve_icon

__all__ = [
    "recalculate",
    "default_record",
    "RECALC_PIPELINE",
    "TransactionSession",
    "Stock",
    "StockCatalog",
    "StockCatalogError",
    "selection_patch",
    "parse_number",
    "parse_formatted_number",
    "parse_date",
    "IconSpec",
    "IconUploadError",
    "encode_icon",
    "resolve_icon",
]
