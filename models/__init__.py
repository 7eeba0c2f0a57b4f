"""
数据模型
"""
from .transaction import (
    TransactionRecord,
    UnknownFieldError,
    RECORD_FIELDS,
    check_fields,
    empty_record,
)

__all__ = [
    "TransactionRecord",
    "UnknownFieldError",
    "RECORD_FIELDS",
    "check_fields",
    "empty_record",
]
