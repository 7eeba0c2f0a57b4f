"""测试夹具：默认记录、临时股票列表。"""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, List

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from services.calculator import default_record


SAMPLE_STOCKS: List[Dict[str, Any]] = [
    {"code": "APEX", "name": "Apexindo Pratama Duta Tbk", "listingDate": "2002-07-10",
     "shares": "2659850000", "board": "Pengembangan"},
    {"code": "BBCA", "name": "Bank Central Asia Tbk", "listingDate": "2000-05-31",
     "shares": "123275050000", "board": "Utama"},
    {"code": "BBRI", "name": "Bank Rakyat Indonesia (Persero) Tbk", "listingDate": "2003-11-10",
     "shares": "151559001604", "board": "Utama"},
    {"code": "WIKA", "name": "Wijaya Karya (Persero) Tbk", "listingDate": "2007-10-29",
     "shares": "39887324460", "board": "Pemantauan Khusus"},
    {"code": "HOPE", "name": "Harapan Duta Pertiwi Tbk", "listingDate": "2021-05-24",
     "shares": "2050000000", "board": "Akselerasi"},
]


@pytest.fixture
def sell_record():
    """SELL APEX 60 手 @123，成本 118（会话默认记录）。"""
    return default_record()


@pytest.fixture
def stocks_file(tmp_path) -> Path:
    """写入临时 stocks.json。"""
    path = tmp_path / "stocks.json"
    path.write_text(json.dumps(SAMPLE_STOCKS), encoding="utf-8")
    return path


@pytest.fixture
def sample_stocks() -> List[Dict[str, Any]]:
    return SAMPLE_STOCKS
