"""
运行时设置 — 环境变量覆盖 + 日志初始化

所有可调参数都通过 get_* 函数读取（调用时读取环境变量，测试可 monkeypatch）。
"""
import logging
import os
from pathlib import Path

# 默认股票列表（IDX 上市公司）
DEFAULT_STOCKS_PATH = Path(__file__).parent.parent / "data" / "stocks.json"

# Stockbit logo CDN
DEFAULT_LOGO_BASE_URL = "https://assets.stockbit.com/logos/companies"

DEFAULT_LOGO_TIMEOUT = 5.0

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_stocks_path() -> Path:
    """股票列表路径（CARD_STOCKS_PATH 可覆盖）"""
    env_path = os.getenv("CARD_STOCKS_PATH")
    if env_path:
        return Path(env_path)
    return DEFAULT_STOCKS_PATH


def get_logo_url(ticker: str) -> str:
    """某个 ticker 的 logo 地址（CARD_LOGO_BASE_URL 可覆盖）"""
    base = os.getenv("CARD_LOGO_BASE_URL", DEFAULT_LOGO_BASE_URL).rstrip("/")
    return f"{base}/{ticker}.png"


def get_logo_timeout() -> float:
    """logo 请求超时（秒），非法值回退默认"""
    raw = os.getenv("CARD_LOGO_TIMEOUT")
    if not raw:
        return DEFAULT_LOGO_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_LOGO_TIMEOUT
    return value if value > 0 else DEFAULT_LOGO_TIMEOUT


def get_log_level() -> int:
    """日志级别（CARD_LOG_LEVEL，默认 INFO）"""
    name = os.getenv("CARD_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging() -> None:
    """初始化根 logger（重复调用无副作用）"""
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
