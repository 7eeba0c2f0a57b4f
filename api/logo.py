"""
股票 logo API — 从 Stockbit CDN 拉取 PNG

  - 只做网络透传，没有业务逻辑
  - 失败（404 / 超时 / 网络错误）一律返回 None，由 UI 回退到首字母占位
  - 缓存由调用方负责（页面层 st.cache_data，24 小时）
"""
import logging
import re
from typing import Optional

import requests

from config.settings import get_logo_timeout, get_logo_url

logger = logging.getLogger(__name__)

_TICKER_RE = re.compile(r"^[A-Za-z0-9]{1,12}$")


def fetch_logo(ticker: str) -> Optional[bytes]:
    """
    获取某个 ticker 的 logo PNG 原始字节。

    Returns:
        PNG bytes，或 None（ticker 非法 / 不存在 / 请求失败）
    """
    if not ticker or not _TICKER_RE.match(ticker):
        return None

    url = get_logo_url(ticker.upper())
    try:
        resp = requests.get(url, timeout=get_logo_timeout())
    except requests.RequestException as exc:
        logger.warning("logo 请求失败 %s: %s", url, exc)
        return None

    if resp.status_code != 200:
        logger.info("logo 不存在 %s (HTTP %s)", url, resp.status_code)
        return None
    if not resp.content:
        return None
    return resp.content
