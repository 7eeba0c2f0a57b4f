"""运行时设置测试。"""
from __future__ import annotations

import logging
from pathlib import Path

from config import settings


def test_defaults(monkeypatch):
    for name in ("CARD_STOCKS_PATH", "CARD_LOGO_BASE_URL", "CARD_LOGO_TIMEOUT", "CARD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert settings.get_stocks_path() == settings.DEFAULT_STOCKS_PATH
    assert settings.get_logo_url("APEX") == "https://assets.stockbit.com/logos/companies/APEX.png"
    assert settings.get_logo_timeout() == settings.DEFAULT_LOGO_TIMEOUT
    assert settings.get_log_level() == logging.INFO


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CARD_STOCKS_PATH", str(tmp_path / "s.json"))
    monkeypatch.setenv("CARD_LOG_LEVEL", "debug")
    assert settings.get_stocks_path() == Path(tmp_path / "s.json")
    assert settings.get_log_level() == logging.DEBUG


def test_bad_values_fall_back(monkeypatch):
    monkeypatch.setenv("CARD_LOGO_TIMEOUT", "soon")
    assert settings.get_logo_timeout() == settings.DEFAULT_LOGO_TIMEOUT
    monkeypatch.setenv("CARD_LOGO_TIMEOUT", "-1")
    assert settings.get_logo_timeout() == settings.DEFAULT_LOGO_TIMEOUT
    monkeypatch.setenv("CARD_LOG_LEVEL", "LOUD")
    assert settings.get_log_level() == logging.INFO
