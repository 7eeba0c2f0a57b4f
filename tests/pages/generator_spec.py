"""生成器页面交互测试（streamlit AppTest 驱动控件回调）。"""
from __future__ import annotations

import pytest
from streamlit.testing.v1 import AppTest

from config import Board, TransactionType
from services.calculator import default_record


def _app():
    from pages.generator import render

    render()


@pytest.fixture
def page(monkeypatch, stocks_file):
    """使用临时股票列表、不访问网络的页面。"""
    from pages import generator

    monkeypatch.setenv("CARD_STOCKS_PATH", str(stocks_file))
    monkeypatch.setattr(generator, "fetch_logo", lambda ticker: None)
    generator._catalog.clear()
    generator._logo.clear()
    at = AppTest.from_function(_app, default_timeout=30)
    yield at
    generator._catalog.clear()
    generator._logo.clear()


def _record(at):
    return at.session_state["tx_session"].record


def _text_keys(at):
    return [w.key for w in at.text_input]


def test_initial_render_shows_default_record(page):
    at = page.run()
    assert not at.exception
    assert _record(at) == default_record()
    assert at.text_input(key="f_price").value == "123"
    assert at.text_input(key="f_buy").value == "118"


def test_gain_percent_field_has_sign_and_suffix(page):
    at = page.run()
    assert [w.value for w in at.text_input if w.label == "Realized Gain %"] == ["+4,24%"]

    at.text_input(key="f_price").input("100").run()
    assert [w.value for w in at.text_input if w.label == "Realized Gain %"] == ["-15,25%"]


def test_type_switch_hides_and_restores_buy_price(page):
    at = page.run()

    at.selectbox(key="f_type").set_value("BUY").run()
    assert _record(at).type == TransactionType.BUY
    assert "f_buy" not in _text_keys(at)

    at.selectbox(key="f_type").set_value("SELL").run()
    assert _record(at).type == TransactionType.SELL
    assert at.text_input(key="f_buy").value == "118"


def test_number_input_recalculates(page):
    at = page.run()
    at.text_input(key="f_price").input("200").run()

    record = _record(at)
    assert record.price == 200
    assert record.amount == 1_200_000


def test_search_and_select_stock(page):
    at = page.run()
    at.text_input(key="f_query").input("bank").run()
    at.selectbox(key="f_ticker").set_value("BBCA").run()

    record = _record(at)
    assert (record.ticker, record.company_name, record.board) == (
        "BBCA", "Bank Central Asia Tbk", Board.UTAMA)
    assert at.text_input(key="f_company").value == "Bank Central Asia Tbk"


def test_clearing_search_deselects_stock(page):
    at = page.run()
    at.text_input(key="f_query").input("").run()

    record = _record(at)
    assert (record.ticker, record.company_name, record.board) == ("", "", Board.UTAMA)
    assert at.text_input(key="f_company").value == ""


def test_reset_restores_default_record(page):
    at = page.run()
    at.text_input(key="f_price").input("200").run()
    at.button(key="btn_reset").click().run()

    assert _record(at) == default_record()
    assert at.text_input(key="f_price").value == "123"


def test_manual_ticker_when_stock_list_missing(page, monkeypatch, tmp_path):
    monkeypatch.setenv("CARD_STOCKS_PATH", str(tmp_path / "missing.json"))
    at = page.run()
    assert not at.exception

    at.text_input(key="f_query").input("bbri").run()
    assert _record(at).ticker == "BBRI"


def test_clearing_manual_ticker_deselects_stock(page, monkeypatch, tmp_path):
    monkeypatch.setenv("CARD_STOCKS_PATH", str(tmp_path / "missing.json"))
    at = page.run()
    at.text_input(key="f_query").input("").run()

    record = _record(at)
    assert (record.ticker, record.company_name, record.board) == ("", "", Board.UTAMA)
    assert at.text_input(key="f_company").value == ""
