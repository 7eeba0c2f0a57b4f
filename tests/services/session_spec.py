"""会话状态容器测试。"""
from __future__ import annotations

from config import Board, TransactionType
from services import Stock, TransactionSession, default_record


def test_session_starts_from_default():
    session = TransactionSession()
    assert session.record == default_record()


def test_apply_replaces_current_record():
    session = TransactionSession()
    old = session.record
    new = session.apply({"lot_done": 10})
    assert session.record is new
    assert new.amount == 123 * 10 * 100
    # 旧快照不受影响
    assert old.lot_done == 60


def test_sequential_patches():
    session = TransactionSession()
    session.apply({"type": "BUY"})
    session.apply({"price": 100})
    r = session.apply({"lot_done": 10})
    assert r.type is TransactionType.BUY
    assert r.amount == 100000
    assert r.net_amount == 100150


def test_select_and_deselect_stock():
    session = TransactionSession()
    stock = Stock(code="BBCA", name="Bank Central Asia Tbk", board=Board.UTAMA)
    r = session.select_stock(stock)
    assert (r.ticker, r.company_name, r.board) == ("BBCA", "Bank Central Asia Tbk", Board.UTAMA)

    r = session.select_stock(None)
    assert (r.ticker, r.company_name, r.board) == ("", "", Board.UTAMA)


def test_set_and_clear_icon():
    session = TransactionSession()
    assert session.set_icon("data:image/png;base64,AAAA").icon_url == "data:image/png;base64,AAAA"
    assert session.set_icon(None).icon_url is None


def test_reset():
    session = TransactionSession()
    session.apply({"type": "BUY", "price": 1, "ticker": "X"})
    assert session.reset() == default_record()
    assert session.record == default_record()


def test_sessions_are_independent():
    a, b = TransactionSession(), TransactionSession()
    a.apply({"price": 500})
    assert b.record.price == 123
