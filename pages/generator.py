"""卡片生成页面 — 左侧表单 · 右侧预览 · HTML 下载"""
import logging
from typing import List, Optional

import streamlit as st

from api.logo import fetch_logo
from config import ACCEPTED_ICON_EXTENSIONS, TransactionType
from models import TransactionRecord
from services import (
    IconUploadError,
    StockCatalog,
    StockCatalogError,
    TransactionSession,
    encode_icon,
    parse_number,
    resolve_icon,
)
from ui import UI, card_document, card_filename, render_card_html
from utils.format import format_decimal, format_number, format_percent

logger = logging.getLogger(__name__)

SESSION_KEY = "tx_session"
ICON_ERROR_KEY = "icon_error"

# 数值输入框 → 记录字段
NUMBER_FIELDS = {
    "f_price": "price",
    "f_lot": "lot_done",
    "f_buy": "buy_price",
}

DISCLAIMER = [
    "[ID] Tool ini dibuat untuk pembelajaran pribadi (belajar CSS dan image generator). "
    "Dilarang menggunakan hasil tool ini untuk penipuan atau aktivitas ilegal lainnya.",
    "[EN] This tool was created for personal learning (CSS and image generator). "
    "Using this tool for fraud or other illegal activities is prohibited.",
]


# ═══════════════════════════════════════════════════════
#  缓存资源
# ═══════════════════════════════════════════════════════

@st.cache_resource
def _catalog() -> StockCatalog:
    return StockCatalog.load()


@st.cache_data(ttl=86400, show_spinner=False)
def _logo(ticker: str) -> Optional[bytes]:
    """Stockbit logo（缓存 24 小时）"""
    return fetch_logo(ticker)


def _load_catalog() -> Optional[StockCatalog]:
    try:
        return _catalog()
    except StockCatalogError as exc:
        logger.error("股票列表加载失败: %s", exc)
        return None


# ═══════════════════════════════════════════════════════
#  会话 / 表单状态同步
# ═══════════════════════════════════════════════════════

def _num_text(value: float) -> str:
    """123.0 → '123'，12.5 → '12.5'"""
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def _sync_inputs(record: TransactionRecord) -> None:
    """记录 → 表单控件状态（初始化 / 重置 / 选择股票后调用）"""
    st.session_state["f_type"] = record.type.value
    st.session_state["f_query"] = record.ticker
    st.session_state["f_ticker"] = record.ticker or None
    st.session_state["f_date"] = record.date
    st.session_state["f_company"] = record.company_name
    st.session_state["f_price"] = _num_text(record.price)
    st.session_state["f_lot"] = _num_text(record.lot_done)
    st.session_state["f_buy"] = _num_text(record.buy_price)


def _session() -> TransactionSession:
    if SESSION_KEY not in st.session_state:
        session = TransactionSession()
        st.session_state[SESSION_KEY] = session
        _sync_inputs(session.record)
    return st.session_state[SESSION_KEY]


# ── 控件回调 ──

def _on_type():
    _session().apply({"type": st.session_state["f_type"]})


def _on_number(key: str):
    _session().apply({NUMBER_FIELDS[key]: parse_number(st.session_state[key])})


def _on_date():
    value = st.session_state["f_date"]
    if value is not None:
        _session().apply({"date": value})


def _on_company():
    _session().apply({"company_name": st.session_state["f_company"]})


def _on_query():
    # 清空搜索框等同于取消选择
    if not (st.session_state["f_query"] or "").strip():
        record = _session().select_stock(None)
        st.session_state["f_ticker"] = None
        st.session_state["f_company"] = record.company_name


def _on_ticker():
    code = st.session_state["f_ticker"]
    catalog = _load_catalog()
    stock = catalog.get(code) if (catalog and code) else None
    record = _session().select_stock(stock)
    st.session_state["f_query"] = record.ticker
    st.session_state["f_company"] = record.company_name


def _on_free_ticker():
    # 股票列表不可用时的手动输入
    ticker = (st.session_state["f_query"] or "").strip().upper()
    if not ticker:
        # 清空等同于取消选择：公司名、板块一并清空
        record = _session().select_stock(None)
        st.session_state["f_company"] = record.company_name
        return
    _session().apply({"ticker": ticker})


def _on_icon_upload():
    uploaded = st.session_state.get("f_icon")
    st.session_state[ICON_ERROR_KEY] = ""
    if uploaded is None:
        return
    try:
        data_uri = encode_icon(uploaded.getvalue(), uploaded.type)
    except IconUploadError as exc:
        logger.info("logo 上传被拒绝: %s", exc)
        st.session_state[ICON_ERROR_KEY] = str(exc)
        return
    _session().set_icon(data_uri)


def _on_icon_reset():
    _session().set_icon(None)


def _on_reset():
    record = _session().reset()
    _sync_inputs(record)


# ═══════════════════════════════════════════════════════
#  页面
# ═══════════════════════════════════════════════════════

def render():
    UI.inject_css()
    session = _session()

    left, right = st.columns(2, gap="large")

    with left:
        UI.header("Stockbit Card Generator", "Generate transaction card images for learning")
        _form(session)
        UI.disclaimer(DISCLAIMER)

    with right:
        _preview(session.record)


def _ticker_options(catalog: StockCatalog, query: str, current: str) -> List[str]:
    options = [s.code for s in catalog.search(query)]
    # 当前选中的代码必须在选项里，否则 selectbox 会丢失选择
    if current and current not in options:
        options.insert(0, current)
    return options


def _form(session: TransactionSession):
    record = session.record
    catalog = _load_catalog()

    # Row 1: Type · Ticker · Date
    c1, c2, c3 = st.columns([1, 2, 1])
    c1.selectbox("Type", [t.value for t in TransactionType], key="f_type", on_change=_on_type)
    if catalog is None:
        c2.text_input("Ticker", key="f_query", on_change=_on_free_ticker,
                      placeholder="APEX")
        c2.caption("Stock list unavailable, enter the ticker manually.")
    else:
        query = c2.text_input("Search ticker", key="f_query", on_change=_on_query,
                              placeholder="Search ticker...")
        c2.selectbox(
            "Ticker",
            _ticker_options(catalog, query, record.ticker),
            key="f_ticker",
            on_change=_on_ticker,
            placeholder="Select a stock",
            format_func=lambda code: _ticker_label(catalog, code),
        )
    c3.date_input("Date", key="f_date", on_change=_on_date)

    # Row 2: Company name · Logo
    st.text_input("Company Name", key="f_company", on_change=_on_company)
    _icon_inputs(record)

    # Row 3: Price · Lot Done
    c4, c5 = st.columns(2)
    c4.text_input("Price", key="f_price", on_change=_on_number, args=("f_price",))
    c5.text_input("Lot Done", key="f_lot", on_change=_on_number, args=("f_lot",))

    # Row 4: 派生字段（只读）
    c6, c7, c8 = st.columns(3)
    UI.readonly("Amount", format_number(record.amount), container=c6)
    UI.readonly("Total Fee", format_number(record.total_fee), container=c7)
    UI.readonly("Net Amount", format_number(record.net_amount), container=c8)

    # Row 5: 仅 SELL：成本价 + 已实现盈亏
    if record.is_sell:
        c9, c10, c11 = st.columns(3)
        # 控件隐藏期间 streamlit 会清掉它的状态，重新显示时从记录恢复
        if "f_buy" not in st.session_state:
            st.session_state["f_buy"] = _num_text(record.buy_price)
        c9.text_input("Buy Price", key="f_buy", on_change=_on_number, args=("f_buy",))
        UI.readonly("Realized Gain", format_decimal(record.realized_gain), container=c10)
        UI.readonly("Realized Gain %", format_percent(record.realized_gain_percent), container=c11)

    st.button("Reset form", key="btn_reset", on_click=_on_reset)


def _ticker_label(catalog: StockCatalog, code: str) -> str:
    stock = catalog.get(code)
    return f"{code} · {stock.name}" if stock else code


def _icon_inputs(record: TransactionRecord):
    c1, c2 = st.columns([3, 1])
    c1.file_uploader(
        "Upload logo",
        type=list(ACCEPTED_ICON_EXTENSIONS),
        key="f_icon",
        on_change=_on_icon_upload,
    )
    if record.icon_url:
        c2.button("Reset to default", key="btn_icon_reset", on_click=_on_icon_reset)
    error = st.session_state.get(ICON_ERROR_KEY)
    if error:
        UI.error(error)


def _preview(record: TransactionRecord):
    logo = None if record.icon_url else _logo(record.ticker)
    icon = resolve_icon(record.ticker, record.icon_url, logo)

    with UI.preview_panel():
        h1, h2 = st.columns([3, 1])
        h1.markdown("#### Preview")
        h2.download_button(
            "Download",
            data=card_document(record, icon),
            file_name=card_filename(record),
            mime="text/html",
            key="btn_download",
        )
        UI.card(render_card_html(record, icon))
        UI.footer("Made by", "zsbahtiar", "https://github.com/zsbahtiar")
