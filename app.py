#!/usr/bin/env python3
"""
Stockbit Card Generator - Streamlit 入口

运行：streamlit run app.py
"""
import streamlit as st

from config import PAGE_CONFIG
from config.settings import setup_logging
from pages import page_generator

# 页面配置
st.set_page_config(**PAGE_CONFIG)

setup_logging()


def main():
    """主应用（单页面）"""
    nav = st.navigation([
        st.Page(page_generator, title="Card Generator", icon="🧾", default=True),
    ])
    nav.run()


if __name__ == "__main__":
    main()
