"""页面模块导入与 render 存在性检查。"""
from __future__ import annotations

import importlib


def test_generator_page_imports():
    mod = importlib.import_module("pages.generator")
    assert hasattr(mod, "render")
    assert callable(getattr(mod, "render"))


def test_pages_package_exports():
    pages = importlib.import_module("pages")
    assert callable(pages.page_generator)


def test_num_text():
    from pages.generator import _num_text

    assert _num_text(123.0) == "123"
    assert _num_text(12.5) == "12.5"
    assert _num_text(0) == "0"
