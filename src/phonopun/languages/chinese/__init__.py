"""
中文語音模組

提供基於 pypinyin 的語音鍵解析：每個漢字映射為其全部讀音 (去聲調)，
多音字保留所有讀音以便比對時取交集。

主要類別:
- PinyinResolver: 中文語音鍵解析器

效能優化:
- cached_char_pinyins: 快取版單字讀音查詢
"""

from __future__ import annotations

import importlib
from typing import Any

from phonopun.utils.lazy_imports import CHINESE_INSTALL_HINT

INSTALL_HINT = CHINESE_INSTALL_HINT

_LAZY_IMPORTS = {
    "PinyinResolver": (".resolver", "PinyinResolver"),
    "cached_char_pinyins": (".utils", "cached_char_pinyins"),
}

__all__ = [
    "PinyinResolver",
    "cached_char_pinyins",
    "CHINESE_INSTALL_HINT",
    "INSTALL_HINT",
]


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_path, attr_name = _LAZY_IMPORTS[name]
    module = importlib.import_module(module_path, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))
