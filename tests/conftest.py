"""
共用測試工具

DictResolver 是測試用的語音鍵解析器：
- 避免依賴 pypinyin 字典版本造成的讀音波動
- 讀音完全可控，便於驗證對齊、計分與合併
"""

from __future__ import annotations

import pytest

from phonopun.core.phonetic_interface import EMPTY_KEYS, PhoneticKeyResolver
from phonopun.core.types import DictItem

READINGS = {
    "一": {"yi"}, "衣": {"yi"}, "医": {"yi"}, "已": {"yi"}, "意": {"yi"},
    "生": {"sheng"}, "声": {"sheng"}, "升": {"sheng"},
    "世": {"shi"}, "事": {"shi"}, "是": {"shi"}, "十": {"shi"}, "师": {"shi"},
    "心": {"xin"}, "新": {"xin"},
    "行": {"xing", "hang"}, "型": {"xing"}, "航": {"hang"},
    "马": {"ma"}, "妈": {"ma"},
    "到": {"dao"}, "道": {"dao"},
    "成": {"cheng"}, "功": {"gong"}, "公": {"gong"},
    "万": {"wan"}, "如": {"ru"},
}


class DictResolver(PhoneticKeyResolver):
    """以固定字典查讀音；未登記的字元視為無讀音"""

    def __init__(self, readings=None):
        self.readings = {char: frozenset(keys) for char, keys in (readings or READINGS).items()}
        self.calls = 0

    def keys_for_char(self, char: str):
        self.calls += 1
        return self.readings.get(char, EMPTY_KEYS)


@pytest.fixture
def resolver():
    return DictResolver()


@pytest.fixture
def make_item(resolver):
    def _make(text, category="成语", annotation="", frequency=0):
        return DictItem(
            text=text,
            category=category,
            annotation=annotation,
            frequency=frequency,
            phonetic_sequence=resolver.sequence_for(text),
        )

    return _make


@pytest.fixture
def make_query(resolver):
    return resolver.resolve_pairs
