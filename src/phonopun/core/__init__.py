"""
核心抽象層

定義語音鍵解析介面、資料模型、倒排索引與引擎基類。
"""

from .phonetic_interface import PhoneticKeyResolver, normalize_key
from .phonetic_index import CategoryRegistry, IndexSnapshot, PhoneticIndex
from .types import DictItem, MatchResult, MergedResult, PunResult, RawRecord

__all__ = [
    "PhoneticKeyResolver",
    "normalize_key",
    "PhoneticIndex",
    "CategoryRegistry",
    "IndexSnapshot",
    "RawRecord",
    "DictItem",
    "MatchResult",
    "MergedResult",
    "PunResult",
]
