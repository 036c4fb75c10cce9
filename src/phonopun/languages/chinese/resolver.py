"""
中文語音鍵解析器 (PinyinResolver)

以 pypinyin 的多音字模式取得每個漢字的全部讀音，去聲調後作為語音鍵。
pypinyin 讀不出的字元（標點、英數字）回傳空集合，
〇、擴展 B 區以後的漢字與相容漢字也交由 pypinyin 判斷。
"""

from phonopun.core.phonetic_interface import EMPTY_KEYS, KeySet, PhoneticKeyResolver
from phonopun.utils.lazy_imports import check_chinese_dependencies

from .utils import cached_char_pinyins


class PinyinResolver(PhoneticKeyResolver):
    """
    拼音解析器

    範例:
        >>> resolver = PinyinResolver()
        >>> resolver.resolve("中a国")
        [frozenset({'zhong'}), frozenset({'guo'})]
    """

    def __init__(self):
        check_chinese_dependencies()

    def keys_for_char(self, char: str) -> KeySet:
        if not char:
            return EMPTY_KEYS
        return cached_char_pinyins(char)

    def get_cache_stats(self) -> dict:
        info = cached_char_pinyins.cache_info()
        return {
            "pinyin": {
                "hits": info.hits,
                "misses": info.misses,
                "maxsize": info.maxsize,
                "currsize": info.currsize,
            }
        }
