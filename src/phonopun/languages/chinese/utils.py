"""
中文拼音工具

延遲載入 pypinyin，並提供快取版的單字讀音查詢。
"""

from functools import lru_cache

from phonopun.core.phonetic_interface import EMPTY_KEYS, KeySet, normalize_key

_pypinyin = None


def _get_pypinyin():
    """延遲載入 pypinyin 模組"""
    global _pypinyin
    if _pypinyin is not None:
        return _pypinyin

    try:
        import pypinyin

        _pypinyin = pypinyin
        return _pypinyin
    except ImportError:
        from phonopun.utils.lazy_imports import CHINESE_INSTALL_HINT

        raise ImportError(CHINESE_INSTALL_HINT)


# pypinyin 查詢是建索引時的主要成本，語料中重複字元極多，快取命中率很高
@lru_cache(maxsize=50000)
def cached_char_pinyins(char: str) -> KeySet:
    """快取版單字讀音集合（無聲調，含多音字的全部讀音）"""
    pypinyin = _get_pypinyin()
    readings = pypinyin.pinyin(
        char,
        style=pypinyin.Style.NORMAL,
        heteronym=True,
        errors="ignore",
    )
    if not readings:
        return EMPTY_KEYS
    keys = {normalize_key(py) for group in readings for py in group}
    keys.discard("")
    return frozenset(keys)
