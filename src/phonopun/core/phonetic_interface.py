"""
語音鍵解析器抽象基類

將「一個字元」映射為其所有可能讀音的集合 (去聲調後的音節)。
多音字以集合表示，比對時取交集而非相等。
"""

import re
from abc import ABC, abstractmethod
from typing import FrozenSet, List, Tuple

PhoneticKey = str
KeySet = FrozenSet[PhoneticKey]

EMPTY_KEYS: KeySet = frozenset()

_TONE_PATTERN = re.compile(r"\d")


def normalize_key(raw: str) -> PhoneticKey:
    """
    正規化單一讀音

    - 轉小寫
    - 去除數字聲調 (zhong1 -> zhong)
    - ü / u: 統一寫作 v (lü -> lv)
    """
    key = _TONE_PATTERN.sub("", raw.strip().lower())
    return key.replace("u:", "v").replace("ü", "v")


class PhoneticKeyResolver(ABC):
    """
    語音鍵解析器

    子類只需實作 keys_for_char()；其餘方法都建立在它之上。
    同一字元必須永遠得到相同的鍵集合。
    """

    @abstractmethod
    def keys_for_char(self, char: str) -> KeySet:
        """回傳單一字元的讀音集合；無法解析時回傳空集合"""

    def resolve(self, word: str) -> List[KeySet]:
        """
        逐字解析，略過無讀音的字元

        注意：回傳長度可能小於 len(word)，不可假設與原字串逐位對應。
        """
        return [keys for _char, keys in self.resolve_pairs(word)]

    def resolve_pairs(self, word: str) -> List[Tuple[str, KeySet]]:
        """同 resolve()，但保留產生該鍵集合的原字元"""
        pairs = []
        for char in word:
            keys = self.keys_for_char(char)
            if keys:
                pairs.append((char, keys))
        return pairs

    def sequence_for(self, text: str) -> Tuple[KeySet, ...]:
        """與 text 逐字對齊的鍵序列，無讀音的位置為空集合"""
        return tuple(self.keys_for_char(char) for char in text)

    def get_cache_stats(self) -> dict:
        return {}
