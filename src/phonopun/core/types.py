"""
資料模型

- RawRecord: 詞庫載入器輸出的原始紀錄
- DictItem: 建索引後的不可變詞條（預先計算語音鍵序列）
- MatchResult: 單一詞條的比對結果（查詢期間暫存）
- MergedResult: 同分類、同最終文字的合併結果（查詢期間暫存）
- PunResult: 對外輸出
"""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Dict, List, NamedTuple, Tuple

from .phonetic_interface import KeySet


class RawRecord(NamedTuple):
    """載入器輸出的一筆紀錄 (text, category, annotation, frequency)"""

    text: str
    category: str
    annotation: str = ""
    frequency: int = 0


@dataclass(frozen=True)
class DictItem:
    """
    詞條

    屬性:
        text: 實際參與比對的文字（歇後語只含後半句）
        category: 詞庫名稱 (例如 "成语"、"歇后语")
        annotation: 顯示用前綴（歇後語的前半句），其他詞庫為空字串
        frequency: 詞頻，只在排序的最後一層使用
        phonetic_sequence: 與 text 逐字對齊的讀音集合；標點等無讀音字元為空集合
    """

    text: str
    category: str
    annotation: str
    frequency: int
    phonetic_sequence: Tuple[KeySet, ...]

    def __post_init__(self):
        if len(self.phonetic_sequence) != len(self.text):
            raise ValueError(
                f"phonetic_sequence 長度 ({len(self.phonetic_sequence)}) "
                f"與文字長度 ({len(self.text)}) 不符: {self.text!r}"
            )
        if self.frequency < 0:
            raise ValueError(f"frequency 不可為負數: {self.frequency}")

    @cached_property
    def phonetic_length(self) -> int:
        """可參與比對的字數（有讀音的位置數）"""
        return sum(1 for keys in self.phonetic_sequence if keys)

    def distinct_keys(self) -> List[str]:
        """所有位置出現過的讀音，排序後回傳"""
        keys = set()
        for position in self.phonetic_sequence:
            keys.update(position)
        return sorted(keys)


@dataclass(frozen=True)
class MatchResult:
    """比對結果：final_text 為替換後文字，indices 為被替換的位置（遞增）"""

    final_text: str
    match_count: int
    score: int
    indices: Tuple[int, ...]


@dataclass
class MergedResult:
    """
    合併結果

    同一分類下產生相同最終文字的比對會合併成一筆：
    - 匹配字數更多者覆蓋分數、詞頻與高亮位置
    - 匹配字數相同者分數、詞頻各取最大值
    - 來源文字以插入順序累積、不重複
    """

    final_text: str
    indices: Tuple[int, ...]
    match_count: int
    score: int
    frequency: int
    origins: Dict[str, None] = field(default_factory=dict)

    def absorb(self, origin: str, indices: Tuple[int, ...], match_count: int, score: int, frequency: int) -> None:
        self.origins.setdefault(origin, None)
        # 優先保留匹配字數更多的
        if match_count > self.match_count:
            self.match_count = match_count
            self.score = score
            self.frequency = frequency
            self.indices = indices
        elif match_count == self.match_count:
            self.score = max(self.score, score)
            self.frequency = max(self.frequency, frequency)

    def to_pun_result(self) -> "PunResult":
        return PunResult(
            pun=self.final_text,
            origins=list(self.origins),
            highlights=list(self.indices),
        )


@dataclass
class PunResult:
    """對外輸出：pun 為生成的諧音梗，origins 為原詞，highlights 為高亮索引"""

    pun: str
    origins: List[str]
    highlights: List[int]

    def to_dict(self) -> dict:
        return {
            "pun": self.pun,
            "origins": list(self.origins),
            "highlights": list(self.highlights),
        }
