"""
比對策略

兩種對齊方式，每次查詢只使用其中一種：

- OrderedAligner: 有序比對。匹配位置在詞條中必須單調前進，
  允許跳過輸入字元與詞條字元，相鄰匹配有連貫加分。
- UnorderedAligner: 無序比對。貪心地為每個輸入字元認領詞條中
  第一個尚未被認領、且讀音有交集的位置，不計連貫加分。

兩者都把被匹配的詞條字元替換為對應的輸入字元，產生最終文字。
"""

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from phonopun.config import ScoringConfig
from phonopun.core.phonetic_interface import KeySet
from phonopun.core.types import DictItem, MatchResult

Query = Sequence[Tuple[str, KeySet]]


def apply_substitutions(text: str, replacements: Mapping[int, str]) -> str:
    """將 text 中指定位置的字元替換為新字元，超出範圍的位置忽略"""
    if not replacements:
        return text
    chars = list(text)
    for index, char in replacements.items():
        if 0 <= index < len(chars):
            chars[index] = char
    return "".join(chars)


class OrderedAligner:
    """
    有序比對 (支援跳字匹配)

    以每個輸入位置 i 作為起點各掃描一次：
    游標從詞條開頭出發，對 i 之後的每個輸入字元，向後尋找第一個讀音有交集的
    詞條位置；找到就記錄、游標移到其後。每次匹配得 MATCH_POINTS 分，
    若與上一個匹配位置相鄰再加 ADJACENCY_BONUS。

    起點之間取匹配字數最多者，同字數取分數較高者；字數未達 min_limit 的起點不採用。
    """

    def __init__(self, scoring=ScoringConfig):
        self.match_points = scoring.MATCH_POINTS
        self.adjacency_bonus = scoring.ADJACENCY_BONUS

    def align(self, query: Query, item: DictItem, min_limit: int) -> Optional[MatchResult]:
        dict_keys = item.phonetic_sequence
        best: Optional[MatchResult] = None

        for start in range(len(query)):
            indices: List[int] = []
            replacements: Dict[int, str] = {}
            cursor = 0
            score = 0

            for char, keys in query[start:]:
                found_at = _find_from(dict_keys, keys, cursor)
                if found_at < 0:
                    continue
                # 記錄替換：詞條第 found_at 個字 -> 輸入字元
                replacements[found_at] = char
                score += self.match_points
                if indices and found_at == indices[-1] + 1:
                    score += self.adjacency_bonus
                indices.append(found_at)
                cursor = found_at + 1
                if cursor >= len(dict_keys):
                    break

            match_count = len(indices)
            if match_count < min_limit:
                continue
            if (
                best is None
                or match_count > best.match_count
                or (match_count == best.match_count and score > best.score)
            ):
                best = MatchResult(
                    final_text=apply_substitutions(item.text, replacements),
                    match_count=match_count,
                    score=score,
                    indices=tuple(indices),
                )
        return best


class UnorderedAligner:
    """無序比對 (貪心，每個詞條位置最多被認領一次)"""

    def __init__(self, scoring=ScoringConfig):
        self.match_points = scoring.MATCH_POINTS

    def align(self, query: Query, item: DictItem, min_limit: int) -> Optional[MatchResult]:
        dict_keys = item.phonetic_sequence
        used = [False] * len(dict_keys)
        replacements: Dict[int, str] = {}
        score = 0

        for char, keys in query:
            for position, candidate_keys in enumerate(dict_keys):
                if used[position] or keys.isdisjoint(candidate_keys):
                    continue
                used[position] = True
                replacements[position] = char
                score += self.match_points
                break

        match_count = len(replacements)
        if match_count < min_limit:
            return None
        return MatchResult(
            final_text=apply_substitutions(item.text, replacements),
            match_count=match_count,
            score=score,
            indices=tuple(sorted(replacements)),
        )


def _find_from(dict_keys: Sequence[KeySet], keys: KeySet, cursor: int) -> int:
    for position in range(cursor, len(dict_keys)):
        if not keys.isdisjoint(dict_keys[position]):
            return position
    return -1


_ORDERED = OrderedAligner()
_UNORDERED = UnorderedAligner()


def get_aligner(ignore_order: bool):
    """ignore_order=True 使用無序比對，否則使用有序比對"""
    return _UNORDERED if ignore_order else _ORDERED
