"""
結果合併

同一分類下，不同詞條可能替換出完全相同的文字（例如兩個同音成語），
這些比對以最終文字為鍵合併成一筆 MergedResult，並累積來源文字。
"""

from typing import Dict, Iterable, List, Tuple

from phonopun.config import ScoringConfig
from phonopun.core.types import DictItem, MatchResult, MergedResult


def apply_annotation_prefix(
    match: MatchResult,
    item: DictItem,
    separator: str = ScoringConfig.ANNOTATION_SEPARATOR,
) -> Tuple[str, str, Tuple[int, ...]]:
    """
    為帶註記的詞條加上前綴

    回傳 (顯示文字, 來源文字, 高亮位置)；高亮位置會依前綴長度平移，
    確保仍指向加上前綴後字串中的替換字元。
    """
    if not item.annotation or not item.annotation.strip():
        return match.final_text, item.text, match.indices
    prefix = item.annotation + separator
    offset = len(prefix)
    return (
        prefix + match.final_text,
        prefix + item.text,
        tuple(index + offset for index in match.indices),
    )


class ResultAggregator:
    """
    依分類收集並合併比對結果

    分類與最終文字都以插入順序保存，輸出可重現。
    """

    def __init__(self, categories: Iterable[str], prefixed: Iterable[str] = ()):
        self._groups: Dict[str, Dict[str, MergedResult]] = {category: {} for category in categories}
        self._prefixed = frozenset(prefixed)

    def add(self, item: DictItem, match: MatchResult) -> None:
        group = self._groups.get(item.category)
        if group is None:
            return

        if item.category in self._prefixed:
            display, origin, indices = apply_annotation_prefix(match, item)
        else:
            display, origin, indices = match.final_text, item.text, match.indices

        merged = group.get(display)
        if merged is None:
            merged = MergedResult(
                final_text=display,
                indices=indices,
                match_count=match.match_count,
                score=match.score,
                frequency=item.frequency,
            )
            merged.origins[origin] = None
            group[display] = merged
        else:
            merged.absorb(origin, indices, match.match_count, match.score, item.frequency)

    def merged(self, category: str) -> List[MergedResult]:
        return list(self._groups.get(category, {}).values())
