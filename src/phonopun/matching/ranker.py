"""
排序

三層比較，並在最後以文字字典序打破平手：
1. 匹配字數 (越多越好)
2. 分數差距超過容忍帶時，分數越高越好
3. 詞頻 (越高越好)

分數容忍帶讓分數相近的結果改由詞頻決定先後。
"""

from functools import cmp_to_key
from typing import Iterable, List

from phonopun.config import ScoringConfig
from phonopun.core.types import MergedResult


def compare_merged(a: MergedResult, b: MergedResult, tolerance: int = ScoringConfig.SCORE_TOLERANCE) -> int:
    """排序比較函式：回傳負數表示 a 排在 b 前面"""
    if a.match_count != b.match_count:
        return b.match_count - a.match_count
    if abs(a.score - b.score) > tolerance:
        return b.score - a.score
    if a.frequency != b.frequency:
        return b.frequency - a.frequency
    if a.final_text != b.final_text:
        return -1 if a.final_text < b.final_text else 1
    return 0


def rank_results(results: Iterable[MergedResult], tolerance: int = ScoringConfig.SCORE_TOLERANCE) -> List[MergedResult]:
    """依 compare_merged 排序，回傳新串列"""
    key = cmp_to_key(lambda a, b: compare_merged(a, b, tolerance))
    return sorted(results, key=key)
