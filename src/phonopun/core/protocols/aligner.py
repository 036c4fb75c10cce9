"""
Aligner Protocol

定義比對策略的最小介面（輸入 + 詞條 -> 比對結果）。
"""

from typing import Optional, Protocol, Sequence, Tuple, runtime_checkable

from phonopun.core.phonetic_interface import KeySet
from phonopun.core.types import DictItem, MatchResult


@runtime_checkable
class AlignerProtocol(Protocol):
    def align(
        self,
        query: Sequence[Tuple[str, KeySet]],
        item: DictItem,
        min_limit: int,
    ) -> Optional[MatchResult]:
        """對齊輸入與詞條；匹配字數未達 min_limit 時回傳 None"""
        ...
