"""
比對模組

- aligners: 有序 / 無序兩種對齊策略
- aggregator: 同分類同文字的結果合併
- ranker: 多鍵排序
"""

from .aggregator import ResultAggregator, apply_annotation_prefix
from .aligners import OrderedAligner, UnorderedAligner, apply_substitutions, get_aligner
from .ranker import compare_merged, rank_results

__all__ = [
    "OrderedAligner",
    "UnorderedAligner",
    "apply_substitutions",
    "get_aligner",
    "ResultAggregator",
    "apply_annotation_prefix",
    "compare_merged",
    "rank_results",
]
