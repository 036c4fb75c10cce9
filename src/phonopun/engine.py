"""
諧音梗生成引擎 (PunEngine)

負責持有語音鍵解析器與索引快照，並執行查詢流程：

    輸入 -> 讀音 -> 倒排索引取候選 -> 逐一對齊 -> 同文字合併 -> 排序

使用方式:
    from phonopun import PunEngine, load_config

    engine = PunEngine(load_config("dicts/phonopun.json"))
    result = engine.generate("已生一世", ["成语"], ignore_order=False)
    for pun in result["成语"][:5]:
        print(pun.pun, pun.origins)
"""

import threading
from typing import Any, Callable, Dict, Iterable, List, Optional

from phonopun.config import DEFAULT_CONFIG, PunConfig
from phonopun.core.engine_interface import BaseEngine
from phonopun.core.events import LoadEventHandler
from phonopun.core.phonetic_index import CategoryRegistry, IndexSnapshot, PhoneticIndex
from phonopun.core.phonetic_interface import PhoneticKeyResolver
from phonopun.core.types import DictItem, PunResult, RawRecord
from phonopun.loaders import load_sources
from phonopun.matching import ResultAggregator, get_aligner, rank_results


class PunEngine(BaseEngine):
    _engine_name = "pun"

    def __init__(
        self,
        config: Optional[PunConfig] = None,
        *,
        resolver: Optional[PhoneticKeyResolver] = None,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
        on_event: Optional[LoadEventHandler] = None,
    ):
        self._init_logger(verbose=verbose or bool(config and config.verbose), on_timing=on_timing)

        self._config = config or DEFAULT_CONFIG
        self._resolver = resolver
        self._on_event = on_event
        self._snapshot = IndexSnapshot.empty()
        self._rebuild_lock = threading.Lock()
        self._initialized = False

        if config is not None:
            self.reload()

    @property
    def config(self) -> PunConfig:
        return self._config

    @property
    def resolver(self) -> PhoneticKeyResolver:
        if self._resolver is None:
            from phonopun.languages.chinese import PinyinResolver

            self._resolver = PinyinResolver()
        return self._resolver

    @property
    def snapshot(self) -> IndexSnapshot:
        return self._snapshot

    @property
    def item_count(self) -> int:
        return self._snapshot.index.item_count

    def is_initialized(self) -> bool:
        return self._initialized

    def get_backend_stats(self) -> Dict[str, Any]:
        snapshot = self._snapshot
        return {
            "items": snapshot.index.item_count,
            "keys": snapshot.index.key_count,
            **self.resolver.get_cache_stats(),
        }

    # ========== 建立索引 ==========

    def reload(self) -> None:
        """依配置重新載入全部詞庫，完成後整份替換索引"""
        with self._log_timing("PunEngine.reload"):
            self._logger.info("正在根據配置文件構建索引...")
            if self._config.groups is None:
                self._logger.error("未找到詞庫配置")
                with self._rebuild_lock:
                    self._publish(IndexSnapshot.empty())
                return

            registry = CategoryRegistry.from_config(self._config)
            records = load_sources(self._config, on_event=self._on_event)
            self.load(records, registry)
            self._logger.info(f"初始化完成，共 {len(registry.all_types)} 個分類")

    def load(self, records: Iterable[RawRecord], registry: Optional[CategoryRegistry] = None) -> None:
        """
        由原始紀錄建立新的索引快照並發佈

        registry 省略時，以紀錄中出現的分類各自成組。
        """
        with self._rebuild_lock, self._log_timing("PunEngine.load"):
            if registry is None:
                records = list(records)
                registry = CategoryRegistry.from_records(records)
            index = PhoneticIndex.build(records, self.resolver, on_event=self._on_event)
            self._logger.info(f"索引建立完成: {index.item_count} 筆詞條, {index.key_count} 個讀音")
            self._publish(IndexSnapshot(index=index, registry=registry))

    def _publish(self, snapshot: IndexSnapshot) -> None:
        # 單一賦值，查詢端只會看到舊的或新的完整快照
        self._snapshot = snapshot
        self._initialized = True

    # ========== 分類資訊 ==========

    def get_category_map(self) -> Dict[str, List[str]]:
        return self._snapshot.registry.category_map()

    def get_all_types_ordered(self) -> List[str]:
        registry = self._snapshot.registry
        return registry.sort_by_priority(registry.all_types)

    def get_default_selected_types(self) -> List[str]:
        return list(self._snapshot.registry.default_selected)

    def get_display_settings(self) -> Dict[str, int]:
        return {
            "initial_display_size": self._config.initial_display_size,
            "load_more_step": self._config.load_more_step,
        }

    # ========== 查詢 ==========

    def generate(
        self,
        word: Optional[str],
        categories: Optional[List[str]] = None,
        ignore_order: bool = True,
        *,
        fail_policy: str = "degrade",
    ) -> Dict[str, List[PunResult]]:
        """
        生成諧音梗

        Args:
            word: 使用者輸入的詞；空字串回傳每個分類的空串列
            categories: 要查詢的分類；省略時查詢全部分類（依優先順序）
            ignore_order: True 使用無序比對，False 使用有序比對
            fail_policy: "degrade" 時單一詞條比對失敗只記錄並略過；"raise" 直接拋出

        Returns:
            分類 -> 排序後的結果；要求的每個分類都會出現，即使沒有結果
        """
        snapshot = self._snapshot
        registry = snapshot.registry

        search_types = registry.sort_by_priority(categories if categories else registry.all_types)
        result_map: Dict[str, List[PunResult]] = {category: [] for category in search_types}

        if not word:
            return result_map

        with self._log_timing(f"PunEngine.generate({word})"):
            query = self.resolver.resolve_pairs(word)
            if not query:
                return result_map

            # 輸入 "已生一世" (4字)、min_match_count=2 -> 2；輸入 "啊" (1字) -> 1
            min_limit = min(len(query), self._config.min_match_count)

            candidates = self._collect_candidates(snapshot.index, query, result_map, min_limit)
            self._logger.debug(f"  [Candidates] {word}: {len(candidates)} 筆 (min_limit={min_limit})")

            aggregator = ResultAggregator(search_types, prefixed=registry.prefixed)
            aligner = get_aligner(ignore_order)
            for item in candidates:
                try:
                    match = aligner.align(query, item, min_limit)
                except Exception:
                    if fail_policy == "raise":
                        raise
                    self._logger.exception(f"比對失敗，略過詞條: {item.text!r}")
                    continue
                if match is not None:
                    aggregator.add(item, match)

            for category in search_types:
                merged = aggregator.merged(category)
                if merged:
                    ranked = rank_results(merged, self._config.score_tolerance)
                    result_map[category] = [result.to_pun_result() for result in ranked]

        return result_map

    @staticmethod
    def _collect_candidates(index, query, result_map, min_limit) -> List[DictItem]:
        candidates: Dict[DictItem, None] = {}
        for _char, keys in query:
            for item in index.candidates_for(keys):
                # 類型過濾
                if item.category not in result_map:
                    continue
                # 長度剪枝：可比對字數 < min_limit 的詞條不可能達標
                if item.phonetic_length < min_limit:
                    continue
                candidates.setdefault(item, None)
        return list(candidates)
