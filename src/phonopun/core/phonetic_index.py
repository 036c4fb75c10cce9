"""
語音倒排索引與分類登記

- PhoneticIndex: 讀音 -> 含有該讀音的詞條（任意位置），建好後唯讀
- CategoryRegistry: 選單分組、優先順序、預設勾選、需要前綴註記的分類
- IndexSnapshot: 兩者的不可變組合，重建時整份替換
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from phonopun.core.events import LoadEventHandler, emit_event
from phonopun.core.phonetic_interface import PhoneticKeyResolver
from phonopun.core.types import DictItem, RawRecord
from phonopun.utils.logger import get_logger, log_timing

_logger = get_logger("index")


class PhoneticIndex:
    """
    語音倒排索引

    每個詞條會登記在其語音序列中出現過的每一個讀音之下。
    讀音下的詞條依建立順序保存，確保查詢結果可重現。
    """

    def __init__(self, postings: Mapping[str, Tuple[DictItem, ...]], item_count: int):
        self._postings = dict(postings)
        self._item_count = item_count

    @classmethod
    @log_timing("PhoneticIndex.build")
    def build(
        cls,
        records: Iterable[RawRecord],
        resolver: PhoneticKeyResolver,
        on_event: Optional[LoadEventHandler] = None,
    ) -> "PhoneticIndex":
        """
        由原始紀錄建立索引

        - 逐筆以 resolver 計算語音序列
        - 完全沒有讀音的紀錄直接丟棄
        - 建構 DictItem 失敗（長度不符、詞頻為負）的紀錄記錄後略過
        """
        postings: Dict[str, Dict[DictItem, None]] = {}
        item_count = 0
        dropped = 0

        for record in records:
            try:
                item = DictItem(
                    text=record.text,
                    category=record.category,
                    annotation=record.annotation or "",
                    frequency=int(record.frequency),
                    phonetic_sequence=resolver.sequence_for(record.text),
                )
            except (TypeError, ValueError) as exc:
                _logger.warning(f"略過不合法的詞條 {record.text!r} ({record.category}): {exc}")
                emit_event(on_event, {
                    "type": "item_rejected",
                    "source": record.category,
                    "record": str(record.text),
                    "reason": "invalid_item",
                    "exception_type": type(exc).__name__,
                    "exception_message": str(exc),
                }, _logger)
                continue

            keys = item.distinct_keys()
            if not keys:
                dropped += 1
                continue

            added = False
            for key in keys:
                bucket = postings.setdefault(key, {})
                if item not in bucket:
                    bucket[item] = None
                    added = True
            if added:
                item_count += 1

        if dropped:
            _logger.debug(f"  [Index] 無讀音而丟棄 {dropped} 筆")

        frozen = {key: tuple(bucket) for key, bucket in postings.items()}
        return cls(frozen, item_count)

    @classmethod
    def empty(cls) -> "PhoneticIndex":
        return cls({}, 0)

    def candidates_for(self, keys: Iterable[str]) -> List[DictItem]:
        """回傳登記在任一讀音下的詞條聯集（去重，依讀音排序後的出現順序）"""
        seen: Dict[DictItem, None] = {}
        for key in sorted(keys):
            for item in self._postings.get(key, ()):
                seen.setdefault(item, None)
        return list(seen)

    def items_for(self, key: str) -> Tuple[DictItem, ...]:
        return self._postings.get(key, ())

    @property
    def key_count(self) -> int:
        return len(self._postings)

    @property
    def item_count(self) -> int:
        return self._item_count

    def __contains__(self, key: str) -> bool:
        return key in self._postings

    def __len__(self) -> int:
        return self._item_count


@dataclass(frozen=True)
class CategoryRegistry:
    """
    分類登記

    屬性:
        groups: 分組名稱 -> 該組的詞庫名稱（依插入順序）
        search_order: 設定的優先順序
        default_selected: 預設勾選的分類
        prefixed: 輸出時需加上註記前綴的分類
    """

    groups: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    search_order: Tuple[str, ...] = ()
    default_selected: Tuple[str, ...] = ()
    prefixed: FrozenSet[str] = frozenset()

    @classmethod
    def from_config(cls, config) -> "CategoryRegistry":
        groups: Dict[str, List[str]] = {}
        prefixed = set()
        for group in config.groups or []:
            names = groups.setdefault(group.name, [])
            for dict_config in group.dicts:
                names.append(dict_config.name)
                if dict_config.has_annotation_prefix:
                    prefixed.add(dict_config.name)
        return cls(
            groups={name: tuple(names) for name, names in groups.items()},
            search_order=tuple(config.search_order or ()),
            default_selected=tuple(config.default_dict_names or ()),
            prefixed=frozenset(prefixed),
        )

    @classmethod
    def from_records(cls, records: Sequence[RawRecord], prefixed: Iterable[str] = ()) -> "CategoryRegistry":
        """沒有配置時，以紀錄中出現的分類各自成組"""
        names: Dict[str, None] = {}
        for record in records:
            names.setdefault(record.category, None)
        return cls(
            groups={name: (name,) for name in names},
            prefixed=frozenset(prefixed),
        )

    @property
    def all_types(self) -> List[str]:
        """全部分類（依登記順序，去重）"""
        seen: Dict[str, None] = {}
        for names in self.groups.values():
            for name in names:
                seen.setdefault(name, None)
        return list(seen)

    def priority(self, category: str) -> int:
        """設定順序中的位置；未設定者排在所有已設定分類之後"""
        try:
            return self.search_order.index(category)
        except ValueError:
            return len(self.search_order)

    def sort_by_priority(self, categories: Iterable[str]) -> List[str]:
        """依優先順序穩定排序並去重"""
        unique = list(dict.fromkeys(categories))
        return sorted(unique, key=self.priority)

    def is_prefixed(self, category: str) -> bool:
        return category in self.prefixed

    def category_map(self) -> Dict[str, List[str]]:
        return {name: list(names) for name, names in self.groups.items()}


@dataclass(frozen=True)
class IndexSnapshot:
    """某一資料版本的索引與分類，查詢期間整份使用"""

    index: PhoneticIndex
    registry: CategoryRegistry

    @classmethod
    def empty(cls) -> "IndexSnapshot":
        return cls(PhoneticIndex.empty(), CategoryRegistry())
