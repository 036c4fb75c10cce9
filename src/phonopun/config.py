"""
全域配置模組

詞庫分組、搜尋優先順序、最低匹配字數等設定。

使用方式:
    from phonopun import PunEngine, load_config

    engine = PunEngine(load_config("dicts/phonopun.json"))

    # 或直接以 dict 建立
    config = PunConfig.from_dict({
        "search_order": ["成语", "歇后语"],
        "groups": [{"name": "经典", "dicts": [...]}],
    })

JSON 鍵名同時接受 snake_case (search_order) 與 camelCase (searchOrder)。
"""

import json
import logging
import re
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


class ScoringConfig:
    """比對計分常數"""

    # 每匹配一個字的基本分
    MATCH_POINTS = 10

    # 有序比對中，與上一個匹配位置相鄰時的連貫加分
    ADJACENCY_BONUS = 20

    # 排序時分數差距在此範圍內視為同分，改比詞頻
    # 經驗值，未針對任意語料驗證過
    SCORE_TOLERANCE = 10

    # 歇後語前後半句的連接符
    ANNOTATION_SEPARATOR = "——"


class LoaderType(Enum):
    JSON_NORMAL = "json_normal"
    JSON_RIDDLE = "json_riddle"
    THUOCL = "thuocl"

    @classmethod
    def parse(cls, value: Union[str, "LoaderType", None]) -> Optional["LoaderType"]:
        if value is None or isinstance(value, LoaderType):
            return value
        name = str(value).strip().lower()
        if name == "json_xiehouyu":
            return cls.JSON_RIDDLE
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"未知的 loader_type: {value!r}") from None


@dataclass
class DictConfig:
    """
    單一詞庫設定

    屬性:
        name: 詞庫名稱，同時是結果的分類名稱
        path: 檔案路徑（相對路徑以 PunConfig.base_dir 為基準）
        loader_type: 載入器類型；為 None 時只登記分類，不載入資料
        key_field: JSON 中作為比對文字的欄位
        extra_field: JSON 中作為前綴註記的欄位
        default_freq: 未提供詞頻時的預設值
        annotation_prefix: 輸出時是否把註記加在前面；None 表示只有歇後語載入器開啟
    """

    name: str
    path: Optional[str] = None
    loader_type: Optional[LoaderType] = None
    key_field: Optional[str] = None
    extra_field: Optional[str] = None
    default_freq: int = 0
    annotation_prefix: Optional[bool] = None

    def __post_init__(self):
        self.loader_type = LoaderType.parse(self.loader_type)
        if self.default_freq < 0:
            raise ValueError(f"default_freq 不可為負數: {self.name}")

    @property
    def has_annotation_prefix(self) -> bool:
        if self.annotation_prefix is not None:
            return self.annotation_prefix
        return self.loader_type is LoaderType.JSON_RIDDLE


@dataclass
class GroupConfig:
    """詞庫分組（選單顯示用）"""

    name: str
    dicts: List[DictConfig] = field(default_factory=list)


@dataclass
class PunConfig:
    """
    生成器配置

    屬性:
        search_order: 分類優先順序；未列出的分類排在最後並保持原順序
        default_dict_names: 預設勾選的分類
        groups: 詞庫分組；為 None 表示找不到詞庫配置
        initial_display_size: 前端初始顯示筆數
        load_more_step: 前端每次載入更多的筆數
        min_match_count: 最低匹配字數（輸入較短時自動降為輸入長度）
        score_tolerance: 排序時的分數容忍帶
        base_dir: 相對路徑的基準目錄
        verbose: 是否開啟詳細日誌
    """

    search_order: List[str] = field(default_factory=list)
    default_dict_names: List[str] = field(default_factory=list)
    groups: Optional[List[GroupConfig]] = None
    initial_display_size: int = 20
    load_more_step: int = 40
    min_match_count: int = 2
    score_tolerance: int = ScoringConfig.SCORE_TOLERANCE
    base_dir: Optional[Path] = None
    verbose: bool = False

    def __post_init__(self):
        if self.min_match_count < 1:
            raise ValueError(f"min_match_count 必須 >= 1: {self.min_match_count}")
        if self.score_tolerance < 0:
            raise ValueError(f"score_tolerance 不可為負數: {self.score_tolerance}")
        if self.base_dir is not None:
            self.base_dir = Path(self.base_dir)
        configure_logging(self.verbose)

    def iter_dicts(self):
        """依配置順序走訪 (group, dict)"""
        for group in self.groups or []:
            for dict_config in group.dicts:
                yield group, dict_config

    def resolve_path(self, path: str) -> Path:
        resolved = Path(path)
        if not resolved.is_absolute() and self.base_dir is not None:
            resolved = self.base_dir / resolved
        return resolved

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: Optional[Path] = None) -> "PunConfig":
        """
        由 dict 建立配置（接受 camelCase 鍵名，也接受外層 {"pun": {...}} 包裝）

        Raises:
            ValueError: 結構不符（缺少 name、groups 不是陣列等）或欄位值不合法
        """
        if not isinstance(data, dict):
            raise ValueError(f"配置必須是物件: {type(data).__name__}")
        data = _snake_keys(data.get("pun", data))
        if not isinstance(data, dict):
            raise ValueError("pun 區段必須是物件")

        groups = data.get("groups")
        if groups is not None:
            groups = [_parse_group(group, position) for position, group in enumerate(_as_list(groups, "groups"))]

        kwargs = _known(cls, data)
        for name in _INT_FIELDS:
            if name in kwargs:
                kwargs[name] = _as_int(kwargs[name], name)
        kwargs["groups"] = groups
        kwargs["search_order"] = _as_names(data.get("search_order"), "search_order")
        kwargs["default_dict_names"] = _as_names(data.get("default_dict_names"), "default_dict_names")
        if base_dir is not None and "base_dir" not in data:
            kwargs["base_dir"] = base_dir
        return cls(**kwargs)


def load_config(path: Union[str, Path]) -> PunConfig:
    """
    從 JSON 檔讀取配置

    相對的詞庫路徑以配置檔所在目錄為基準。

    Raises:
        FileNotFoundError: 配置檔不存在
        ValueError: JSON 格式錯誤或欄位值不合法
    """
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValueError(f"配置檔 JSON 格式錯誤: {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"配置檔最外層必須是物件: {config_path}")
    return PunConfig.from_dict(data, base_dir=config_path.resolve().parent)


_CAMEL_PATTERN = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {_CAMEL_PATTERN.sub("_", str(k)).lower(): _snake_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_snake_keys(v) for v in value]
    return value


def _known(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}


_INT_FIELDS = ("initial_display_size", "load_more_step", "min_match_count", "score_tolerance")


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} 必須是整數: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} 必須是整數: {value!r}") from None


def _as_list(value: Any, name: str) -> list:
    if not isinstance(value, list):
        raise ValueError(f"{name} 必須是陣列: {value!r}")
    return value


def _as_names(value: Any, name: str) -> List[str]:
    if value is None:
        return []
    return [str(item) for item in _as_list(value, name)]


def _require_name(obj: Any, where: str) -> str:
    if not isinstance(obj, dict):
        raise ValueError(f"{where} 必須是物件: {obj!r}")
    name = obj.get("name")
    if name is None or not str(name).strip():
        raise ValueError(f"{where} 缺少 name")
    return str(name)


def _parse_group(group: Any, position: int) -> GroupConfig:
    name = _require_name(group, f"groups[{position}]")
    dicts = []
    for index, entry in enumerate(_as_list(group.get("dicts") or [], f"groups[{position}].dicts")):
        _require_name(entry, f"groups[{position}].dicts[{index}]")
        kwargs = _known(DictConfig, entry)
        kwargs["name"] = str(kwargs["name"])
        if kwargs.get("path") is not None:
            kwargs["path"] = str(kwargs["path"])
        if "default_freq" in kwargs:
            kwargs["default_freq"] = _as_int(kwargs["default_freq"], "default_freq")
        dicts.append(DictConfig(**kwargs))
    return GroupConfig(name=name, dicts=dicts)


DEFAULT_CONFIG = PunConfig(groups=[])
