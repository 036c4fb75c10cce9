"""
詞庫載入器

依 DictConfig.loader_type 選擇載入器，輸出 RawRecord 串流。
單一詞庫失敗只會略過該詞庫，其餘照常載入。
"""

from typing import Callable, Dict, Iterator, Optional

from phonopun.config import DictConfig, LoaderType, PunConfig
from phonopun.core.events import LoadEventHandler, emit_event
from phonopun.core.types import RawRecord

from .base import SourceError, logger
from .json_normal import load_json_normal
from .json_riddle import load_json_riddle
from .thuocl import load_thuocl

LOADERS: Dict[LoaderType, Callable] = {
    LoaderType.JSON_NORMAL: load_json_normal,
    LoaderType.JSON_RIDDLE: load_json_riddle,
    LoaderType.THUOCL: load_thuocl,
}


def load_dict(
    config: DictConfig,
    pun_config: PunConfig,
    on_event: Optional[LoadEventHandler] = None,
) -> Iterator[RawRecord]:
    """載入單一詞庫；讀取或解析失敗時記錄、通知並結束，不拋出"""
    if config.loader_type is None or not config.path:
        return
    path = pun_config.resolve_path(config.path)
    loader = LOADERS[config.loader_type]
    count = 0
    try:
        for record in loader(config, path, on_event):
            count += 1
            yield record
    except SourceError as exc:
        logger.warning(f"載入失敗: {config.name} ({path}): {exc}")
        emit_event(on_event, {
            "type": "source_failed",
            "source": config.name,
            "path": str(path),
            "reason": "unreadable",
            "exception_type": type(exc.__cause__ or exc).__name__,
            "exception_message": str(exc),
        }, logger)
        return
    logger.debug(f"  [Load] {config.name}: {count} 筆")


def load_sources(
    pun_config: PunConfig,
    on_event: Optional[LoadEventHandler] = None,
) -> Iterator[RawRecord]:
    """依配置順序載入所有詞庫"""
    for _group, dict_config in pun_config.iter_dicts():
        logger.info(f"加載: {dict_config.name}")
        yield from load_dict(dict_config, pun_config, on_event)


__all__ = [
    "LOADERS",
    "SourceError",
    "load_dict",
    "load_sources",
    "load_json_normal",
    "load_json_riddle",
    "load_thuocl",
]
