"""一般 JSON 詞庫：物件陣列，key_field 為詞條文字，extra_field 為選用註記"""

from pathlib import Path
from typing import Iterator, Optional

from phonopun.config import DictConfig
from phonopun.core.events import LoadEventHandler
from phonopun.core.types import RawRecord

from .base import is_blank, read_json_array, skip_record

DEFAULT_KEY_FIELD = "word"


def load_json_normal(
    config: DictConfig,
    path: Path,
    on_event: Optional[LoadEventHandler] = None,
) -> Iterator[RawRecord]:
    key_field = config.key_field or DEFAULT_KEY_FIELD
    for position, obj in enumerate(read_json_array(path)):
        if not isinstance(obj, dict):
            skip_record(config, path, on_event, "not_an_object", line=position, record=obj)
            continue
        text = obj.get(key_field)
        if is_blank(text):
            continue
        extra = obj.get(config.extra_field) if config.extra_field else None
        yield RawRecord(
            text=str(text),
            category=config.name,
            annotation="" if extra is None else str(extra),
            frequency=config.default_freq,
        )
