"""
歇後語 JSON 詞庫

每筆物件有前半句（謎面）與後半句（謎底）。只有謎底參與比對，
謎面作為註記，輸出時加在前面。兩者任一為空白則略過。
"""

from pathlib import Path
from typing import Iterator, Optional

from phonopun.config import DictConfig
from phonopun.core.events import LoadEventHandler
from phonopun.core.types import RawRecord

from .base import is_blank, read_json_array, skip_record

DEFAULT_ANSWER_FIELD = "answer"
DEFAULT_RIDDLE_FIELD = "riddle"


def load_json_riddle(
    config: DictConfig,
    path: Path,
    on_event: Optional[LoadEventHandler] = None,
) -> Iterator[RawRecord]:
    answer_field = config.key_field or DEFAULT_ANSWER_FIELD
    riddle_field = config.extra_field or DEFAULT_RIDDLE_FIELD
    for position, obj in enumerate(read_json_array(path)):
        if not isinstance(obj, dict):
            skip_record(config, path, on_event, "not_an_object", line=position, record=obj)
            continue
        riddle = obj.get(riddle_field)
        answer = obj.get(answer_field)
        if is_blank(riddle) or is_blank(answer):
            continue
        yield RawRecord(
            text=str(answer),
            category=config.name,
            annotation=str(riddle),
            frequency=config.default_freq,
        )
