"""
THUOCL 詞庫 (清華大學開放中文詞庫)

每行 "詞<TAB>詞頻"。空行、欄位不足、單字詞、詞頻不是整數的行都略過。
"""

from pathlib import Path
from typing import Iterator, Optional

from phonopun.config import DictConfig
from phonopun.core.events import LoadEventHandler
from phonopun.core.types import RawRecord

from .base import read_utf8, skip_record

MIN_WORD_LENGTH = 2


def load_thuocl(
    config: DictConfig,
    path: Path,
    on_event: Optional[LoadEventHandler] = None,
) -> Iterator[RawRecord]:
    for line_no, raw_line in enumerate(read_utf8(path).split("\n"), start=1):
        line = raw_line.strip()
        if not line:
            continue
        parts = [part.strip() for part in line.split("\t") if part.strip()]
        if len(parts) < 2:
            skip_record(config, path, on_event, "missing_frequency", line=line_no, record=line)
            continue
        text = parts[0]
        if len(text) < MIN_WORD_LENGTH:
            continue
        try:
            frequency = int(parts[1])
        except ValueError:
            skip_record(config, path, on_event, "invalid_frequency", line=line_no, record=line)
            continue
        if frequency < 0:
            skip_record(config, path, on_event, "invalid_frequency", line=line_no, record=line)
            continue
        yield RawRecord(text=text, category=config.name, annotation="", frequency=frequency)
