"""
載入器共用工具

載入錯誤都是局部的：壞掉的單筆紀錄只略過該筆，讀不到的檔案只略過該詞庫。
"""

import json
from pathlib import Path
from typing import Any, Optional

from phonopun.config import DictConfig
from phonopun.core.events import LoadEvent, LoadEventHandler, emit_event
from phonopun.utils.logger import get_logger

logger = get_logger("loader")


class SourceError(Exception):
    """整個詞庫無法讀取或解析"""


def read_utf8(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(f"無法讀取 {path}: {exc}") from exc


def read_json_array(path: Path) -> list:
    try:
        data = json.loads(read_utf8(path))
    except json.JSONDecodeError as exc:
        raise SourceError(f"JSON 格式錯誤 {path}: {exc}") from exc
    if not isinstance(data, list):
        raise SourceError(f"最外層必須是陣列: {path}")
    return data


def is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def skip_record(
    config: DictConfig,
    path: Path,
    on_event: Optional[LoadEventHandler],
    reason: str,
    *,
    line: Optional[int] = None,
    record: Any = None,
) -> None:
    """記錄並通知被略過的單筆紀錄"""
    logger.warning(f"略過紀錄 {config.name}: {reason} (line={line})")
    event: LoadEvent = {
        "type": "record_skipped",
        "source": config.name,
        "path": str(path),
        "reason": reason,
    }
    if line is not None:
        event["line"] = line
    if record is not None:
        event["record"] = str(record)[:200]
    emit_event(on_event, event, logger)
