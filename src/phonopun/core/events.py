"""
事件模型（Event Model）

詞庫載入失敗不應中止啟動，也不應「默默」吞掉。
載入器會記錄 warning，並透過事件回呼通知呼叫端哪些紀錄或詞庫被略過。
"""

from __future__ import annotations

from typing import Callable, Literal, TypedDict


class LoadEvent(TypedDict, total=False):
    type: Literal["record_skipped", "source_failed", "item_rejected"]
    source: str
    path: str

    # record_skipped / item_rejected
    line: int
    record: str

    # diagnostics
    reason: str
    exception_type: str
    exception_message: str


LoadEventHandler = Callable[[LoadEvent], None]


def emit_event(handler: LoadEventHandler | None, event: LoadEvent, logger) -> None:
    """呼叫事件回呼；回呼本身失敗只記錄，不影響載入流程"""
    if handler is None:
        return
    try:
        handler(event)
    except Exception:
        logger.exception("on_event 回呼執行失敗")
