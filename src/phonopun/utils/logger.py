"""
日誌與計時工具

本套件預設不安裝任何 handler，交由使用者以標準 logging 控制：

    import logging
    logging.getLogger("phonopun").setLevel(logging.DEBUG)

或直接使用 `enable_debug_logging()` / `PunEngine(verbose=True)`。
"""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, Optional

ROOT_LOGGER_NAME = "phonopun"
TIMING_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.timing"

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """取得 phonopun 命名空間下的 logger (例如 get_logger("engine") -> phonopun.engine)"""
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(level: int = logging.INFO, fmt: str = _DEFAULT_FORMAT) -> logging.Logger:
    """
    為根 logger 安裝一個 StreamHandler

    重複呼叫只會調整等級，不會重複安裝 handler。
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    if not any(getattr(h, "_phonopun_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        handler._phonopun_handler = True
        logger.addHandler(handler)
    for handler in logger.handlers:
        if getattr(handler, "_phonopun_handler", False):
            handler.setLevel(level)
    return logger


def enable_debug_logging() -> None:
    """開啟全部 DEBUG 日誌"""
    setup_logger(level=logging.DEBUG)


def enable_timing_logging() -> None:
    """只開啟計時日誌，其餘維持 INFO"""
    setup_logger(level=logging.INFO)
    logging.getLogger(TIMING_LOGGER_NAME).setLevel(logging.DEBUG)
    for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
        if getattr(handler, "_phonopun_handler", False):
            handler.setLevel(logging.DEBUG)


class TimingContext:
    """
    計時 context manager

    使用方式:
        with TimingContext("PunEngine.generate", logger):
            ...

    結束時以指定等級輸出耗時，並呼叫 callback(operation, elapsed_seconds)。
    """

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
        callback: Optional[Callable[[str, float], None]] = None,
    ):
        self.operation = operation
        self.logger = logger or logging.getLogger(TIMING_LOGGER_NAME)
        self.level = level
        self.callback = callback
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> "TimingContext":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._start
        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, f"[Timing] {self.operation}: {self.elapsed * 1000:.2f}ms")
        if self.callback is not None:
            try:
                self.callback(self.operation, self.elapsed)
            except Exception:
                self.logger.exception("on_timing 回呼執行失敗")
        return False


def log_timing(operation: Optional[str] = None, level: int = logging.DEBUG):
    """計時裝飾器，operation 預設為函式的 qualname"""

    def decorator(func: Callable) -> Callable:
        name = operation or func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            with TimingContext(name, level=level):
                return func(*args, **kwargs)

        return wrapper

    return decorator
