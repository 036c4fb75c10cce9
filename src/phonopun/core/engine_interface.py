"""
引擎抽象基類

定義生成引擎的介面，並提供日誌與計時功能。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from phonopun.core.types import PunResult
from phonopun.utils.logger import TimingContext, get_logger, setup_logger


class BaseEngine(ABC):
    """
    引擎抽象基類 (Abstract Base Class)

    職責:
    - 持有索引快照與語音鍵解析器
    - 對外提供查詢與分類資訊
    - 提供日誌與計時功能

    生命週期:
    - Engine 應在應用程式啟動時建立一次
    - 之後可被任意多個執行緒同時查詢
    """

    _engine_name: str = "base"

    def _init_logger(
        self,
        verbose: bool = False,
        on_timing: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self._verbose = verbose
        self._timing_callback = on_timing

        if verbose:
            setup_logger(level=logging.DEBUG)

        self._logger = get_logger(f"engine.{self._engine_name}")

    def _log_timing(self, operation: str) -> TimingContext:
        return TimingContext(
            operation=operation,
            logger=self._logger,
            level=logging.DEBUG,
            callback=self._timing_callback,
        )

    @abstractmethod
    def generate(
        self,
        word: Optional[str],
        categories: Optional[List[str]] = None,
        ignore_order: bool = True,
    ) -> Dict[str, List[PunResult]]:
        pass

    @abstractmethod
    def is_initialized(self) -> bool:
        pass

    @abstractmethod
    def get_backend_stats(self) -> Dict[str, Any]:
        pass
