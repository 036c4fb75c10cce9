"""
phonopun - 諧音梗生成器 (Sound-alike Pun Generator)

核心概念：
- 詞庫（成語、歇後語、各領域詞表）逐字轉為讀音集合，建立倒排索引
- 使用者輸入一個詞，以讀音找出候選詞條
- 將詞條中讀音相近的字替換為輸入的字，保留原句的節奏

官方入口（穩定 API）：
- `phonopun.PunEngine`
- `phonopun.load_config` / `phonopun.PunConfig`
"""

# =============================================================================
# 配置
# =============================================================================
from phonopun.config import DictConfig, GroupConfig, LoaderType, PunConfig, ScoringConfig, load_config

# =============================================================================
# Engine 層（官方入口）
# =============================================================================
from phonopun.engine import PunEngine

# =============================================================================
# 資料模型
# =============================================================================
from phonopun.core.types import DictItem, PunResult, RawRecord
from phonopun.core.phonetic_interface import PhoneticKeyResolver

# =============================================================================
# 日誌工具
# =============================================================================
from phonopun.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

# =============================================================================
# 依賴檢查工具
# =============================================================================
from phonopun.utils.lazy_imports import check_chinese_dependencies, is_chinese_available

__all__ = [
    # Engine
    "PunEngine",
    # Config
    "PunConfig",
    "GroupConfig",
    "DictConfig",
    "LoaderType",
    "ScoringConfig",
    "load_config",
    # Models
    "RawRecord",
    "DictItem",
    "PunResult",
    "PhoneticKeyResolver",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
    # Dependency checks
    "is_chinese_available",
    "check_chinese_dependencies",
]

__version__ = "0.1.0"
