"""
延遲導入與依賴檢查

pypinyin 只在第一次真正需要讀音時才載入，讓 `import phonopun` 保持輕量。
"""

import importlib.util

CHINESE_INSTALL_HINT = (
    "缺少中文依賴 pypinyin。請執行:\n"
    "  pip install phonopun\n"
    "或單獨安裝:\n"
    "  pip install pypinyin"
)


def is_chinese_available() -> bool:
    """檢查 pypinyin 是否已安裝"""
    return importlib.util.find_spec("pypinyin") is not None


def check_chinese_dependencies() -> None:
    """缺少 pypinyin 時拋出帶安裝提示的 ImportError"""
    if not is_chinese_available():
        raise ImportError(CHINESE_INSTALL_HINT)
