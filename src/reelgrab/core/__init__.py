"""
ReelGrab 核心基础设施层

- config_manager: 只读配置
- errors: 错误类型
- clipboard: 剪贴板粘贴助手
"""

from .config_manager import ConfigManager, config_manager
from .errors import (
    ClipboardError,
    MissingAssetError,
    NetworkError,
    ReelGrabError,
    RemoteError,
    SaveError,
    ValidationError,
)

__all__ = [
    # 配置管理
    "ConfigManager",
    "config_manager",
    # 错误类型
    "ReelGrabError",
    "ValidationError",
    "ClipboardError",
    "NetworkError",
    "RemoteError",
    "MissingAssetError",
    "SaveError",
]
