"""
下载编排

- orchestrator: ReelFetchOrchestrator（核心流水线）
- file_saver: 文件落盘
- workers: 后台线程（依赖 Qt，需单独导入）
"""

from .file_saver import DirectorySaver, FileSaver
from .orchestrator import FetchState, Notice, ReelFetchOrchestrator

__all__ = [
    "DirectorySaver",
    "FetchState",
    "FileSaver",
    "Notice",
    "ReelFetchOrchestrator",
]
