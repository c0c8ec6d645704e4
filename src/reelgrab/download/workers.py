from __future__ import annotations

from PySide6.QtCore import QThread, Signal

from ..utils.logger import logger
from .orchestrator import ReelFetchOrchestrator


class ReelDownloadWorker(QThread):
    """下载工人：在后台线程执行解析 + 下载 + 保存

    调用方须先在 GUI 线程调用 ``orchestrator.begin()``，拿到 URL 后再启动本线程。
    """

    saved = Signal(str)  # 保存后的文件路径

    def __init__(self, orchestrator: ReelFetchOrchestrator, url: str, parent=None):
        super().__init__(parent)
        self.orchestrator = orchestrator
        self.url = url

    def run(self) -> None:
        logger.debug("ReelDownloadWorker start: {}", self.url)
        artifact = self.orchestrator.run(self.url)
        if artifact is not None and artifact.saved_path:
            self.saved.emit(artifact.saved_path)
