from __future__ import annotations

from PySide6.QtWidgets import QApplication

from qfluentwidgets import FluentIcon, FluentWindow, NavigationItemPosition

from ..core.config_manager import config_manager
from ..download.file_saver import DirectorySaver
from ..download.orchestrator import ReelFetchOrchestrator
from ..service.asset_fetcher import HttpAssetFetcher
from ..service.extraction_client import ExtractionClient
from ..utils.logger import logger
from .components.clipboard_monitor import ClipboardMonitor
from .download_page import DownloadPage


def build_orchestrator() -> ReelFetchOrchestrator:
    return ReelFetchOrchestrator(
        ExtractionClient(),
        HttpAssetFetcher(),
        DirectorySaver(),
        filename=config_manager.get("output_filename"),
    )


class MainWindow(FluentWindow):
    def __init__(self, orchestrator: ReelFetchOrchestrator | None = None) -> None:
        super().__init__()
        self.setWindowTitle("ReelGrab")
        self.resize(900, 600)

        # 居中
        desktop = QApplication.screens()[0].availableGeometry()
        w, h = desktop.width(), desktop.height()
        self.move(w // 2 - self.width() // 2, h // 2 - self.height() // 2)

        self.orchestrator = orchestrator or build_orchestrator()
        self.download_page = DownloadPage(self.orchestrator, self)
        self.addSubInterface(
            self.download_page,
            FluentIcon.DOWNLOAD,
            "Download",
            position=NavigationItemPosition.TOP,
        )

        self.clipboard_monitor: ClipboardMonitor | None = None
        self.set_clipboard_monitor_enabled(bool(config_manager.get("clipboard_auto_detect")))

        logger.info("MainWindow ready, saving to {}", config_manager.get("download_dir"))

    def set_clipboard_monitor_enabled(self, enabled: bool) -> None:
        if not enabled:
            if self.clipboard_monitor is not None:
                self.clipboard_monitor.stop()
                self.clipboard_monitor.deleteLater()
                self.clipboard_monitor = None
            return
        if self.clipboard_monitor is None:
            self.clipboard_monitor = ClipboardMonitor()
            self.clipboard_monitor.instagram_url_detected.connect(self.download_page.set_url)

    def closeEvent(self, event) -> None:
        self.download_page.shutdown()
        super().closeEvent(event)
