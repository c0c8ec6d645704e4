from __future__ import annotations

from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QApplication

from ...utils.validators import UrlValidator


class ClipboardMonitor(QObject):
    """剪贴板监听组件

    当检测到合法的 Instagram 链接时发出信号。
    """

    instagram_url_detected = Signal(str)

    def __init__(self) -> None:
        super().__init__()
        self.clipboard = QApplication.clipboard()
        self.last_text = ""
        self.clipboard.dataChanged.connect(self._on_clipboard_change)

    def stop(self) -> None:
        self.clipboard.dataChanged.disconnect(self._on_clipboard_change)

    def _on_clipboard_change(self) -> None:
        text = (self.clipboard.text() or "").strip()

        # 去重（防止同一内容触发多次）
        if text == self.last_text:
            return
        self.last_text = text

        if UrlValidator.is_instagram_url(text):
            self.instagram_url_detected.emit(text)


class QtClipboardReader:
    """ClipboardReader backed by the Qt application clipboard."""

    def read_text(self) -> str:
        app = QApplication.instance()
        if app is None:
            raise RuntimeError("QApplication is not running")
        clipboard = QApplication.clipboard()
        if clipboard is None:
            raise RuntimeError("clipboard is unavailable")
        return clipboard.text() or ""
