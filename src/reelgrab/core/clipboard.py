from __future__ import annotations

from typing import Protocol

from ..utils.logger import logger
from .errors import ClipboardError


class ClipboardReader(Protocol):
    def read_text(self) -> str: ...


class ClipboardPasteHelper:
    """粘贴助手：从剪贴板读取文本填入输入框，不触发校验或下载。"""

    def __init__(self, reader: ClipboardReader) -> None:
        self.reader = reader

    def paste(self, current: str = "") -> str:
        """Return the text the input should hold after pasting.

        Raises ClipboardError when the host refuses access; callers keep
        ``current`` in that case.
        """
        try:
            text = self.reader.read_text()
        except Exception as exc:
            logger.warning("读取剪贴板失败: {}", exc)
            raise ClipboardError(cause=exc) from exc

        text = (text or "").strip()
        if not text:
            return current
        return text
