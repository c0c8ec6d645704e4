from __future__ import annotations

from PySide6.QtCore import QObject, Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QVBoxLayout, QWidget

from qfluentwidgets import (
    BodyLabel,
    CaptionLabel,
    CardWidget,
    FluentIcon,
    IconWidget,
    InfoBar,
    InfoBarPosition,
    LineEdit,
    PrimaryPushButton,
    PushButton,
    SubtitleLabel,
)

from ..core.clipboard import ClipboardPasteHelper
from ..core.errors import ClipboardError
from ..download.orchestrator import FetchState, Notice, ReelFetchOrchestrator
from ..download.workers import ReelDownloadWorker
from ..utils.translator import translate_error
from .components.clipboard_monitor import QtClipboardReader


class OrchestratorBridge(QObject):
    """把编排器的回调（可能来自工作线程）转成 Qt 信号，回到 GUI 线程处理。"""

    state_changed = Signal(bool)  # busy
    notice = Signal(object)

    def __init__(self, orchestrator: ReelFetchOrchestrator, parent=None) -> None:
        super().__init__(parent)
        self._unsubscribe = [
            orchestrator.subscribe(lambda s: self.state_changed.emit(s is FetchState.IN_FLIGHT)),
            orchestrator.on_notice(self.notice.emit),
        ]

    def detach(self) -> None:
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []


class DownloadPage(QWidget):
    """下载页面

    粘贴 Instagram 链接，点击下载（或回车）即可保存视频。
    """

    FEATURES = (
        (FluentIcon.SPEED_HIGH, "Lightning Fast", "Download your favorite reels in seconds"),
        (FluentIcon.VIDEO, "High Quality", "Get reels in their original quality without any compression"),
        (FluentIcon.CERTIFICATE, "Secure & Private", "Nothing is stored. Videos go straight to your download folder"),
    )

    def __init__(self, orchestrator: ReelFetchOrchestrator, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName("downloadPage")
        self.orchestrator = orchestrator
        self.paste_helper = ClipboardPasteHelper(QtClipboardReader())
        self._worker: ReelDownloadWorker | None = None

        self.setStyleSheet("""
            #downloadPage {
                background-color: #F5F5F5;
            }
        """)

        self.vBoxLayout = QVBoxLayout(self)
        self.vBoxLayout.setContentsMargins(30, 30, 30, 30)
        self.vBoxLayout.setSpacing(0)

        self.centerWidget = QWidget(self)
        self.centerLayout = QVBoxLayout(self.centerWidget)
        self.centerLayout.setContentsMargins(0, 0, 0, 0)
        self.centerLayout.setSpacing(20)
        self.centerLayout.setAlignment(Qt.AlignmentFlag.AlignHCenter)

        self.vBoxLayout.addStretch(1)
        self.vBoxLayout.addWidget(self.centerWidget, 0, Qt.AlignmentFlag.AlignHCenter)
        self.vBoxLayout.addStretch(1)

        # 1. 标题
        self.titleLabel = SubtitleLabel("ReelGrab", self)
        self.centerLayout.addWidget(self.titleLabel)
        self.subtitleLabel = BodyLabel("Download Instagram Reels in seconds", self)
        self.centerLayout.addWidget(self.subtitleLabel)

        # 2. 输入卡片
        self.inputCard = CardWidget(self)
        self.inputCard.setMaximumWidth(760)
        self.inputCard.setStyleSheet("""
            CardWidget {
                background-color: white;
                border-radius: 12px;
                border: 1px solid rgba(0, 0, 0, 0.05);
            }
        """)
        self.cardLayout = QVBoxLayout(self.inputCard)
        self.cardLayout.setContentsMargins(20, 20, 20, 20)
        self.cardLayout.setSpacing(15)

        self.instructionLabel = BodyLabel("Enter Instagram Reel URL", self)
        self.cardLayout.addWidget(self.instructionLabel)

        self.inputLayout = QHBoxLayout()

        self.urlInput = LineEdit(self)
        self.urlInput.setPlaceholderText("https://www.instagram.com/reels/...")
        self.urlInput.setClearButtonEnabled(True)
        self.urlInput.setMinimumWidth(560)
        self.urlInput.returnPressed.connect(self.on_download_clicked)
        self.inputLayout.addWidget(self.urlInput)

        self.pasteBtn = PushButton(FluentIcon.PASTE, "Paste", self)
        self.pasteBtn.setMinimumWidth(72)
        self.pasteBtn.clicked.connect(self.on_paste_clicked)
        self.inputLayout.addWidget(self.pasteBtn)
        self.cardLayout.addLayout(self.inputLayout)

        self.btnLayout = QHBoxLayout()
        self.btnLayout.addStretch(1)
        self.downloadBtn = PrimaryPushButton(FluentIcon.DOWNLOAD, "Download Reel", self)
        self.downloadBtn.setMinimumWidth(160)
        self.downloadBtn.clicked.connect(self.on_download_clicked)
        self.btnLayout.addWidget(self.downloadBtn)
        self.cardLayout.addLayout(self.btnLayout)

        self.centerLayout.addWidget(self.inputCard)

        self.tipsLabel = CaptionLabel(
            "Supported links:\n"
            "- https://www.instagram.com/reels/<id>/\n"
            "- https://www.instagram.com/p/<id>/",
            self,
        )
        self.tipsLabel.setWordWrap(True)
        self.tipsLabel.setMaximumWidth(760)
        self.centerLayout.addWidget(self.tipsLabel)

        # 最近一次保存的位置
        self.savedLabel = CaptionLabel("", self)
        self.savedLabel.setWordWrap(True)
        self.savedLabel.setMaximumWidth(760)
        self.savedLabel.hide()
        self.centerLayout.addWidget(self.savedLabel)

        # 3. 特性卡片
        self.featureLayout = QHBoxLayout()
        self.featureLayout.setSpacing(15)
        self.featureCards: list[CardWidget] = []
        for icon, title, text in self.FEATURES:
            card = self._create_feature_card(icon, title, text)
            self.featureCards.append(card)
            self.featureLayout.addWidget(card)
        self.centerLayout.addLayout(self.featureLayout)

        # 4. 页脚
        self.footerLabel = CaptionLabel("© ReelGrab. Made for Instagram lovers", self)
        self.footerLabel.setAlignment(Qt.AlignmentFlag.AlignHCenter)
        self.vBoxLayout.addWidget(self.footerLabel, 0, Qt.AlignmentFlag.AlignHCenter)

        self.bridge = OrchestratorBridge(orchestrator, self)
        self.bridge.state_changed.connect(self.set_busy)
        self.bridge.notice.connect(self.show_notice)
        self.set_busy(orchestrator.is_busy)

    def _create_feature_card(self, icon: FluentIcon, title: str, text: str) -> CardWidget:
        card = CardWidget(self)
        card.setMaximumWidth(244)
        layout = QVBoxLayout(card)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(8)

        iconWidget = IconWidget(icon, card)
        iconWidget.setFixedSize(28, 28)
        layout.addWidget(iconWidget, 0, Qt.AlignmentFlag.AlignHCenter)

        titleLabel = SubtitleLabel(title, card)
        titleLabel.setAlignment(Qt.AlignmentFlag.AlignHCenter)
        layout.addWidget(titleLabel)

        textLabel = BodyLabel(text, card)
        textLabel.setWordWrap(True)
        textLabel.setAlignment(Qt.AlignmentFlag.AlignHCenter)
        layout.addWidget(textLabel)
        return card

    def set_url(self, url: str) -> None:
        if self.orchestrator.is_busy:
            return
        self.urlInput.setText(url)
        self.urlInput.setFocus()

    def set_busy(self, busy: bool) -> None:
        self.urlInput.setEnabled(not busy)
        self.pasteBtn.setEnabled(not busy)
        self.downloadBtn.setEnabled(not busy)
        self.downloadBtn.setText("Processing..." if busy else "Download Reel")

    def on_paste_clicked(self) -> None:
        if self.orchestrator.is_busy:
            return
        try:
            text = self.paste_helper.paste(self.urlInput.text())
        except ClipboardError as exc:
            info = translate_error(exc)
            InfoBar.error(info["title"], info["content"], parent=self.window())
            return
        self.urlInput.setText(text)
        self.urlInput.setFocus()

    def on_download_clicked(self) -> None:
        url = self.orchestrator.begin(self.urlInput.text())
        if url is None:
            return

        worker = ReelDownloadWorker(self.orchestrator, url, self)
        worker.saved.connect(self.on_saved)
        worker.finished.connect(worker.deleteLater)
        worker.finished.connect(lambda w=worker: self._on_worker_finished(w))
        self._worker = worker
        worker.start()

    def _on_worker_finished(self, worker: ReelDownloadWorker) -> None:
        # 上一个线程可能在新任务启动后才退出，只清理自己的引用
        if self._worker is worker:
            self._worker = None

    def on_saved(self, path: str) -> None:
        self.savedLabel.setText(f"Saved to: {path}")
        self.savedLabel.show()

    def show_notice(self, notice: Notice) -> None:
        kwargs = dict(
            orient=Qt.Orientation.Horizontal,
            isClosable=True,
            position=InfoBarPosition.TOP,
            parent=self.window(),
        )
        if notice.is_error:
            InfoBar.error(notice.title, notice.content, duration=5000, **kwargs)
        elif notice.kind == "started":
            InfoBar.info(notice.title, "", duration=2000, **kwargs)
        else:
            InfoBar.success(notice.title, notice.content, duration=3000, **kwargs)

    def shutdown(self) -> None:
        self.bridge.detach()
        if self._worker is not None and self._worker.isRunning():
            self._worker.wait(3000)
