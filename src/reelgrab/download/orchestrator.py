"""
Reel 下载编排器

线性流水线：Validate -> Extract -> Resolve Asset -> Persist。
任意一步失败都只产生一条错误通知并结束本次尝试，不做重试。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ..core.config_manager import config_manager
from ..core.errors import MissingAssetError, NetworkError, ReelGrabError, RemoteError, ValidationError
from ..models.extraction import DownloadArtifact, ExtractionResult
from ..service.asset_fetcher import AssetFetcher
from ..service.extraction_client import Extractor
from ..utils.logger import logger
from ..utils.translator import translate_error
from ..utils.validators import UrlValidator
from .file_saver import FileSaver


class FetchState(Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"


@dataclass(slots=True)
class Notice:
    kind: str  # started / success / error
    title: str
    content: str
    suggestion: str = ""
    error: BaseException | None = None

    @property
    def is_error(self) -> bool:
        return self.kind == "error"


StateListener = Callable[[FetchState], None]
NoticeListener = Callable[[Notice], None]


class ReelFetchOrchestrator:
    """Owns the busy state and runs one download attempt at a time.

    ``begin()`` performs the guard, input checks and the IDLE -> IN_FLIGHT
    transition; ``run()`` performs the network half and always returns to
    IDLE. The UI calls ``begin()`` on the GUI thread and ``run()`` on a
    worker; ``download_reel()`` does both inline.
    """

    EMPTY_URL_MESSAGE = "Please enter an Instagram reel URL"
    INVALID_URL_MESSAGE = "Please enter a valid Instagram reel or post URL"

    def __init__(
        self,
        extractor: Extractor,
        fetcher: AssetFetcher,
        saver: FileSaver,
        *,
        filename: str | None = None,
    ) -> None:
        self.extractor = extractor
        self.fetcher = fetcher
        self.saver = saver
        self.filename = filename or str(config_manager.get("output_filename") or "instagram-reel.mp4")

        self._state = FetchState.IDLE
        self._state_listeners: list[StateListener] = []
        self._notice_listeners: list[NoticeListener] = []
        self.last_notice: Notice | None = None

    # ---- status ----

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def is_busy(self) -> bool:
        return self._state is FetchState.IN_FLIGHT

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._state_listeners.append(listener)
        return lambda: self._remove(self._state_listeners, listener)

    def on_notice(self, listener: NoticeListener) -> Callable[[], None]:
        self._notice_listeners.append(listener)
        return lambda: self._remove(self._notice_listeners, listener)

    @staticmethod
    def _remove(listeners: list, listener) -> None:
        try:
            listeners.remove(listener)
        except ValueError:
            pass

    def _set_state(self, state: FetchState) -> None:
        if state is self._state:
            return
        self._state = state
        for listener in list(self._state_listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("状态监听器出错")

    def _notify(self, notice: Notice) -> None:
        self.last_notice = notice
        for listener in list(self._notice_listeners):
            try:
                listener(notice)
            except Exception:
                logger.exception("通知监听器出错")

    def _fail(self, error: BaseException) -> None:
        if isinstance(error, ValidationError):
            logger.info("输入校验失败: {}", error.message)
        elif isinstance(error, NetworkError):
            cause = error.cause or error
            logger.opt(exception=(type(cause), cause, cause.__traceback__)).error(
                "Download error: {}", cause
            )
        elif isinstance(error, ReelGrabError):
            logger.warning("{}: {}", type(error).__name__, error.message)
        else:
            logger.opt(exception=(type(error), error, error.__traceback__)).error("未预期的错误")

        info = translate_error(error)
        self._notify(
            Notice(
                kind="error",
                title=info["title"],
                content=info["content"],
                suggestion=info["suggestion"],
                error=error,
            )
        )

    # ---- pipeline ----

    def download_reel(self, raw_url: str | None) -> DownloadArtifact | None:
        url = self.begin(raw_url)
        if url is None:
            return None
        return self.run(url)

    def begin(self, raw_url: str | None) -> str | None:
        if self._state is FetchState.IN_FLIGHT:
            logger.debug("已有任务进行中，忽略本次请求")
            return None

        url = (raw_url or "").strip()
        if not url:
            self._fail(ValidationError(self.EMPTY_URL_MESSAGE))
            return None
        if not UrlValidator.is_instagram_url(url):
            self._fail(ValidationError(self.INVALID_URL_MESSAGE))
            return None

        self._set_state(FetchState.IN_FLIGHT)
        return url

    def run(self, url: str) -> DownloadArtifact | None:
        """Steps after ``begin()``; returns the saved artifact or None."""
        self._set_state(FetchState.IN_FLIGHT)
        try:
            result = self._extract(url)
            video_url = self._resolve_asset(result)
            self._notify(Notice(kind="started", title="Download started!", content=video_url))
            artifact = self._persist(video_url)
            self._notify(
                Notice(
                    kind="success",
                    title="Reel downloaded successfully!",
                    content=artifact.saved_path or artifact.filename,
                )
            )
            return artifact
        except Exception as exc:
            self._fail(exc)
            return None
        finally:
            self._set_state(FetchState.IDLE)

    def _extract(self, url: str) -> ExtractionResult:
        logger.info("开始解析: shortcode={}", UrlValidator.extract_shortcode(url))
        result = self.extractor.extract(url)
        if not result.success:
            raise RemoteError(result.message)
        return result

    def _resolve_asset(self, result: ExtractionResult) -> str:
        video_url = result.first_video_url
        if not video_url:
            raise MissingAssetError()
        return video_url

    def _persist(self, video_url: str) -> DownloadArtifact:
        content, content_type = self.fetcher.fetch(video_url)
        artifact = DownloadArtifact(
            content=content,
            source_url=video_url,
            filename=self.filename,
            content_type=content_type,
        )
        artifact.saved_path = self.saver.save(artifact.content, artifact.filename)
        logger.info("已保存 {} bytes -> {}", artifact.size, artifact.saved_path)
        return artifact
