from __future__ import annotations

from typing import Protocol

import requests

from ..core.config_manager import config_manager
from ..core.errors import NetworkError
from ..utils.logger import logger


class AssetFetcher(Protocol):
    def fetch(self, url: str) -> tuple[bytes, str | None]: ...


class HttpAssetFetcher:
    """Plain streamed GET of the direct video URL into memory.

    Returns ``(content, content_type)``.
    """

    CHUNK_SIZE = 16384

    def __init__(
        self,
        timeout: float | None = None,
        max_bytes: int | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.timeout = timeout if timeout is not None else float(config_manager.get("request_timeout") or 30)
        if max_bytes is None:
            max_bytes = int(float(config_manager.get("max_file_size_mb") or 0) * 1024 * 1024)
        self.max_bytes = max_bytes
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": str(config_manager.get("user_agent") or "ReelGrab")})

    def fetch(self, url: str) -> tuple[bytes, str | None]:
        logger.info("下载视频资源: {}", url[:120])
        try:
            with self.session.get(
                url, stream=True, timeout=self.timeout, proxies=config_manager.proxies()
            ) as r:
                r.raise_for_status()
                content_type = r.headers.get("content-type")

                try:
                    content_length = int(r.headers.get("content-length") or 0)
                except ValueError:
                    # 无法解析时按未知长度处理，靠流式计数兜底
                    content_length = 0
                if self.max_bytes and content_length > self.max_bytes:
                    raise NetworkError(f"Video is too large ({content_length / (1024 * 1024):.1f}MB).")

                buf = bytearray()
                for chunk in r.iter_content(chunk_size=self.CHUNK_SIZE):
                    if not chunk:
                        continue
                    buf.extend(chunk)
                    if self.max_bytes and len(buf) > self.max_bytes:
                        raise NetworkError(f"Video is too large (over {self.max_bytes // (1024 * 1024)}MB).")
        except requests.exceptions.RequestException as exc:
            raise NetworkError(cause=exc) from exc

        logger.info("视频下载完成: {} bytes", len(buf))
        return bytes(buf), content_type
