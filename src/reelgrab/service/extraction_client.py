"""
解析服务客户端

把 Instagram 链接 POST 给远程解析服务，返回 ExtractionResult。
服务内部行为不在本项目范围内，这里只依赖其响应结构。
"""

from __future__ import annotations

from typing import Protocol

import requests

from ..core.config_manager import config_manager
from ..core.errors import NetworkError
from ..models.extraction import ExtractionResult
from ..utils.logger import logger


class Extractor(Protocol):
    def extract(self, url: str) -> ExtractionResult: ...


class ExtractionClient:
    """requests-based client for the remote extraction service."""

    def __init__(
        self,
        endpoint: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.endpoint = endpoint or config_manager.get("extraction_endpoint")
        self.timeout = timeout if timeout is not None else float(config_manager.get("request_timeout") or 30)
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": str(config_manager.get("user_agent") or "ReelGrab")})

    def extract(self, url: str) -> ExtractionResult:
        logger.info("请求解析服务: {} -> {}", url, self.endpoint)
        try:
            response = self.session.post(
                self.endpoint,
                json={"url": url},
                timeout=self.timeout,
                proxies=config_manager.proxies(),
            )
        except requests.exceptions.RequestException as exc:
            raise NetworkError(cause=exc) from exc

        logger.debug("解析服务响应: status={} length={}", response.status_code, len(response.content or b""))

        # 服务在失败时也可能返回非 2xx + JSON 错误体，因此不先 raise_for_status
        try:
            data = response.json()
        except ValueError as exc:
            logger.debug("非 JSON 响应: {}", (response.text or "")[:200])
            raise NetworkError(cause=exc) from exc

        try:
            return ExtractionResult.from_json(data)
        except ValueError as exc:
            raise NetworkError(cause=exc) from exc
