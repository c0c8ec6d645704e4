from __future__ import annotations

import re


class UrlValidator:
    """URL 验证工具类"""

    # 仅接受 /reels/<id> 与 /p/<id> 两种形态，整串匹配（查询参数、单数 /reel/ 均不接受）
    INSTAGRAM_PATTERNS = (
        re.compile(r"https?://(?:www\.)?instagram\.com/reels/(?P<id>[\w-]+)/?", re.ASCII),
        re.compile(r"https?://(?:www\.)?instagram\.com/p/(?P<id>[\w-]+)/?", re.ASCII),
    )

    @staticmethod
    def _match(text: str | None) -> re.Match[str] | None:
        if not text or not isinstance(text, str):
            return None
        for pattern in UrlValidator.INSTAGRAM_PATTERNS:
            m = pattern.fullmatch(text)
            if m:
                return m
        return None

    @staticmethod
    def is_instagram_url(text: str | None) -> bool:
        return UrlValidator._match(text) is not None

    @staticmethod
    def extract_shortcode(text: str | None) -> str | None:
        m = UrlValidator._match(text)
        return m.group("id") if m else None
