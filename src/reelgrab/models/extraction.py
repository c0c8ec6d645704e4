"""Typed models for the extraction service response and the fetched asset."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class VideoDescriptor:
    video: str | None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, item: Any) -> "VideoDescriptor":
        if not isinstance(item, dict):
            return cls(video=None)
        video = item.get("video")
        if not isinstance(video, str) or not video.strip():
            video = None
        else:
            video = video.strip()
        return cls(video=video, extra=dict(item))


@dataclass(slots=True)
class ExtractionResult:
    success: bool
    message: str | None = None
    videos: list[VideoDescriptor] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> "ExtractionResult":
        """Build from ``{success, msg}``.

        Raises ValueError when the payload is not an object with a
        ``success`` field.
        """
        if not isinstance(data, dict) or "success" not in data:
            raise ValueError(f"unexpected extraction payload: {str(data)[:200]}")

        msg = data.get("msg")
        if not data.get("success"):
            if isinstance(msg, str):
                message = msg if msg.strip() else None
            else:
                message = str(msg) if msg else None
            return cls(success=False, message=message)

        videos: list[VideoDescriptor] = []
        if isinstance(msg, dict) and isinstance(msg.get("video"), list):
            videos = [VideoDescriptor.from_json(item) for item in msg["video"]]
        return cls(success=True, videos=videos)

    @property
    def first_video_url(self) -> str | None:
        if not self.videos:
            return None
        return self.videos[0].video


@dataclass(slots=True)
class DownloadArtifact:
    content: bytes
    source_url: str
    filename: str
    content_type: str | None = None
    saved_path: str | None = None

    @property
    def size(self) -> int:
        return len(self.content)
