"""
ReelGrab 数据模型层
"""

from .extraction import DownloadArtifact, ExtractionResult, VideoDescriptor

__all__ = [
    "DownloadArtifact",
    "ExtractionResult",
    "VideoDescriptor",
]
