"""
远程协作方：解析服务客户端与视频资源下载器
"""

from .extraction_client import ExtractionClient, Extractor
from .asset_fetcher import AssetFetcher, HttpAssetFetcher

__all__ = [
    "AssetFetcher",
    "ExtractionClient",
    "Extractor",
    "HttpAssetFetcher",
]
