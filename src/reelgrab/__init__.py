"""ReelGrab: download Instagram reels through a remote extraction service."""

__version__ = "1.0.0"
