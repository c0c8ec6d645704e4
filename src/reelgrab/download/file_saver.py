from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..core.config_manager import config_manager
from ..core.errors import SaveError
from ..utils.logger import logger


class FileSaver(Protocol):
    def save(self, content: bytes, filename: str) -> str: ...


def unique_path(directory: Path, filename: str) -> Path:
    """``name.mp4`` -> ``name (1).mp4`` -> ``name (2).mp4`` ..."""
    candidate = directory / filename
    if not candidate.exists():
        return candidate
    stem, suffix = Path(filename).stem, Path(filename).suffix
    n = 1
    while True:
        candidate = directory / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


class DirectorySaver:
    """Write downloads into the configured download directory."""

    def __init__(self, directory: str | Path | None = None) -> None:
        self.directory = Path(directory or config_manager.get("download_dir"))

    def save(self, content: bytes, filename: str) -> str:
        # 文件名只取最后一段，避免写出目录之外
        name = Path(filename).name or "instagram-reel.mp4"
        tmp: Path | None = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            target = unique_path(self.directory, name)
            tmp = target.with_name(target.name + ".part")
            tmp.write_bytes(content)
            tmp.replace(target)
        except OSError as exc:
            # 不留下写了一半的 .part 文件
            if tmp is not None:
                try:
                    tmp.unlink(missing_ok=True)
                except OSError:
                    logger.warning("清理临时文件失败: {}", tmp)
            raise SaveError(f"Unable to save the video file: {exc.strerror or exc}", cause=exc) from exc

        logger.info("已保存: {}", target)
        return str(target)
