from __future__ import annotations

import os
import sys
from pathlib import Path


def is_frozen() -> bool:
    return bool(getattr(sys, "frozen", False))


def project_root() -> Path:
    # src/reelgrab/utils/paths.py -> src/reelgrab/utils -> src/reelgrab -> src -> root
    return Path(__file__).resolve().parents[3]


def user_data_dir(app_name: str = "ReelGrab") -> Path:
    home = Path(os.path.expanduser("~"))
    return home / "Documents" / app_name


def config_path() -> Path:
    # Dev: repo-root config.json; Frozen: per-user directory.
    if is_frozen():
        return user_data_dir() / "config.json"
    return project_root() / "config.json"


def log_dir() -> Path:
    if is_frozen():
        return user_data_dir() / "logs"
    return project_root() / "logs"


def default_download_dir() -> Path:
    return Path.home() / "Downloads" / "ReelGrab"
