from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..utils.paths import config_path, default_download_dir


class ConfigManager:
    """配置管理单例（只读 JSON，应用本身不回写任何状态）。"""

    _instance: "ConfigManager | None" = None

    DEFAULT_CONFIG: dict[str, Any] = {
        # Remote extraction service: POST {"url": ...}
        "extraction_endpoint": "https://reel-grab-be.vercel.app/reel",
        "download_dir": str(default_download_dir()),
        "output_filename": "instagram-reel.mp4",
        # Seconds, applied to both the extraction call and the asset fetch
        "request_timeout": 30,
        # 0 disables the cap
        "max_file_size_mb": 200,
        "user_agent": "ReelGrab",
        # Proxy mode:
        # - off: do NOT use system/ambient proxy
        # - system: follow system/ambient proxy settings
        # - http: manual HTTP proxy (proxy_url is host:port or URL)
        # - socks5: manual SOCKS5 proxy (proxy_url is host:port or URL)
        "proxy_mode": "system",
        "proxy_url": "127.0.0.1:7890",
        # Fill the input when an Instagram link is copied
        "clipboard_auto_detect": False,
    }

    def __new__(cls) -> "ConfigManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init()
        return cls._instance

    def _init(self, config_file: Path | None = None) -> None:
        self.config_file = config_file or config_path()
        self.config: dict[str, Any] = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        if not self.config_file.exists():
            return self.DEFAULT_CONFIG.copy()

        try:
            data = json.loads(self.config_file.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return self.DEFAULT_CONFIG.copy()
        if not isinstance(data, dict):
            return self.DEFAULT_CONFIG.copy()

        # 合并默认配置，防止缺字段
        merged = {**self.DEFAULT_CONFIG, **data}

        # Normalize
        pm = str(merged.get("proxy_mode") or "off").lower().strip()
        if pm not in {"off", "system", "http", "socks5"}:
            pm = "off"
        merged["proxy_mode"] = pm

        for key in ("request_timeout", "max_file_size_mb"):
            try:
                value = float(merged.get(key))
                if value < 0:
                    raise ValueError(value)
                merged[key] = value
            except (TypeError, ValueError):
                merged[key] = self.DEFAULT_CONFIG[key]

        for key in ("extraction_endpoint", "output_filename", "download_dir"):
            raw = str(merged.get(key) or "").strip()
            merged[key] = raw or self.DEFAULT_CONFIG[key]

        merged["clipboard_auto_detect"] = bool(merged.get("clipboard_auto_detect"))
        return merged

    def reload(self, config_file: Path | None = None) -> None:
        self._init(config_file or self.config_file)

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        # Session-only override; nothing is written to disk.
        self.config[key] = value

    def proxies(self) -> dict[str, str] | None:
        """Translate proxy_mode into a requests ``proxies`` mapping.

        None means "leave requests alone" (system/ambient proxy).
        """
        mode = self.get("proxy_mode")
        if mode == "system":
            return None
        if mode == "off":
            return {"http": "", "https": ""}
        url = str(self.get("proxy_url") or "").strip()
        if not url:
            return None
        if "://" not in url:
            url = f"{'socks5h' if mode == 'socks5' else 'http'}://{url}"
        return {"http": url, "https": url}


config_manager = ConfigManager()
