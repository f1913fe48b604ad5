"""
/**
 * @file deeplx/config/settings.py
 * @description 启动配置加载与合并（config.example.json + config.json + config.local.json + 环境变量）。
 * @note 配置只在启动时读取一次，运行期间不做热更新。
 */
"""

from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from deeplx.utils import split_csv


logger = logging.getLogger(__name__)

CONFIG_DIR = os.getenv("DEEPLX_CONFIG_DIR") or os.getcwd()
CONFIG_PATH = os.path.join(CONFIG_DIR, "config.json")
CONFIG_LOCAL_PATH = os.path.join(CONFIG_DIR, "config.local.json")
CONFIG_EXAMPLE_PATH = os.path.join(CONFIG_DIR, "config.example.json")

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 1188
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# env var -> raw key
ENV_OVERRIDES = {
    "DEEPLX_API_KEY": "api_key",
    "DEEPLX_DL_SESSION": "dl_session",
    "DEEPLX_PROXIES": "proxies",
    "DEEPLX_HOST": "host",
    "DEEPLX_PORT": "port",
    "DEEPLX_TLS_CERT": "tls_cert",
    "DEEPLX_TLS_KEY": "tls_key",
    "DEEPLX_LOG_LEVEL": "log_level",
}


def _load_json(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            value = json.load(f)
            return value if isinstance(value, dict) else {}
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read config {path}: {e}. Ignoring it.")
        return {}


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _merge_dicts(base[key], value)
        else:
            base[key] = value
    return base


def _env_overrides() -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            values[key] = value
    return values


def _optional_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


@dataclass(frozen=True)
class Settings:
    raw: Dict[str, Any]

    @property
    def api_key(self) -> Optional[str]:
        return _optional_str(self.raw.get("api_key"))

    @property
    def dl_session(self) -> str:
        value = self.raw.get("dl_session")
        return value if isinstance(value, str) else ""

    @property
    def proxies(self) -> List[str]:
        value = self.raw.get("proxies")
        if isinstance(value, str):
            return split_csv(value)
        if isinstance(value, list):
            return [p.strip() for p in value if isinstance(p, str) and p.strip()]
        return []

    @property
    def host(self) -> str:
        return _optional_str(self.raw.get("host")) or DEFAULT_HOST

    @property
    def port(self) -> int:
        value = self.raw.get("port")
        try:
            port = int(value)
        except (TypeError, ValueError):
            return DEFAULT_PORT
        return port if 0 < port < 65536 else DEFAULT_PORT

    @property
    def tls_cert(self) -> Optional[str]:
        return _optional_str(self.raw.get("tls_cert"))

    @property
    def tls_key(self) -> Optional[str]:
        return _optional_str(self.raw.get("tls_key"))

    @property
    def log_level(self) -> str:
        value = (_optional_str(self.raw.get("log_level")) or "INFO").upper()
        return value if value in LOG_LEVELS else "INFO"

    def with_overrides(self, overrides: Dict[str, Any]) -> "Settings":
        """Return a copy with the non-empty ``overrides`` applied on top."""
        merged = dict(self.raw)
        for key, value in overrides.items():
            if value is None or value == "" or value == []:
                continue
            merged[key] = value
        return Settings(raw=merged)


_CACHED_SETTINGS: Optional[Settings] = None
_SETTINGS_LOCK = threading.Lock()


def reload_settings(
    base_path: str = CONFIG_PATH,
    local_path: str = CONFIG_LOCAL_PATH,
    example_path: str = CONFIG_EXAMPLE_PATH,
    use_env: bool = True,
) -> Settings:
    global _CACHED_SETTINGS

    with _SETTINGS_LOCK:
        merged = _load_json(example_path)
        merged = _merge_dicts(merged, _load_json(base_path))
        merged = _merge_dicts(merged, _load_json(local_path))
        if use_env:
            merged = _merge_dicts(merged, _env_overrides())
        _CACHED_SETTINGS = Settings(raw=merged)
    return _CACHED_SETTINGS


def load_settings() -> Settings:
    """
    Get current settings. Loads once on the first call; the relay never
    re-reads its configuration afterwards.
    """
    if _CACHED_SETTINGS is None:
        return reload_settings()
    return _CACHED_SETTINGS
