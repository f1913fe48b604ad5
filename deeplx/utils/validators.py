"""
/**
 * @file deeplx/utils/validators.py
 * @description 配置校验工具：代理地址、逗号分隔列表。
 */
"""

from typing import List
from urllib.parse import urlparse

PROXY_SCHEMES = {"http", "https", "socks5", "socks5h"}


def is_valid_proxy_url(value: str) -> bool:
    v = value.strip()
    try:
        parsed = urlparse(v)
        # .port raises ValueError when out of range
        parsed.port
        return bool(parsed.scheme in PROXY_SCHEMES and parsed.hostname)
    except ValueError:
        return False


def split_csv(value: str) -> List[str]:
    return [part.strip() for part in (value or "").split(",") if part.strip()]
