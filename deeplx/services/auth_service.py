"""
/**
 * @file deeplx/services/auth_service.py
 * @description 访问密钥校验：配置了 api_key 时要求请求携带完全一致的 Bearer 凭据。
 */
"""

from __future__ import annotations

import hmac
from typing import Optional

from deeplx.errors import Unauthorized


def verify_api_key(token: Optional[str], api_key: Optional[str]) -> None:
    if api_key is None:
        return
    if token is None or not hmac.compare_digest(token.encode("utf-8"), api_key.encode("utf-8")):
        raise Unauthorized("You are not authorized")
