"""
/**
 * @file deeplx/errors.py
 * @description 转发链路错误类型，每种错误对应一个对外 HTTP 状态码。
 */
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class RelayError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_detail(self) -> Dict[str, Any]:
        return {"code": self.status_code, "message": self.message}


class Unauthorized(RelayError):
    status_code = 401


class RateLimited(RelayError):
    status_code = 429


class UpstreamStatusError(RelayError):
    """Upstream answered with a non-2xx status other than 429."""

    status_code = 500

    def __init__(self, upstream_status: int, message: Optional[str] = None):
        super().__init__(message or f"Upstream returned HTTP {upstream_status}")
        self.upstream_status = upstream_status


class GatewayError(RelayError):
    status_code = 502


class InternalError(RelayError):
    status_code = 500
