"""
/**
 * @file deeplx/services/upstream_service.py
 * @description 调用 DeepL JSON-RPC 接口并对 HTTP 结果分类（成功 / 限流 / 上游错误 / 网关错误）。
 */
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from deeplx.errors import GatewayError, RateLimited, UpstreamStatusError
from deeplx.services.client_pool_service import OutboundClient


logger = logging.getLogger(__name__)

DEEPL_JSONRPC_ENDPOINT = "https://api.deepl.com/jsonrpc"

RATE_LIMIT_MESSAGE = (
    "Too many requests, your IP has been blocked by DeepL temporarily, "
    "please don't request it frequently in a short time."
)


def build_headers(dl_session: str) -> dict:
    return {
        "Content-Type": "application/json",
        "Cookie": f"dl_session={dl_session};",
    }


def invoke(
    body: str,
    client: OutboundClient,
    dl_session: str,
    endpoint: str = DEEPL_JSONRPC_ENDPOINT,
) -> Any:
    """
    POST ``body`` verbatim and return the decoded JSON reply.

    Raises RateLimited on 429, UpstreamStatusError on other non-2xx statuses
    and GatewayError on transport failures or a non-JSON body. Nothing is
    retried.
    """
    try:
        response = client.post(endpoint, data=body.encode("utf-8"), headers=build_headers(dl_session))
    except requests.RequestException as e:
        logger.error(f"Upstream request via {client!r} failed: {e}")
        raise GatewayError(f"Upstream request failed: {e}") from e

    status = response.status_code
    if status == 429:
        logger.warning(f"Upstream rate limited request via {client!r}")
        raise RateLimited(RATE_LIMIT_MESSAGE)

    if not 200 <= status < 300:
        reason = response.reason if isinstance(response.reason, str) else ""
        message = f"Upstream returned HTTP {status} {reason}".strip()
        logger.warning(message)
        raise UpstreamStatusError(status, message)

    try:
        return response.json()
    except ValueError as e:
        raise GatewayError(f"Upstream returned a non-JSON body: {e}") from e
