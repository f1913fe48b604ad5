"""
/**
 * @file deeplx/services/__init__.py
 * @description 业务服务层导出。
 */
"""

from .auth_service import verify_api_key
from .client_pool_service import ClientPool, OutboundClient
from .extraction_service import Extraction, extract
from .payload_service import UpstreamPayload, synthesize
from .translation_service import translate
from .upstream_service import DEEPL_JSONRPC_ENDPOINT, invoke

__all__ = [
    "ClientPool",
    "DEEPL_JSONRPC_ENDPOINT",
    "Extraction",
    "OutboundClient",
    "UpstreamPayload",
    "extract",
    "invoke",
    "synthesize",
    "translate",
    "verify_api_key",
]
