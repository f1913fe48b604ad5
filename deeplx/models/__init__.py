"""
/**
 * @file deeplx/models/__init__.py
 * @description 数据模型导出。
 */
"""

from .server_state_model import ServerState
from .translate_request_model import TranslateRequest
from .translate_response_model import TranslateResponse

__all__ = ["ServerState", "TranslateRequest", "TranslateResponse"]
