"""
/**
 * @file deeplx/services/translation_service.py
 * @description 单次翻译请求的完整链路：鉴权 -> 构造请求体 -> 选取客户端 -> 调用上游 -> 提取结果。
 */
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from deeplx.models import ServerState, TranslateRequest, TranslateResponse
from deeplx.services.auth_service import verify_api_key
from deeplx.services.client_pool_service import ClientPool
from deeplx.services.extraction_service import extract
from deeplx.services.payload_service import synthesize, uses_spaced_method
from deeplx.services.upstream_service import DEEPL_JSONRPC_ENDPOINT, invoke


logger = logging.getLogger(__name__)


def translate(
    req: TranslateRequest,
    state: ServerState,
    pool: ClientPool,
    token: Optional[str] = None,
    endpoint: str = DEEPL_JSONRPC_ENDPOINT,
    rng: Optional[random.Random] = None,
) -> TranslateResponse:
    verify_api_key(token, state.api_key)

    payload = synthesize(req, rng=rng)
    client = pool.next()
    logger.debug(
        f"Relaying id={payload.id} via {client!r} "
        f"({'spaced' if uses_spaced_method(payload.id) else 'trailing'} method colon)"
    )

    body = invoke(payload.body, client, state.dl_session, endpoint=endpoint)
    extraction = extract(body)

    return TranslateResponse(
        id=payload.id,
        data=extraction.data,
        alternatives=extraction.alternatives,
        source_lang=req.source_lang,
        target_lang=req.target_lang,
    )
