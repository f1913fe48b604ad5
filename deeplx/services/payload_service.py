"""
/**
 * @file deeplx/services/payload_service.py
 * @description 构造 LMT_handle_texts JSON-RPC 请求体，模仿 DeepL 网页客户端的 id、时间戳与序列化格式。
 */
"""

from __future__ import annotations

import json
import random
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

from deeplx.models import TranslateRequest


JSONRPC_METHOD = "LMT_handle_texts"
REQUEST_ALTERNATIVES = 0
COMMON_JOB_PARAMS = {"wasSpoken": False, "transcribe_as": ""}

_METHOD_COMPACT = '"method":"'
_METHOD_SPACED = '"method" : "'
_METHOD_TRAILING = '"method": "'


@dataclass(frozen=True)
class UpstreamPayload:
    id: int
    body: str


def get_i_count(text: str) -> int:
    return text.count("i")


def get_random_number(rng: Optional[random.Random] = None) -> int:
    r = rng or random
    num = r.randint(0, 99999) + 8300000
    return num * 1000


def get_timestamp(i_count: int, now_ms: Optional[int] = None) -> int:
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    if i_count == 0:
        return now_ms
    return now_ms - (now_ms % i_count) + i_count


def uses_spaced_method(request_id: int) -> bool:
    return (request_id + 5) % 29 == 0 or (request_id + 3) % 13 == 0


def format_body(serialized: str, request_id: int) -> str:
    """
    Rewrite the ``"method":"`` token of an already serialized payload.

    The web client's serializer is inconsistent about whitespace around that
    colon, so the substitution works on the text rather than the object.
    """
    if uses_spaced_method(request_id):
        return serialized.replace(_METHOD_COMPACT, _METHOD_SPACED)
    return serialized.replace(_METHOD_COMPACT, _METHOD_TRAILING)


def build_payload_dict(req: TranslateRequest, request_id: int, timestamp: int) -> Dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "method": JSONRPC_METHOD,
        "id": request_id,
        "params": {
            "texts": [{"text": req.text, "requestAlternatives": REQUEST_ALTERNATIVES}],
            "splitting": "newlines",
            "lang": {
                "source_lang_user_selected": req.source_lang.upper(),
                "target_lang": req.target_lang.upper(),
            },
            "timestamp": timestamp,
            "commonJobParams": dict(COMMON_JOB_PARAMS),
        },
    }


def serialize_payload(payload: Dict[str, Any]) -> str:
    # compact, sorted keys, raw UTF-8
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), sort_keys=True)


def synthesize(
    req: TranslateRequest,
    rng: Optional[random.Random] = None,
    now_ms: Optional[int] = None,
) -> UpstreamPayload:
    request_id = get_random_number(rng) + 1
    timestamp = get_timestamp(get_i_count(req.text), now_ms=now_ms)
    payload = build_payload_dict(req, request_id, timestamp)
    body = format_body(serialize_payload(payload), request_id)
    return UpstreamPayload(id=request_id, body=body)
