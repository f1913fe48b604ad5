"""
/**
 * @file deeplx/services/extraction_service.py
 * @description 从 DeepL 返回的嵌套 JSON 中提取主译文与备选译文，字段缺失时回退为空值。
 */
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class Extraction:
    data: str = ""
    alternatives: List[str] = field(default_factory=list)


def _first_text_entry(body: Any) -> Optional[dict]:
    if not isinstance(body, dict):
        return None
    result = body.get("result")
    if not isinstance(result, dict):
        return None
    texts = result.get("texts")
    if not isinstance(texts, list) or not texts:
        return None
    first = texts[0]
    if not isinstance(first, dict):
        return None
    return first


def extract(body: Any) -> Extraction:
    first = _first_text_entry(body)
    if first is None:
        return Extraction()

    text = first.get("text")
    data = text if isinstance(text, str) else ""

    alternatives: List[str] = []
    raw_alternatives = first.get("alternatives")
    if isinstance(raw_alternatives, list):
        for item in raw_alternatives:
            if not isinstance(item, dict):
                continue
            alt = item.get("text")
            if isinstance(alt, str):
                alternatives.append(alt)

    return Extraction(data=data, alternatives=alternatives)
