"""
/**
 * @file deeplx/models/translate_response_model.py
 * @description 对外返回的扁平翻译结果。
 */
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class TranslateResponse(BaseModel):
    code: int = 200
    id: int
    data: str = ""
    alternatives: List[str] = Field(default_factory=list)
    source_lang: str
    target_lang: str
    method: str = "Free"
