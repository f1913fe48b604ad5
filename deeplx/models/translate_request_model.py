"""
/**
 * @file deeplx/models/translate_request_model.py
 * @description 翻译请求模型（Pydantic）。
 */
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class TranslateRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    source_lang: str = "AUTO"
    target_lang: str = "ZH"

    @field_validator("text", "source_lang", "target_lang")
    @classmethod
    def _must_encode_as_utf8(cls, v: str) -> str:
        # lone surrogates survive JSON decoding but cannot be sent upstream
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("must be valid UTF-8 text")
        return v
