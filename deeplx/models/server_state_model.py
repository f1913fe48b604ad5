"""
/**
 * @file deeplx/models/server_state_model.py
 * @description 进程级只读状态：访问密钥与 DeepL 会话凭据。
 */
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from deeplx.config import Settings


@dataclass(frozen=True)
class ServerState:
    api_key: Optional[str]
    dl_session: str

    @property
    def auth_required(self) -> bool:
        return self.api_key is not None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ServerState":
        return cls(api_key=settings.api_key, dl_session=settings.dl_session)
