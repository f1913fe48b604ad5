"""
/**
 * @file deeplx/main.py
 * @description FastAPI 应用入口（仅装配路由、中间件与进程级状态）。
 */
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from deeplx.config import Settings, load_settings
from deeplx.controllers import health_router, translate_router
from deeplx.models import ServerState
from deeplx.services import ClientPool


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, pool: Optional[ClientPool] = None) -> FastAPI:
    settings = settings or load_settings()
    state = ServerState.from_settings(settings)

    if state.auth_required:
        logger.info("API key is required")
    if not state.dl_session:
        logger.warning("No dl_session configured, upstream calls are sent with an empty session cookie")

    app = FastAPI(title="deeplx")
    app.state.server_state = state
    app.state.client_pool = pool or ClientPool.from_proxies(settings.proxies)

    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=".*",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=3600,
    )

    app.include_router(health_router)
    app.include_router(translate_router)
    return app
