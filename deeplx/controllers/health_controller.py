"""
/**
 * @file deeplx/controllers/health_controller.py
 * @description 欢迎页与健康检查。
 */
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse


router = APIRouter()

BANNER = "DeepL Free API. Go to /translate with POST."


@router.get("/", response_class=PlainTextResponse)
def index():
    return BANNER


@router.get("/health")
def health(request: Request):
    state = request.app.state.server_state
    pool = request.app.state.client_pool
    return {
        "status": "ok",
        "clients": len(pool),
        "auth_required": state.auth_required,
    }
