"""
/**
 * @file deeplx/controllers/translate_controller.py
 * @description 翻译控制器：POST /translate，转发到 DeepL 网页接口。
 */
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from deeplx.errors import RelayError
from deeplx.models import TranslateRequest, TranslateResponse
from deeplx.services import translate as relay_translate


router = APIRouter()

bearer_scheme = HTTPBearer(auto_error=False)


@router.post("/translate", response_model=TranslateResponse)
def translate(
    req: TranslateRequest,
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
):
    token = credentials.credentials if credentials else None
    try:
        return relay_translate(
            req,
            request.app.state.server_state,
            request.app.state.client_pool,
            token=token,
        )
    except RelayError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
