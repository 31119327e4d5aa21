"""
Admin login
Checks the configured credentials and hands out a signed, expiring token
for the admin panel.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..auth import check_admin_credentials, create_admin_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["Admin Auth"])


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


@router.post("/login")
async def admin_login(data: LoginRequest, request: Request):
    if not check_admin_credentials(data.username, data.password):
        client_host = request.client.host if request.client else "unknown"
        logger.warning(f"🔒 Rejected admin login for '{data.username}' from {client_host}")
        return JSONResponse(status_code=401, content={"success": False})

    logger.info(f"🔓 Admin login: {data.username}")
    return {"success": True, "token": create_admin_token(data.username)}
