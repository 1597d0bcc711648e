# app/core/security.py
# =================================================================================
# 🔑 API Key del anfitrión para las rutas /api/host
# - Header 'x-admin-key' comparado con ADMIN_API_KEY (leída en cada petición).
# - Sin ADMIN_API_KEY configurada, todas las rutas protegidas responden 401.
# =================================================================================

import hmac
import os

from fastapi import Depends, HTTPException, status
from fastapi.security.api_key import APIKeyHeader
from loguru import logger

ADMIN_KEY_HEADER = "x-admin-key"
_api_key_header = APIKeyHeader(name=ADMIN_KEY_HEADER, auto_error=False)


def require_admin(api_key: str = Depends(_api_key_header)) -> None:
    expected = os.getenv("ADMIN_API_KEY", "")
    if not expected:
        logger.warning("ADMIN_API_KEY no configurada; se rechaza el acceso a /api/host.")
    if not expected or not api_key or not hmac.compare_digest(api_key.encode("utf-8"), expected.encode("utf-8")):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing admin key",
        )
