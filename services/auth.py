"""Caller identity and role checks.

Login (password / OAuth) happens in the identity gateway in front of this
service.  The gateway forwards the resolved user as headers:

- ``X-User-Id``      — opaque user id
- ``X-User-Role``    — ``admin`` or ``student``
- ``X-Gateway-Secret`` — shared secret proving the headers came from it

Use :func:`get_current_user` / :func:`require_admin` as FastAPI
dependencies.  The statistics engine never sees any of this.
"""

from __future__ import annotations

import hmac
import logging

from fastapi import Depends, HTTPException, Request

from config.settings import get_settings
from models.data import CurrentUser, Role

logger = logging.getLogger(__name__)


def verify_gateway_secret(request: Request) -> None:
    """Verify X-Gateway-Secret when a secret is configured."""
    settings = get_settings()
    if not settings.gateway_secret:
        logger.warning("GATEWAY_SECRET not configured, identity headers are trusted as-is")
        return

    provided = request.headers.get("X-Gateway-Secret", "")
    if not hmac.compare_digest(provided, settings.gateway_secret):
        raise HTTPException(status_code=403, detail="Invalid gateway secret")


def get_current_user(request: Request) -> CurrentUser:
    """Resolve the caller from gateway headers.

    Raises 401 when no identity is present and 400 for an unknown role.
    """
    user_id = request.headers.get("X-User-Id", "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")

    verify_gateway_secret(request)

    raw_role = request.headers.get("X-User-Role", Role.STUDENT.value).strip().lower()
    try:
        role = Role(raw_role)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown role '{raw_role}'")

    return CurrentUser(user_id=user_id, role=role)


def require_admin(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    """Dependency: only admins pass."""
    if not user.is_admin:
        logger.warning("User %s denied admin-only route", user.user_id)
        raise HTTPException(status_code=403, detail="Admin role required")
    return user
