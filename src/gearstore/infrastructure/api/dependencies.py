"""FastAPI dependencies shared by the route modules."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from fastapi import Depends, Request

from gearstore.infrastructure.api.auth import COOKIE_NAME, AdminAuth
from gearstore.infrastructure.bootstrap import Container, build_container


@lru_cache
def _process_container() -> Container:
    return build_container()


def get_container() -> Container:
    """Overridden in tests through ``app.dependency_overrides``."""
    return _process_container()


def get_admin_auth(container: Container = Depends(get_container)) -> AdminAuth:
    settings = container.settings
    return AdminAuth(
        admin_email=settings.admin_email,
        admin_password=settings.admin_password,
        secret=settings.jwt_secret,
        expiry_hours=settings.jwt_expiry_hours,
    )


def session_token(request: Request) -> str | None:
    header = request.headers.get("Authorization", "")
    if header.lower().startswith("bearer "):
        return header[7:].strip()
    return request.cookies.get(COOKIE_NAME)


def require_admin(
    request: Request,
    auth: AdminAuth = Depends(get_admin_auth),
) -> dict[str, Any]:
    return auth.verify(session_token(request))
