"""Admin login, session check and logout."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from gearstore.domain.exceptions import AuthenticationError
from gearstore.infrastructure.api.auth import COOKIE_NAME, AdminAuth
from gearstore.infrastructure.api.dependencies import get_admin_auth, session_token
from gearstore.infrastructure.api.schemas import LoginRequest

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login")
def login(body: LoginRequest, response: Response, auth: AdminAuth = Depends(get_admin_auth)):
    token = auth.login(body.email, body.password)
    response.set_cookie(
        COOKIE_NAME,
        token,
        max_age=int(auth.expiry.total_seconds()),
        httponly=True,
        samesite="strict",
        path="/",
    )
    email = (body.email or "").strip().lower()
    return {
        "success": True,
        "message": "Login successful",
        "token": token,
        "user": {"email": email, "role": "admin"},
    }


@router.get("/check")
def check(request: Request, auth: AdminAuth = Depends(get_admin_auth)):
    try:
        payload = auth.verify(session_token(request))
    except AuthenticationError:
        return {"authenticated": False}
    return {"authenticated": True, "user": {"email": payload["email"], "role": payload["role"]}}


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(COOKIE_NAME, path="/")
    return {"success": True}
