"""
Auth API routes — register, login.

Mounted at the application root: ``POST /register`` and ``POST /login``.
"""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from auth.dependencies import get_auth_service
from auth.service import AuthService

router = APIRouter(tags=["auth"])


# ── Request / response schemas ─────────────────────────────────────────


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    token: str


# ── Endpoints ──────────────────────────────────────────────────────────


@router.post("/register", response_model=TokenResponse)
async def register(
    req: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, str]:
    """Register a new user."""
    token = await service.register(req.username, req.email, req.password)
    return {"token": token}


@router.post("/login", response_model=TokenResponse)
async def login(
    req: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> Dict[str, str]:
    """Login with email + password."""
    token = await service.login(req.email, req.password)
    return {"token": token}
