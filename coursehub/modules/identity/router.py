"""Identity API router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from coursehub.modules.identity.schemas import AuthResponse, LoginRequest, Principal, UserCreate, UserRead
from coursehub.modules.identity.service import (
    IdentityService,
    get_current_principal,
    get_identity_service,
)

router = APIRouter(tags=["identity"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: UserCreate,
    service: IdentityService = Depends(get_identity_service),
) -> AuthResponse:
    """Register a new account."""
    return await service.register(payload)


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    service: IdentityService = Depends(get_identity_service),
) -> AuthResponse:
    """Sign in by email/password and return a bearer token."""
    return await service.login(payload)


@router.get("/profile", response_model=UserRead)
async def get_profile(
    service: IdentityService = Depends(get_identity_service),
    principal: Principal = Depends(get_current_principal),
) -> UserRead:
    """Return account of authenticated user."""
    user = await service.get_profile(principal)
    return UserRead.model_validate(user)
