"""Identity business logic layer and the request auth gate."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.core.database import get_db_session
from coursehub.core.enums import RoleEnum
from coursehub.core.security import (
    create_access_token,
    decode_token,
    hash_password,
    oauth2_scheme,
    verify_password,
)
from coursehub.modules.identity.models import User
from coursehub.modules.identity.repository import IdentityRepository
from coursehub.modules.identity.schemas import (
    AccountSummary,
    AuthResponse,
    LoginRequest,
    Principal,
    UserCreate,
)
from coursehub.shared.exceptions import (
    ConflictException,
    ForbiddenException,
    NotFoundException,
    UnauthenticatedException,
)

logger = logging.getLogger(__name__)


def issue_token(user: User) -> str:
    """Sign an access token with the claims the auth gate relies on."""
    return create_access_token(subject=str(user.id), email=user.email, role=str(user.role))


class IdentityService:
    """Identity domain service."""

    def __init__(self, repository: IdentityRepository) -> None:
        self.repository = repository

    async def register(self, payload: UserCreate) -> AuthResponse:
        """Register new user and sign them in."""
        existing_user = await self.repository.get_user_by_email(payload.email)
        if existing_user is not None:
            raise ConflictException("User already exists")

        user = await self.repository.create_user(
            email=payload.email,
            password_hash=hash_password(payload.password),
            name=payload.name,
            role=payload.role,
        )
        logger.info("Registered %s account %s", user.role, user.id)
        return AuthResponse(
            message="User registered successfully",
            token=issue_token(user),
            user=AccountSummary.model_validate(user),
        )

    async def login(self, payload: LoginRequest) -> AuthResponse:
        """Authenticate user and issue JWT token."""
        user = await self.repository.get_user_by_email(payload.email)
        if user is None or not verify_password(payload.password, user.password_hash):
            raise UnauthenticatedException("Invalid credentials")

        return AuthResponse(
            message="Login successful",
            token=issue_token(user),
            user=AccountSummary.model_validate(user),
        )

    async def get_profile(self, principal: Principal) -> User:
        """Return the caller's account."""
        user = await self.repository.get_user_by_id(principal.account_id)
        if user is None:
            raise NotFoundException("User not found")
        return user


async def get_identity_service(session: AsyncSession = Depends(get_db_session)) -> IdentityService:
    """Dependency to provide identity service."""
    return IdentityService(IdentityRepository(session))


def principal_from_token(token: str) -> Principal:
    """Build the request identity purely from verified token claims."""
    payload = decode_token(token)
    if payload.get("type") != "access":
        raise ForbiddenException("Invalid token")

    subject = payload.get("sub")
    role_claim = payload.get("role")
    if not subject or not role_claim:
        raise ForbiddenException("Invalid token")

    try:
        account_id = UUID(str(subject))
        role = RoleEnum(role_claim)
    except ValueError as exc:
        raise ForbiddenException("Invalid token") from exc

    return Principal(account_id=account_id, role=role, email=payload.get("email"))


async def get_current_principal(token: str | None = Depends(oauth2_scheme)) -> Principal:
    """Resolve the authenticated identity from the bearer token."""
    if not token:
        raise UnauthenticatedException("Access token required")
    return principal_from_token(token)


def require_roles(*roles: RoleEnum):
    """Dependency factory for role-based access."""
    if len(roles) == 1:
        denied_message = f"{roles[0].value.capitalize()} access required"
    else:
        denied_message = "Operation not permitted for your role"

    async def _checker(principal: Principal = Depends(get_current_principal)) -> Principal:
        if principal.role not in roles:
            raise ForbiddenException(denied_message)
        return principal

    return _checker
