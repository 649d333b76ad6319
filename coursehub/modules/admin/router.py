"""Admin API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from coursehub.core.enums import RoleEnum
from coursehub.modules.admin.schemas import AdminActionRead, PasswordReset, RoleChange
from coursehub.modules.admin.service import AdminService, get_admin_service
from coursehub.modules.identity.schemas import Principal, UserRead
from coursehub.modules.identity.service import require_roles
from coursehub.shared.pagination import Page, PageWindow, page_window

router = APIRouter(prefix="/admin", tags=["admin"])

admin_only = require_roles(RoleEnum.ADMIN)


@router.get("/users", response_model=Page[UserRead])
async def list_users(
    role: RoleEnum | None = Query(default=None),
    window: PageWindow = Depends(page_window),
    service: AdminService = Depends(get_admin_service),
    _: Principal = Depends(admin_only),
) -> Page[UserRead]:
    """List accounts."""
    items, total = await service.list_users(window.limit, window.offset, role)
    serialized = [UserRead.model_validate(item) for item in items]
    return Page[UserRead].of(serialized, total, window)


@router.patch("/users/{user_id}/role", response_model=UserRead)
async def change_role(
    user_id: UUID,
    payload: RoleChange,
    service: AdminService = Depends(get_admin_service),
    principal: Principal = Depends(admin_only),
) -> UserRead:
    """Change account role."""
    user = await service.change_role(user_id, payload.role, principal)
    return UserRead.model_validate(user)


@router.post("/users/{user_id}/password", status_code=status.HTTP_204_NO_CONTENT)
async def reset_password(
    user_id: UUID,
    payload: PasswordReset,
    service: AdminService = Depends(get_admin_service),
    principal: Principal = Depends(admin_only),
) -> Response:
    """Reset account password."""
    await service.reset_password(user_id, payload.new_password, principal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID,
    service: AdminService = Depends(get_admin_service),
    principal: Principal = Depends(admin_only),
) -> Response:
    """Delete account together with its teacher profile."""
    await service.delete_user(user_id, principal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/actions", response_model=Page[AdminActionRead])
async def list_admin_actions(
    window: PageWindow = Depends(page_window),
    service: AdminService = Depends(get_admin_service),
    _: Principal = Depends(admin_only),
) -> Page[AdminActionRead]:
    """List admin journal entries."""
    items, total = await service.list_actions(window.limit, window.offset)
    serialized = [AdminActionRead.model_validate(item) for item in items]
    return Page[AdminActionRead].of(serialized, total, window)
