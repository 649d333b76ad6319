"""Payments API router."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from coursehub.core.enums import RoleEnum
from coursehub.modules.identity.schemas import Principal
from coursehub.modules.identity.service import get_current_principal, require_roles
from coursehub.modules.payments.schemas import (
    PaymentCreate,
    PaymentRead,
    PaymentUpdateStatus,
    PaymentWithCourseRead,
)
from coursehub.modules.payments.service import PaymentsService, get_payments_service

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("", response_model=PaymentRead, status_code=status.HTTP_201_CREATED)
async def create_payment(
    payload: PaymentCreate,
    service: PaymentsService = Depends(get_payments_service),
    principal: Principal = Depends(get_current_principal),
) -> PaymentRead:
    """Create payment record."""
    payment = await service.create_payment(payload, principal)
    return PaymentRead.model_validate(payment)


@router.get("", response_model=list[PaymentWithCourseRead])
async def list_my_payments(
    service: PaymentsService = Depends(get_payments_service),
    principal: Principal = Depends(get_current_principal),
) -> list[PaymentWithCourseRead]:
    """List payments of current user."""
    payments = await service.list_payments(principal)
    return [PaymentWithCourseRead.model_validate(item) for item in payments]


@router.patch("/{payment_id}/status", response_model=PaymentRead)
async def update_payment_status(
    payment_id: UUID,
    payload: PaymentUpdateStatus,
    service: PaymentsService = Depends(get_payments_service),
    _: Principal = Depends(require_roles(RoleEnum.ADMIN)),
) -> PaymentRead:
    """Update payment status (admin)."""
    payment = await service.update_payment_status(payment_id, payload.status)
    return PaymentRead.model_validate(payment)
