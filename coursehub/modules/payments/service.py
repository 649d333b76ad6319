"""Payments business logic layer."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.core.database import get_db_session
from coursehub.core.enums import PaymentStatusEnum
from coursehub.modules.courses.repository import CoursesRepository
from coursehub.modules.identity.schemas import Principal
from coursehub.modules.payments.models import Payment
from coursehub.modules.payments.repository import PaymentsRepository
from coursehub.modules.payments.schemas import PaymentCreate
from coursehub.shared.exceptions import NotFoundException, ValidationException

logger = logging.getLogger(__name__)

ALLOWED_STATUS_TRANSITIONS: dict[PaymentStatusEnum, set[PaymentStatusEnum]] = {
    PaymentStatusEnum.PENDING: {PaymentStatusEnum.COMPLETED, PaymentStatusEnum.FAILED},
    PaymentStatusEnum.COMPLETED: {PaymentStatusEnum.REFUNDED},
    PaymentStatusEnum.FAILED: set(),
    PaymentStatusEnum.REFUNDED: set(),
}


class PaymentsService:
    """Payments domain service."""

    def __init__(self, repository: PaymentsRepository, courses_repository: CoursesRepository) -> None:
        self.repository = repository
        self.courses_repository = courses_repository

    async def create_payment(self, payload: PaymentCreate, principal: Principal) -> Payment:
        """Record a pending payment of the caller for a course."""
        if await self.courses_repository.get_course_by_id(payload.course_id) is None:
            raise NotFoundException("Course not found")

        payment = await self.repository.create_payment(
            user_id=principal.account_id,
            course_id=payload.course_id,
            amount=payload.amount,
            currency=payload.currency,
            payment_method=payload.payment_method,
            transaction_id=payload.transaction_id,
        )
        logger.info("Payment %s created for course %s", payment.id, payload.course_id)
        return payment

    async def list_payments(self, principal: Principal) -> list[Payment]:
        return await self.repository.list_payments_for_user(principal.account_id)

    async def update_payment_status(self, payment_id: UUID, status: PaymentStatusEnum) -> Payment:
        """Move payment along pending -> completed/failed -> refunded."""
        payment = await self.repository.get_payment_by_id(payment_id)
        if payment is None:
            raise NotFoundException("Payment not found")

        if payment.status == status:
            return payment
        if status not in ALLOWED_STATUS_TRANSITIONS[payment.status]:
            raise ValidationException(
                "Validation error",
                error=f"Payment cannot move from {payment.status} to {status}",
            )
        return await self.repository.set_payment_status(payment, status)


async def get_payments_service(session: AsyncSession = Depends(get_db_session)) -> PaymentsService:
    """Dependency provider for payments service."""
    return PaymentsService(PaymentsRepository(session), CoursesRepository(session))
