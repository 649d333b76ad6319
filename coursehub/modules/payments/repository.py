"""Payments repository layer."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from coursehub.core.enums import PaymentStatusEnum
from coursehub.modules.payments.models import Payment
from coursehub.shared.utils import utc_now


class PaymentsRepository:
    """DB operations for payments domain."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_payment(
        self,
        user_id: UUID,
        course_id: UUID,
        amount: Decimal,
        currency: str,
        payment_method: str,
        transaction_id: str | None,
    ) -> Payment:
        payment = Payment(
            user_id=user_id,
            course_id=course_id,
            amount=amount,
            currency=currency,
            payment_method=payment_method,
            transaction_id=transaction_id,
        )
        self.session.add(payment)
        await self.session.flush()
        return payment

    async def get_payment_by_id(self, payment_id: UUID) -> Payment | None:
        return await self.session.get(Payment, payment_id)

    async def list_payments_for_user(self, user_id: UUID) -> list[Payment]:
        stmt = (
            select(Payment)
            .options(selectinload(Payment.course))
            .where(Payment.user_id == user_id)
            .order_by(Payment.created_at.desc())
        )
        return list((await self.session.scalars(stmt)).all())

    async def set_payment_status(self, payment: Payment, status: PaymentStatusEnum) -> Payment:
        payment.status = status
        if status == PaymentStatusEnum.COMPLETED and payment.paid_at is None:
            payment.paid_at = utc_now()
        await self.session.flush()
        return payment
