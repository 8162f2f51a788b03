"""
services/fee_service.py

- 수납 원장 상태 계산과 납부 반영, 수납 통계
"""

import logging
from typing import Iterable

from models.fees import FeeLedger, FeePayment
from schemas.fees import FeeAnalytics, FeePaymentCreate
from services.grading import round_half_up

logger = logging.getLogger(__name__)


def ledger_status(total_fees: float, paid_amount: float) -> str:
    """잔액 <= 0 → Paid, 일부 납부 → Partial, 미납 → Unpaid"""
    balance = total_fees - paid_amount
    if balance <= 0:
        return "Paid"
    if balance < total_fees:
        return "Partial"
    return "Unpaid"


def apply_payment(ledger: FeeLedger, payment: FeePaymentCreate) -> FeePayment:
    """원장에 납부 1건을 추가하고 납부액/잔액/상태를 갱신 (커밋은 호출 측 책임)"""
    record = FeePayment(**payment.model_dump())
    ledger.payments.append(record)
    ledger.paid_amount = (ledger.paid_amount or 0) + payment.amount
    ledger.balance = ledger.total_fees - ledger.paid_amount
    ledger.status = ledger_status(ledger.total_fees, ledger.paid_amount)
    logger.info(
        "Payment %s of %.2f applied to ledger %s (balance %.2f, %s)",
        payment.receipt_number, payment.amount, ledger.id, ledger.balance, ledger.status,
    )
    return record


def fee_analytics(ledgers: Iterable[FeeLedger]) -> FeeAnalytics:
    ledgers = list(ledgers)
    total_expected = sum(l.total_fees for l in ledgers)
    total_collected = sum(l.paid_amount for l in ledgers)
    rate = round_half_up(total_collected / total_expected * 100) if total_expected > 0 else 0
    return FeeAnalytics(
        total_expected=total_expected,
        total_collected=total_collected,
        total_outstanding=total_expected - total_collected,
        collection_rate=rate,
    )
