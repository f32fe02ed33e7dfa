"""Payment status classification"""

from collections import Counter
from datetime import date
from typing import Dict, List, Tuple

from rentledger.domain.models import Payment, PaymentStatus
from rentledger.utils.date_utils import to_calendar_date


def classify_payment(payment: Payment, today: date) -> PaymentStatus:
    """
    Assign exactly one display status to a payment.

    Rules in priority order (first match wins):
    1. verified                        -> verified
    2. paid but not verified           -> awaiting-verification
    3. unpaid, today after due date    -> overdue
    4. unpaid, today is the due date   -> due-today
    5. otherwise                       -> upcoming

    A verified payment without a paid date still classifies as verified.

    Raises:
        ValidationError: due date missing or unparsable
    """
    due_date = payment.due_day
    today = to_calendar_date(today, "today")

    if payment.verified:
        return PaymentStatus.VERIFIED
    if payment.paid_date is not None:
        return PaymentStatus.AWAITING_VERIFICATION
    if today > due_date:
        return PaymentStatus.OVERDUE
    if today == due_date:
        return PaymentStatus.DUE_TODAY
    return PaymentStatus.UPCOMING


def classify_payments(payments: List[Payment], today: date) -> List[Tuple[Payment, PaymentStatus]]:
    return [(p, classify_payment(p, today)) for p in payments]


def count_statuses(payments: List[Payment], today: date) -> Dict[str, int]:
    """Number of payments per status, every status present"""
    counts = Counter(classify_payment(p, today) for p in payments)
    return {status.value: counts.get(status, 0) for status in PaymentStatus}
