"""Tenant dashboard statistics"""

from datetime import date
from decimal import Decimal
from typing import List

from rentledger.domain.classifier import count_statuses
from rentledger.domain.models import DashboardStats, Payment, VerificationStatus
from rentledger.domain.scoring import (
    calculate_on_time_percentage,
    calculate_rent_to_income_score,
    calculate_verification_score,
    compute_score,
    paid_payments,
    score_payments,
)
from rentledger.domain.streak import compute_longest_streak, compute_streak, sort_by_due_date
from rentledger.utils.date_utils import add_months, month_start, to_calendar_date


def determine_verification_status(paid: List[Payment]) -> VerificationStatus:
    verified = sum(1 for p in paid if p.verified)
    if not paid or verified == 0:
        return VerificationStatus.UNVERIFIED
    if verified == len(paid):
        return VerificationStatus.VERIFIED
    return VerificationStatus.PARTIALLY_VERIFIED


def compute_dashboard_stats(payments: List[Payment], today: date) -> DashboardStats:
    """
    Derive every figure the tenant dashboard shows from one payment history.

    Score growth compares against the score of the payments that fell due
    before the current month.
    """
    today = to_calendar_date(today, "today")
    ordered = sort_by_due_date(payments)
    paid = paid_payments(ordered)
    unpaid = [p for p in ordered if p.paid_date is None]
    awaiting = [p for p in paid if not p.verified]

    streak = compute_streak(ordered)
    on_time_percentage = calculate_on_time_percentage(ordered)
    score = compute_score(
        on_time_percentage,
        calculate_verification_score(ordered),
        calculate_rent_to_income_score(ordered, streak),
    )

    # Soonest unpaid payment, overdue ones included
    next_due = min((p.due_day for p in unpaid), default=None)

    this_month = month_start(today)
    next_month = add_months(this_month, 1)
    monthly_rent_paid = sum(
        (p.amount for p in paid if this_month <= p.paid_day < next_month),
        Decimal("0"),
    )

    earlier = [p for p in ordered if p.due_day < this_month]
    previous_total = score_payments(earlier).total if earlier else 0

    return DashboardStats(
        payment_streak=streak,
        longest_streak=compute_longest_streak(ordered),
        total_paid=sum((p.amount for p in paid), Decimal("0")),
        total_awaiting=sum((p.amount for p in awaiting), Decimal("0")),
        awaiting_verification_count=len(awaiting),
        on_time_percentage=on_time_percentage,
        next_payment_due=next_due,
        score=score,
        monthly_rent_paid=monthly_rent_paid,
        verification_status=determine_verification_status(paid),
        verified_count=sum(1 for p in paid if p.verified),
        pending_verification_count=sum(1 for p in unpaid if not p.verified),
        score_growth=score.total - previous_total,
        status_counts=count_statuses(ordered, today),
    )
