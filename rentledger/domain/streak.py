"""On-time payment streak calculation"""

from typing import List

from rentledger.domain.models import Payment
from rentledger.utils.date_utils import days_between

# Days after the due date a payment may clear and still count as on time
ON_TIME_GRACE_DAYS = 5


def is_paid_on_time(payment: Payment) -> bool:
    """Paid, and no more than ON_TIME_GRACE_DAYS after the due date (early is fine)"""
    if payment.paid_date is None:
        return False
    return days_between(payment.paid_day, payment.due_day) <= ON_TIME_GRACE_DAYS


def sort_by_due_date(payments: List[Payment], newest_first: bool = True) -> List[Payment]:
    """Order by due date; equal due dates keep id order so the result is deterministic"""
    by_id = sorted(payments, key=lambda p: str(p.id))
    return sorted(
        by_id,
        key=lambda p: p.due_day,
        reverse=newest_first,
    )


def compute_streak(payments: List[Payment]) -> int:
    """
    Count consecutive on-time payments walking back from the most recent due date.

    The walk stops at the first unpaid or late payment, so a single break caps
    the streak no matter how many older payments were on time.

    Example:
        due 2024-03-01 paid 2024-03-01  -> 1
        due 2024-02-01 paid 2024-02-03  -> 2
        due 2024-01-01 unpaid           -> stop, streak = 2
    """
    streak = 0
    for payment in sort_by_due_date(payments):
        if not is_paid_on_time(payment):
            break
        streak += 1
    return streak


def compute_longest_streak(payments: List[Payment]) -> int:
    """Longest run of consecutive on-time payments anywhere in the history"""
    longest = current = 0
    for payment in sort_by_due_date(payments, newest_first=False):
        if is_paid_on_time(payment):
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest
