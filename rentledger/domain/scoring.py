"""Rent score engine - weighted composite of on-time rate, verification and rent-to-income"""

import math
from typing import List

from rentledger.domain.models import Payment, ScoreBreakdown
from rentledger.domain.streak import compute_streak, is_paid_on_time

MAX_SCORE = 1000

# Component ceilings (60% / 20% / 20% of MAX_SCORE)
ON_TIME_MAX = 600
VERIFICATION_MAX = 200
RENT_TO_INCOME_MAX = 200

# Payments needed before consistency stops improving the rent-to-income component
CONSISTENCY_TARGET_PAYMENTS = 12


def _as_number(value) -> float:
    """Missing, NaN or non-numeric inputs count as zero"""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def _clamp(value: float, upper: float) -> float:
    return max(0.0, min(value, upper))


def _round_half_up(value: float) -> int:
    """Nearest whole point, halves rounding up (812.5 -> 813)"""
    return math.floor(value + 0.5)


def compute_score(on_time_percentage, verification_score, rent_to_income_score) -> ScoreBreakdown:
    """
    Combine the three sub-scores into a rent score out of 1000.

    Weights:
    - 60%: on-time payments, given as a 0-100 percentage and scaled to 0-600
    - 20%: verification, already scaled to 0-200
    - 20%: rent-to-income, already scaled to 0-200

    Never raises: a missing sub-score lowers the total instead of failing.

    Example:
        (100, 150, 100) -> 600 + 150 + 100 = 850
    """
    on_time = _clamp(_as_number(on_time_percentage) / 100 * ON_TIME_MAX, ON_TIME_MAX)
    verification = _clamp(_as_number(verification_score), VERIFICATION_MAX)
    rent_to_income = _clamp(_as_number(rent_to_income_score), RENT_TO_INCOME_MAX)

    total = _round_half_up(on_time + verification + rent_to_income)

    return ScoreBreakdown(
        on_time_score=_round_half_up(on_time),
        verification_score=_round_half_up(verification),
        rent_to_income_score=_round_half_up(rent_to_income),
        total=int(_clamp(total, MAX_SCORE)),
    )


def paid_payments(payments: List[Payment]) -> List[Payment]:
    return [p for p in payments if p.paid_date is not None]


def calculate_on_time_percentage(payments: List[Payment]) -> float:
    """Share of paid payments that cleared inside the grace window, 0-100"""
    paid = paid_payments(payments)
    if not paid:
        return 0.0
    on_time = sum(1 for p in paid if is_paid_on_time(p))
    return on_time / len(paid) * 100


def calculate_verification_score(payments: List[Payment]) -> float:
    """Verified share of paid payments, scaled to 0-200"""
    paid = paid_payments(payments)
    if not paid:
        return 0.0
    verified = sum(1 for p in paid if p.verified)
    return verified / len(paid) * VERIFICATION_MAX


def calculate_rent_to_income_score(payments: List[Payment], streak: int) -> float:
    """
    Affordability proxy scaled to 0-200.

    Half comes from how many payments have been made (capped at a year),
    half from the current streak (capped at six months).
    """
    paid_count = len(paid_payments(payments))
    consistency = min(paid_count / CONSISTENCY_TARGET_PAYMENTS, 1.0)
    streak_bonus = min(streak / CONSISTENCY_TARGET_PAYMENTS, 0.5)
    return (consistency * 0.5 + streak_bonus) * RENT_TO_INCOME_MAX


def score_payments(payments: List[Payment]) -> ScoreBreakdown:
    """Derive the three sub-scores from a payment history and aggregate them"""
    streak = compute_streak(payments)
    return compute_score(
        calculate_on_time_percentage(payments),
        calculate_verification_score(payments),
        calculate_rent_to_income_score(payments, streak),
    )
