"""Unit tests for payment status classification"""

import pytest
from datetime import date, datetime
from rentledger.domain.classifier import classify_payment, classify_payments, count_statuses
from rentledger.domain.exceptions import ValidationError
from rentledger.domain.models import PaymentStatus

TODAY = date(2024, 3, 15)


def test_verified_wins_over_everything(payment_factory):
    """Verified payments are verified whatever their dates"""
    overdue_but_verified = payment_factory(due_date=date(2024, 1, 1), verified=True)
    paid_and_verified = payment_factory(due_date=date(2024, 3, 1), paid_date=date(2024, 3, 1), verified=True)

    assert classify_payment(overdue_but_verified, TODAY) == PaymentStatus.VERIFIED
    assert classify_payment(paid_and_verified, TODAY) == PaymentStatus.VERIFIED


def test_paid_unverified_awaits_verification(payment_factory):
    """Paid late or early, an unverified payment is awaiting verification"""
    late = payment_factory(due_date=date(2024, 1, 1), paid_date=date(2024, 2, 20))
    future = payment_factory(due_date=date(2024, 4, 1), paid_date=date(2024, 3, 10))

    assert classify_payment(late, TODAY) == PaymentStatus.AWAITING_VERIFICATION
    assert classify_payment(future, TODAY) == PaymentStatus.AWAITING_VERIFICATION


def test_unpaid_past_due_is_overdue(payment_factory):
    payment = payment_factory(due_date=date(2024, 3, 14))
    assert classify_payment(payment, TODAY) == PaymentStatus.OVERDUE


def test_unpaid_due_today(payment_factory):
    payment = payment_factory(due_date=TODAY)
    assert classify_payment(payment, TODAY) == PaymentStatus.DUE_TODAY


def test_unpaid_future_is_upcoming(payment_factory):
    payment = payment_factory(due_date=date(2024, 3, 16))
    assert classify_payment(payment, TODAY) == PaymentStatus.UPCOMING


def test_time_of_day_does_not_affect_due_today(payment_factory):
    """A late-evening 'today' is still the due date, not overdue"""
    payment = payment_factory(due_date=TODAY)
    assert classify_payment(payment, datetime(2024, 3, 15, 23, 59)) == PaymentStatus.DUE_TODAY
    assert classify_payment(payment, datetime(2024, 3, 15, 0, 0)) == PaymentStatus.DUE_TODAY


def test_status_values_match_labels():
    assert [s.value for s in PaymentStatus] == [
        "verified",
        "awaiting-verification",
        "overdue",
        "due-today",
        "upcoming",
    ]


def test_missing_due_date_fails_fast(payment_factory):
    payment = payment_factory(due_date=None)
    with pytest.raises(ValidationError):
        classify_payment(payment, TODAY)


def test_malformed_due_date_fails_fast(payment_factory):
    payment = payment_factory(due_date="15/03/2024")
    with pytest.raises(ValidationError):
        classify_payment(payment, TODAY)


def test_classification_is_idempotent(sample_payments):
    first = [s for _, s in classify_payments(sample_payments, TODAY)]
    second = [s for _, s in classify_payments(sample_payments, TODAY)]
    assert first == second


def test_count_statuses_includes_every_status(sample_payments):
    counts = count_statuses(sample_payments, date(2024, 6, 15))

    assert counts == {
        "verified": 5,
        "awaiting-verification": 1,
        "overdue": 0,
        "due-today": 0,
        "upcoming": 1,
    }
