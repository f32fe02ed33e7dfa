"""Unit tests for tenancy balance derivation"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from rentledger.domain.balance import compute_outstanding_balance
from rentledger.domain.exceptions import ValidationError
from rentledger.domain.models import Property


def make_property(start=date(2024, 1, 1), end=None, rent="1200.00") -> Property:
    return Property(
        id=1,
        address="12 Acacia Avenue, London",
        monthly_rent=Decimal(rent),
        tenancy_start_date=start,
        tenancy_end_date=end,
    )


def test_balance_fully_paid(sample_payments):
    balance = compute_outstanding_balance(make_property(), sample_payments, date(2024, 6, 15))

    assert balance.months_elapsed == 6
    assert balance.total_due == Decimal("7200.00")
    assert balance.total_paid == Decimal("7200.00")
    assert balance.outstanding == 0


def test_balance_new_month_falls_due(sample_payments):
    """On 1 July the July rent is due and unpaid"""
    balance = compute_outstanding_balance(make_property(), sample_payments, date(2024, 7, 1))

    assert balance.months_elapsed == 7
    assert balance.outstanding == Decimal("1200.00")


def test_balance_month_counts_from_start_day():
    prop = make_property(start=date(2024, 1, 15))

    assert compute_outstanding_balance(prop, [], date(2024, 2, 14)).months_elapsed == 1
    assert compute_outstanding_balance(prop, [], date(2024, 2, 15)).months_elapsed == 2


def test_balance_capped_at_tenancy_end():
    prop = make_property(start=date(2024, 1, 15), end=date(2024, 3, 31))
    balance = compute_outstanding_balance(prop, [], date(2024, 6, 20))

    assert balance.months_elapsed == 3
    assert balance.total_due == Decimal("3600.00")


def test_balance_future_tenancy():
    prop = make_property(start=date(2024, 9, 1))
    balance = compute_outstanding_balance(prop, [], date(2024, 6, 20))

    assert balance.months_elapsed == 0
    assert balance.total_due == 0


def test_balance_ignores_other_properties_and_unpaid(payment_factory):
    payments = [
        payment_factory(1, date(2024, 1, 1), date(2024, 1, 1), property_id=1),
        payment_factory(2, date(2024, 1, 1), date(2024, 1, 1), property_id=2),
        payment_factory(3, date(2024, 2, 1), None, property_id=1),
        payment_factory(4, date(2023, 12, 1), date(2023, 12, 1), property_id=1),  # before tenancy
    ]
    balance = compute_outstanding_balance(make_property(), payments, date(2024, 2, 10))

    assert balance.total_paid == Decimal("1200.00")
    assert balance.outstanding == Decimal("1200.00")


def test_balance_requires_start_date():
    with pytest.raises(ValidationError):
        compute_outstanding_balance(make_property(start=None), [], date(2024, 6, 1))


def test_balance_accepts_datetime_fields(payment_factory):
    payments = [payment_factory(1, datetime(2024, 1, 1, 8, 0), datetime(2024, 1, 1, 9, 0), property_id=1)]
    balance = compute_outstanding_balance(make_property(), payments, datetime(2024, 1, 20, 10, 0))

    assert balance.months_elapsed == 1
    assert balance.outstanding == 0
