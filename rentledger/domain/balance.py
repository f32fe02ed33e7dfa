"""Outstanding rent balance for a tenancy"""

from datetime import date
from decimal import Decimal
from typing import List

from rentledger.domain.exceptions import ValidationError
from rentledger.domain.models import Payment, Property, TenancyBalance
from rentledger.utils.date_utils import months_elapsed, to_calendar_date


def compute_outstanding_balance(prop: Property, payments: List[Payment], today: date) -> TenancyBalance:
    """
    Rent due since the tenancy started minus rent paid against it.

    Requirements:
    - One month of rent falls due each time the start day-of-month is reached
    - Periods stop accruing once the tenancy end date has passed
    - Only paid payments for this property, due inside the tenancy, count

    This approximates a ledger from the monthly rent; there are no explicit
    rent-due records.

    Raises:
        ValidationError: property has no tenancy start date
    """
    if prop.tenancy_start_date is None:
        raise ValidationError(f"Property {prop.id} has no tenancy start date")

    today = to_calendar_date(today, "today")
    start = prop.tenancy_start_date
    end = prop.tenancy_end_date

    periods = months_elapsed(start, today)
    if end is not None and today > end:
        periods = min(periods, months_elapsed(start, end))

    total_paid = sum(
        (
            p.amount
            for p in payments
            if str(p.property_id) == str(prop.id)
            and p.paid_date is not None
            and p.due_day >= start
            and (end is None or p.due_day <= end)
        ),
        Decimal("0"),
    )

    return TenancyBalance(
        property_id=prop.id,
        months_elapsed=periods,
        total_due=prop.monthly_rent * periods,
        total_paid=total_paid,
    )
