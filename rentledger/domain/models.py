"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Optional, Union

from rentledger.domain.exceptions import ValidationError
from rentledger.utils.date_utils import to_calendar_date

PaymentId = Union[int, str]


class PaymentStatus(str, Enum):
    """Display status derived per payment"""

    VERIFIED = "verified"
    AWAITING_VERIFICATION = "awaiting-verification"
    OVERDUE = "overdue"
    DUE_TODAY = "due-today"
    UPCOMING = "upcoming"


class VerificationStatus(str, Enum):
    """Verification coverage across a tenant's paid payments"""

    VERIFIED = "verified"
    PARTIALLY_VERIFIED = "partially_verified"
    UNVERIFIED = "unverified"


def _parse_amount(value: Any, field_name: str) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    try:
        amount = Decimal(str(value))
    except InvalidOperation as e:
        raise ValidationError(f"Unparsable {field_name}: {value!r}") from e
    if not amount.is_finite() or amount < 0:
        raise ValidationError(f"Invalid {field_name}: {value!r}")
    return amount


def _optional_date(value: Any, field_name: str) -> Optional[date]:
    if value is None or value == "":
        return None
    return to_calendar_date(value, field_name)


@dataclass
class Payment:
    """Rent payment record from the RentLedger API"""

    id: PaymentId
    amount: Decimal
    due_date: date
    paid_date: Optional[date] = None
    verified: bool = False
    status: str = "pending"  # advisory only: pending | paid | late | missed
    property_id: Optional[PaymentId] = None

    @property
    def due_day(self) -> date:
        """Due date as a calendar day; raises ValidationError if missing or malformed"""
        return to_calendar_date(self.due_date, "dueDate")

    @property
    def paid_day(self) -> Optional[date]:
        return _optional_date(self.paid_date, "paidDate")

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Payment":
        """
        Build a Payment from an API record (camelCase keys).

        Both `verified` and `isVerified` are honoured.

        Raises:
            ValidationError: missing id/dueDate or an unparsable date/amount
        """
        if record.get("id") is None:
            raise ValidationError("Missing required field: id")

        return cls(
            id=record["id"],
            amount=_parse_amount(record.get("amount"), "amount"),
            due_date=to_calendar_date(record.get("dueDate"), "dueDate"),
            paid_date=_optional_date(record.get("paidDate"), "paidDate"),
            verified=bool(record.get("verified") or record.get("isVerified")),
            status=record.get("status") or "pending",
            property_id=record.get("propertyId"),
        )


@dataclass
class Property:
    """Rented property, used for display context and balance derivation"""

    id: PaymentId
    address: str
    monthly_rent: Decimal
    tenancy_start_date: Optional[date] = None
    tenancy_end_date: Optional[date] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Property":
        if record.get("id") is None:
            raise ValidationError("Missing required field: id")

        return cls(
            id=record["id"],
            address=record.get("address") or "",
            monthly_rent=_parse_amount(record.get("monthlyRent"), "monthlyRent"),
            tenancy_start_date=_optional_date(record.get("tenancyStartDate"), "tenancyStartDate"),
            tenancy_end_date=_optional_date(record.get("tenancyEndDate"), "tenancyEndDate"),
        )


@dataclass
class ScoreBreakdown:
    """Weighted rent score out of 1000 with its three contributions"""

    on_time_score: int
    verification_score: int
    rent_to_income_score: int
    total: int

    @property
    def progress(self) -> float:
        """Total mapped onto a 0-100 bar"""
        return self.total / 10


@dataclass
class DashboardStats:
    """Tenant dashboard figures derived from the payment history"""

    payment_streak: int
    longest_streak: int
    total_paid: Decimal
    total_awaiting: Decimal
    awaiting_verification_count: int
    on_time_percentage: float
    next_payment_due: Optional[date]
    score: ScoreBreakdown
    monthly_rent_paid: Decimal
    verification_status: VerificationStatus
    verified_count: int
    pending_verification_count: int
    score_growth: int
    status_counts: Dict[str, int] = field(default_factory=dict)


@dataclass
class TenancyBalance:
    """Rent due versus rent paid for one property"""

    property_id: PaymentId
    months_elapsed: int
    total_due: Decimal
    total_paid: Decimal

    @property
    def outstanding(self) -> Decimal:
        return self.total_due - self.total_paid
