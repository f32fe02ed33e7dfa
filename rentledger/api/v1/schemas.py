"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import Any, Dict, List, Optional, Union


class PaymentRecord(BaseModel):
    """Raw payment as sent by the RentLedger API (camelCase)"""

    model_config = {"extra": "allow"}

    id: Union[int, str]
    amount: Union[float, str, None] = None
    dueDate: Optional[str] = None
    paidDate: Optional[str] = None
    verified: Optional[bool] = None
    isVerified: Optional[bool] = None
    status: Optional[str] = None
    propertyId: Union[int, str, None] = None


class ClassifyRequest(BaseModel):
    """Request body for POST /v1/payments/classify"""

    payments: List[PaymentRecord]
    today: Optional[date] = Field(None, description="Defaults to today in the service timezone")


class PaymentStatusItem(BaseModel):
    """Derived status for one payment"""

    payment_id: Union[int, str]
    due_date: date
    paid_date: Optional[date] = None
    amount: float
    status: str


class PaymentStatusResponse(BaseModel):
    """Response for payment classification endpoints"""

    today: date
    payments: List[PaymentStatusItem]
    status_counts: Dict[str, int]


class ScoreRequest(BaseModel):
    """Request body for POST /v1/score"""

    user_id: str = Field(..., min_length=1, description="Tenant identifier")
    today: Optional[date] = Field(None, description="Defaults to today in the service timezone")


class ScoreBreakdownSchema(BaseModel):
    """Rent score with its weighted contributions"""

    total: int
    on_time_score: int
    verification_score: int
    rent_to_income_score: int
    progress: float


class ScoreResponse(BaseModel):
    """Response for POST /v1/score"""

    user_id: str
    snapshot_id: str
    today: date
    score: ScoreBreakdownSchema
    payment_streak: int
    longest_streak: int
    on_time_percentage: float
    total_paid: float
    total_awaiting: float
    awaiting_verification_count: int
    monthly_rent_paid: float
    next_payment_due: Optional[date] = None
    verification_status: str
    verified_count: int
    pending_verification_count: int
    score_growth: int
    status_counts: Dict[str, int]


class HistoryItem(BaseModel):
    """Single rent score snapshot in history"""

    snapshot_id: str
    as_of: date
    total: int
    on_time_score: int
    verification_score: int
    rent_to_income_score: int
    payment_streak: int
    verification_status: str
    status_counts: Optional[Dict[str, Any]] = None
    created_at: str


class HistoryResponse(BaseModel):
    """Response for GET /v1/score/history"""

    user_id: str
    snapshots: List[HistoryItem]


class BalanceItem(BaseModel):
    """Outstanding balance for one property"""

    property_id: Union[int, str]
    address: str
    months_elapsed: int
    total_due: float
    total_paid: float
    outstanding: float


class BalanceResponse(BaseModel):
    """Response for GET /v1/properties/balance"""

    user_id: str
    today: date
    balances: List[BalanceItem]
