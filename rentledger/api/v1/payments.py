"""Payment status endpoints - classify payments as verified, overdue, due today, etc."""

import logging
from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from rentledger.api.v1.schemas import ClassifyRequest, PaymentStatusItem, PaymentStatusResponse
from rentledger.api.dependencies import get_rentledger_client, get_request_id, resolve_today
from rentledger.infrastructure.clients.rentledger_api import RentLedgerClient
from rentledger.domain.classifier import classify_payments, count_statuses
from rentledger.domain.exceptions import PaymentsAPIError, ValidationError
from rentledger.domain.models import Payment
from rentledger.infrastructure.observability.metrics import record_statuses, upstream_fetch_failures_counter

router = APIRouter()


def _status_response(payments: List[Payment], today: date) -> PaymentStatusResponse:
    items = [
        PaymentStatusItem(
            payment_id=p.id,
            due_date=p.due_date,
            paid_date=p.paid_date,
            amount=float(p.amount),
            status=status.value,
        )
        for p, status in classify_payments(payments, today)
    ]
    status_counts = count_statuses(payments, today)
    record_statuses(status_counts)
    return PaymentStatusResponse(today=today, payments=items, status_counts=status_counts)


@router.post("/payments/classify", response_model=PaymentStatusResponse)
def classify(request_body: ClassifyRequest, request: Request):
    """
    Classify caller-supplied payment records.

    Returns 422 when a record has no due date or an unparsable date.
    """
    today = resolve_today(request_body.today)
    try:
        payments = [Payment.from_record(record.model_dump()) for record in request_body.payments]
        return _status_response(payments, today)
    except ValidationError as e:
        logging.warning(f"Invalid payment record: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/payments/status", response_model=PaymentStatusResponse)
async def get_payment_statuses(
    request: Request,
    user_id: str = Query(..., min_length=1, description="Tenant identifier"),
    today: date | None = Query(None, description="Defaults to today in the service timezone"),
    client: RentLedgerClient = Depends(get_rentledger_client),
):
    """Fetch a tenant's payments from the RentLedger API and classify each one"""
    request_id = get_request_id(request)
    try:
        payments = await client.get_payments(user_id)
        return _status_response(payments, resolve_today(today))

    except PaymentsAPIError as e:
        upstream_fetch_failures_counter.inc()
        logging.error(f"RentLedger API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Payments service unavailable")

    except ValidationError as e:
        logging.warning(f"Invalid payment record: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))
