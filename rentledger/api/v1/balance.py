"""GET /v1/properties/balance - outstanding rent per tenancy"""

import asyncio
import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from rentledger.api.v1.schemas import BalanceItem, BalanceResponse
from rentledger.api.dependencies import get_rentledger_client, get_request_id, resolve_today
from rentledger.infrastructure.clients.rentledger_api import RentLedgerClient
from rentledger.domain.balance import compute_outstanding_balance
from rentledger.domain.exceptions import PaymentsAPIError, ValidationError
from rentledger.infrastructure.observability.metrics import upstream_fetch_failures_counter

router = APIRouter()


@router.get("/properties/balance", response_model=BalanceResponse)
async def get_balances(
    request: Request,
    user_id: str = Query(..., min_length=1, description="Tenant identifier"),
    today: date | None = Query(None, description="Defaults to today in the service timezone"),
    client: RentLedgerClient = Depends(get_rentledger_client),
):
    """
    Rent due minus rent paid for each of a tenant's properties.

    Properties without a tenancy start date are skipped.
    """
    request_id = get_request_id(request)
    today = resolve_today(today)

    try:
        properties, payments = await asyncio.gather(
            client.get_properties(user_id),
            client.get_payments(user_id),
        )
    except PaymentsAPIError as e:
        upstream_fetch_failures_counter.inc()
        logging.error(f"RentLedger API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Payments service unavailable")
    except ValidationError as e:
        logging.warning(f"Invalid payment record: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    balances = []
    for prop in properties:
        if prop.tenancy_start_date is None:
            logging.info(
                f"Property {prop.id} has no tenancy start date, skipping balance",
                extra={"request_id": request_id},
            )
            continue

        balance = compute_outstanding_balance(prop, payments, today)
        balances.append(
            BalanceItem(
                property_id=prop.id,
                address=prop.address,
                months_elapsed=balance.months_elapsed,
                total_due=float(balance.total_due),
                total_paid=float(balance.total_paid),
                outstanding=float(balance.outstanding),
            )
        )

    return BalanceResponse(user_id=user_id, today=today, balances=balances)
