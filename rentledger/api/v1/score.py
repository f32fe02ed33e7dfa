"""POST /v1/score - tenant rent score and dashboard statistics"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from rentledger.api.v1.schemas import ScoreRequest, ScoreResponse, ScoreBreakdownSchema
from rentledger.api.dependencies import get_rentledger_client, get_request_id, resolve_today
from rentledger.infrastructure.database.session import get_db
from rentledger.infrastructure.database.repositories import ScoreSnapshotRepository
from rentledger.infrastructure.clients.rentledger_api import RentLedgerClient
from rentledger.domain.dashboard import compute_dashboard_stats
from rentledger.domain.exceptions import PaymentsAPIError, ValidationError
from rentledger.infrastructure.observability.metrics import record_score, upstream_fetch_failures_counter
from rentledger.infrastructure.observability.logging import log_score_computed

router = APIRouter()


@router.post("/score", response_model=ScoreResponse)
async def create_score(
    request_body: ScoreRequest,
    request: Request,
    db: Session = Depends(get_db),
    client: RentLedgerClient = Depends(get_rentledger_client),
):
    """
    Compute a tenant's rent score from their payment history.

    Flow:
    1. Fetch payments from the RentLedger API
    2. Derive streak, sub-scores and dashboard figures
    3. Persist a score snapshot for history
    4. Return the breakdown
    """
    start_time = time.time()
    request_id = get_request_id(request)
    today = resolve_today(request_body.today)

    try:
        payments = await client.get_payments(request_body.user_id)
        stats = compute_dashboard_stats(payments, today)

        snapshot = ScoreSnapshotRepository(db).create_snapshot(
            user_id=request_body.user_id,
            as_of=today,
            stats=stats,
        )
        db.commit()

        duration_ms = (time.time() - start_time) * 1000
        record_score(stats.score.total)
        log_score_computed(
            request_id,
            request_body.user_id,
            stats.score.total,
            stats.payment_streak,
            len(payments),
            duration_ms,
        )

        return ScoreResponse(
            user_id=request_body.user_id,
            snapshot_id=str(snapshot.id),
            today=today,
            score=ScoreBreakdownSchema(
                total=stats.score.total,
                on_time_score=stats.score.on_time_score,
                verification_score=stats.score.verification_score,
                rent_to_income_score=stats.score.rent_to_income_score,
                progress=stats.score.progress,
            ),
            payment_streak=stats.payment_streak,
            longest_streak=stats.longest_streak,
            on_time_percentage=stats.on_time_percentage,
            total_paid=float(stats.total_paid),
            total_awaiting=float(stats.total_awaiting),
            awaiting_verification_count=stats.awaiting_verification_count,
            monthly_rent_paid=float(stats.monthly_rent_paid),
            next_payment_due=stats.next_payment_due,
            verification_status=stats.verification_status.value,
            verified_count=stats.verified_count,
            pending_verification_count=stats.pending_verification_count,
            score_growth=stats.score_growth,
            status_counts=stats.status_counts,
        )

    except PaymentsAPIError as e:
        upstream_fetch_failures_counter.inc()
        db.rollback()
        logging.error(f"RentLedger API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Payments service unavailable")

    except ValidationError as e:
        db.rollback()
        logging.warning(f"Invalid payment record: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
