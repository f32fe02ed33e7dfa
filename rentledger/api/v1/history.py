"""GET /v1/score/history - tenant's recent rent score snapshots"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from rentledger.api.v1.schemas import HistoryResponse, HistoryItem
from rentledger.config import settings
from rentledger.infrastructure.database.session import get_db
from rentledger.infrastructure.database.repositories import ScoreSnapshotRepository

router = APIRouter()


@router.get("/score/history", response_model=HistoryResponse)
def get_score_history(
    user_id: str = Query(..., min_length=1, description="Tenant identifier"),
    db: Session = Depends(get_db),
):
    """
    Retrieve recent rent scores for a tenant.

    Returns:
        Snapshots newest first, each with its sub-scores and streak
    """
    snapshots = ScoreSnapshotRepository(db).get_snapshots_by_user(user_id, limit=settings.history_limit)

    return HistoryResponse(
        user_id=user_id,
        snapshots=[
            HistoryItem(
                snapshot_id=str(s.id),
                as_of=s.as_of,
                total=s.total,
                on_time_score=s.on_time_score,
                verification_score=s.verification_score,
                rent_to_income_score=s.rent_to_income_score,
                payment_streak=s.payment_streak,
                verification_status=s.verification_status,
                status_counts=s.status_counts,
                created_at=s.created_at.isoformat(),
            )
            for s in snapshots
        ],
    )
