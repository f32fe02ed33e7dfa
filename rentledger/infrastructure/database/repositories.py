"""Data access layer for rent score history"""

from datetime import date
from typing import List
from sqlalchemy.orm import Session
from rentledger.infrastructure.database.models import RentScoreSnapshot
from rentledger.domain.models import DashboardStats


class ScoreSnapshotRepository:
    """Repository for rent score snapshots"""

    def __init__(self, db: Session):
        self.db = db

    def create_snapshot(self, user_id: str, as_of: date, stats: DashboardStats) -> RentScoreSnapshot:
        """Persist a computed rent score to the database"""
        snapshot = RentScoreSnapshot(
            user_id=user_id,
            as_of=as_of,
            total=stats.score.total,
            on_time_score=stats.score.on_time_score,
            verification_score=stats.score.verification_score,
            rent_to_income_score=stats.score.rent_to_income_score,
            payment_streak=stats.payment_streak,
            on_time_percentage=stats.on_time_percentage,
            verification_status=stats.verification_status.value,
            status_counts=stats.status_counts,
        )
        self.db.add(snapshot)
        self.db.flush()  # Get ID without committing
        return snapshot

    def get_snapshots_by_user(self, user_id: str, limit: int = 10) -> List[RentScoreSnapshot]:
        """Fetch recent snapshots for a user, newest first"""
        return (
            self.db.query(RentScoreSnapshot)
            .filter(RentScoreSnapshot.user_id == user_id)
            .order_by(RentScoreSnapshot.created_at.desc())
            .limit(limit)
            .all()
        )
