"""SQLAlchemy ORM models for rent score history"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Date, DateTime, Float, Integer, JSON, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class RentScoreSnapshot(Base):
    """Rent score as computed for a tenant on a given day"""

    __tablename__ = "rent_score_snapshot"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    as_of = Column(Date, nullable=False)
    total = Column(Integer, nullable=False)
    on_time_score = Column(Integer, nullable=False)
    verification_score = Column(Integer, nullable=False)
    rent_to_income_score = Column(Integer, nullable=False)
    payment_streak = Column(Integer, nullable=False)
    on_time_percentage = Column(Float, nullable=False)
    verification_status = Column(Text, nullable=False)
    status_counts = Column(JSON, nullable=True)
    # Microsecond resolution; history is ordered on this column
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )
