"""
SQLAlchemy database models for the remote scenario store.

Only scenario inputs are stored; schedules are always recomputed.
"""

from sqlalchemy import CheckConstraint, Column, DateTime, Float, Index, Integer, String

from airgead.models.scenario import utcnow

from .base import Base


class Investment(Base):
    """A saved investment scenario owned by an authenticated user."""

    __tablename__ = "investments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    initial_investment = Column(Float, nullable=False)
    monthly_deposit = Column(Float, nullable=False)
    annual_interest_rate = Column(Float, nullable=False)
    years = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Constraints and indexes
    __table_args__ = (
        CheckConstraint("initial_investment >= 0", name="ck_initial_non_negative"),
        CheckConstraint("monthly_deposit >= 0", name="ck_monthly_non_negative"),
        CheckConstraint("annual_interest_rate >= 0", name="ck_rate_non_negative"),
        CheckConstraint("years > 0", name="ck_years_positive"),
        Index("idx_investments_user_created", "user_id", "created_at"),
    )

    def __repr__(self):
        return (
            f"<Investment(id={self.id}, user_id='{self.user_id}', "
            f"initial={self.initial_investment}, years={self.years})>"
        )
