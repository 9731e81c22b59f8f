"""GET /v1/stats - portfolio statistics recomputed from the application set"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from loan_desk.api.v1.schemas import StatsResponse, StatusCount, TrendPoint, TrendResponse
from loan_desk.config import settings
from loan_desk.infrastructure.database.session import get_db
from loan_desk.infrastructure.database.repositories import ApplicationRepository
from loan_desk.domain.stats import approval_rate, compute_stats, status_breakdown, submission_trend

router = APIRouter()


@router.get("/stats", response_model=StatsResponse)
def get_stats(db: Session = Depends(get_db)):
    """
    Summary counters for the review dashboard.

    Never cached: every call folds a fresh snapshot of all applications,
    so the numbers always match the current record set.
    """
    stats = compute_stats(ApplicationRepository(db).list_all())

    return StatsResponse(
        total_applications=stats.total_applications,
        approved_applications=stats.approved_applications,
        pending_applications=stats.pending_applications,
        rejected_applications=stats.rejected_applications,
        total_amount=stats.total_amount,
        approved_amount=stats.approved_amount,
        avg_loan_amount=stats.avg_loan_amount,
        approval_rate=approval_rate(stats),
        status_breakdown=[StatusCount(**row) for row in status_breakdown(stats)],
    )


@router.get("/stats/trend", response_model=TrendResponse)
def get_submission_trend(
    days: Optional[int] = Query(None, ge=1, le=365, description="Trailing window in days"),
    include_empty_days: bool = Query(False, description="Include days with no submissions"),
    db: Session = Depends(get_db),
):
    """Daily submission counts over a trailing window"""
    window = days or settings.trend_window_days
    points = submission_trend(
        ApplicationRepository(db).list_all(),
        days=window,
        include_empty_days=include_empty_days,
    )

    return TrendResponse(days=window, points=[TrendPoint(**p) for p in points])
