"""Aggregation engine - summary statistics over the loan application set"""

from collections import Counter
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_EVEN, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional

from loan_desk.domain.models import ApplicationStatus, LoanApplication, LoanStats
from loan_desk.utils.date_utils import ensure_utc, generate_date_range, utc_now, window_start

CENTS = Decimal("0.01")
ZERO = Decimal("0")


def compute_stats(applications: Iterable[LoanApplication]) -> LoanStats:
    """
    Fold the full application set into summary counters.

    Requirements:
    - approved + pending + rejected == total
    - approved_amount <= total_amount
    - avg_loan_amount is exactly 0 for an empty set

    Amounts are summed as exact Decimals; only the average is rounded,
    to cents with ROUND_HALF_EVEN. The result does not depend on input order.
    """
    snapshot = tuple(applications)

    status_counts = Counter(app.status for app in snapshot)
    total_amount = sum((app.loan_amount for app in snapshot), ZERO)
    approved_amount = sum(
        (app.loan_amount for app in snapshot if app.status == ApplicationStatus.APPROVED),
        ZERO,
    )

    total = len(snapshot)
    # Empty set is a valid dashboard state, not an error
    avg_loan_amount = (total_amount / total).quantize(CENTS, rounding=ROUND_HALF_EVEN) if total > 0 else ZERO

    return LoanStats(
        total_applications=total,
        approved_applications=status_counts[ApplicationStatus.APPROVED],
        pending_applications=status_counts[ApplicationStatus.PENDING],
        rejected_applications=status_counts[ApplicationStatus.REJECTED],
        total_amount=total_amount,
        approved_amount=approved_amount,
        avg_loan_amount=avg_loan_amount,
    )


def approval_rate(stats: LoanStats) -> int:
    """Approved share of all applications as a whole percent (half rounds up)"""
    if stats.total_applications == 0:
        return 0
    rate = Decimal(stats.approved_applications * 100) / Decimal(stats.total_applications)
    return int(rate.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def status_breakdown(stats: LoanStats) -> List[Dict[str, object]]:
    """Per-status counts in display order"""
    return [
        {"status": ApplicationStatus.APPROVED.value, "count": stats.approved_applications},
        {"status": ApplicationStatus.PENDING.value, "count": stats.pending_applications},
        {"status": ApplicationStatus.REJECTED.value, "count": stats.rejected_applications},
    ]


def submission_trend(
    applications: Iterable[LoanApplication],
    days: int = 30,
    now: Optional[datetime] = None,
    include_empty_days: bool = False,
) -> List[Dict[str, object]]:
    """
    Count submissions per UTC day over the trailing `days` days.

    Returns rows of {"day": date, "applications": int} sorted by day.
    Days without submissions are omitted unless include_empty_days is set.
    """
    now = ensure_utc(now) if now is not None else utc_now()
    cutoff = window_start(now, days)

    per_day: Counter = Counter()
    for app in applications:
        submitted = ensure_utc(app.submitted_at)
        if submitted >= cutoff:
            per_day[submitted.date()] += 1

    if include_empty_days:
        day_range: List[date] = generate_date_range(cutoff.date(), now.date())
        return [{"day": day, "applications": per_day.get(day, 0)} for day in day_range]

    return [{"day": day, "applications": per_day[day]} for day in sorted(per_day)]
