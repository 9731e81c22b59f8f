"""Risk scorer - per-application risk tier and reviewer recommendations"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Tuple

from loan_desk.domain.models import LoanApplication, RiskAssessment, RiskLevel

MONTHS_PER_YEAR = 12
PERCENT_PRECISION = Decimal("0.1")

# Ordered decision table: (min credit score, ratio ceiling (exclusive), level, recommendations).
# First matching row wins; anything that matches none of them is High risk.
RISK_RULES: List[Tuple[int, Decimal, RiskLevel, Tuple[str, ...]]] = [
    (750, Decimal("0.30"), RiskLevel.LOW, ("Excellent candidate for approval",)),
    (650, Decimal("0.40"), RiskLevel.MODERATE, ("Consider approval with standard terms",)),
    (
        600,
        Decimal("0.50"),
        RiskLevel.MEDIUM,
        (
            "Consider approval with higher interest rates",
            "Verify income documentation",
        ),
    ),
]

HIGH_RISK_RECOMMENDATIONS: Tuple[str, ...] = (
    "Recommend additional verification",
    "Consider rejection based on risk profile",
)


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def debt_to_income_ratio(loan_amount, monthly_income) -> Optional[Decimal]:
    """
    Loan amount as a fraction of annualized income.

    Returns None when income is zero (the ratio is unbounded).

    Raises:
        ValueError: If monthly income is negative
    """
    income = _as_decimal(monthly_income)
    if income < 0:
        raise ValueError("monthly_income must not be negative")
    if income == 0:
        return None
    return _as_decimal(loan_amount) / (income * MONTHS_PER_YEAR)


def classify(credit_score: int, ratio: Optional[Decimal]) -> Tuple[RiskLevel, Tuple[str, ...]]:
    """
    Walk the decision table top to bottom.

    Credit score thresholds are inclusive, ratio ceilings are strict, so a
    ratio sitting exactly on a ceiling falls through to the next tier.
    An unbounded ratio (zero income) never satisfies a ceiling.
    """
    if ratio is not None:
        for min_score, max_ratio, level, recommendations in RISK_RULES:
            if credit_score >= min_score and ratio < max_ratio:
                return level, recommendations
    return RiskLevel.HIGH, HIGH_RISK_RECOMMENDATIONS


def assess_risk(application: LoanApplication) -> RiskAssessment:
    """
    Main entry point: classify a single application.

    Thresholds are compared on exact Decimal ratios; the float ratio on the
    result is for display only and is math.inf for zero income. The percent
    is rounded half up to one decimal place.
    """
    ratio = debt_to_income_ratio(application.loan_amount, application.monthly_income)
    level, recommendations = classify(application.credit_score, ratio)
    ratio_percent = (ratio * 100).quantize(PERCENT_PRECISION, rounding=ROUND_HALF_UP) if ratio is not None else None

    return RiskAssessment(
        level=level,
        debt_to_income_ratio=float(ratio) if ratio is not None else math.inf,
        recommendations=recommendations,
        ratio_percent=ratio_percent,
    )
