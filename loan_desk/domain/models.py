"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple


class ApplicationStatus(str, Enum):
    """Review status of a loan application"""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class RiskLevel(str, Enum):
    """Qualitative risk tier, declared from safest to riskiest"""

    LOW = "Low"
    MODERATE = "Moderate"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class NewApplication:
    """Applicant-supplied fields accepted at intake"""

    full_name: str
    email: str
    phone_number: str
    loan_amount: Decimal
    purpose: str
    credit_score: int
    employment_status: str
    monthly_income: Decimal


@dataclass(frozen=True)
class LoanApplication:
    """Submitted loan application; only status changes after creation"""

    id: str
    full_name: str
    email: str
    phone_number: str
    loan_amount: Decimal
    purpose: str
    credit_score: int
    employment_status: str
    monthly_income: Decimal
    status: ApplicationStatus
    submitted_at: datetime


@dataclass(frozen=True)
class LoanStats:
    """Summary counters derived from the full application set"""

    total_applications: int
    approved_applications: int
    pending_applications: int
    rejected_applications: int
    total_amount: Decimal
    approved_amount: Decimal
    avg_loan_amount: Decimal


@dataclass(frozen=True)
class RiskAssessment:
    """Output of the risk scorer for a single application"""

    level: RiskLevel
    debt_to_income_ratio: float
    recommendations: Tuple[str, ...]
    # Ratio as a percentage to one decimal place, None when income is zero
    ratio_percent: Optional[Decimal] = None
