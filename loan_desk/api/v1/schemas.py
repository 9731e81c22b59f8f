"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, EmailStr, Field
from datetime import date, datetime
from decimal import Decimal
from typing import List, Literal, Optional

from loan_desk.domain.constants import (
    MAX_CREDIT_SCORE,
    MAX_LOAN_AMOUNT,
    MIN_CREDIT_SCORE,
    MIN_LOAN_AMOUNT,
    MIN_MONTHLY_INCOME,
)
from loan_desk.domain.models import (
    ApplicationStatus,
    LoanApplication,
    NewApplication,
    RiskAssessment,
    RiskLevel,
)


class ApplicationCreate(BaseModel):
    """Request body for POST /v1/applications"""

    full_name: str = Field(..., min_length=2, description="Applicant full name")
    email: EmailStr
    phone_number: str = Field(..., min_length=10, description="Contact phone number")
    loan_amount: Decimal = Field(..., ge=MIN_LOAN_AMOUNT, le=MAX_LOAN_AMOUNT, max_digits=12, decimal_places=2)
    purpose: str = Field(..., min_length=1, description="Loan purpose, e.g. Home Purchase")
    credit_score: int = Field(..., ge=MIN_CREDIT_SCORE, le=MAX_CREDIT_SCORE)
    employment_status: str = Field(..., min_length=1, description="Employment status, e.g. Full-time")
    monthly_income: Decimal = Field(..., ge=MIN_MONTHLY_INCOME, max_digits=12, decimal_places=2)

    def to_domain(self) -> NewApplication:
        return NewApplication(
            full_name=self.full_name,
            email=str(self.email),
            phone_number=self.phone_number,
            loan_amount=self.loan_amount,
            purpose=self.purpose,
            credit_score=self.credit_score,
            employment_status=self.employment_status,
            monthly_income=self.monthly_income,
        )


class ApplicationResponse(BaseModel):
    """Single loan application"""

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

    @classmethod
    def from_domain(cls, application: LoanApplication) -> "ApplicationResponse":
        return cls(
            id=application.id,
            full_name=application.full_name,
            email=application.email,
            phone_number=application.phone_number,
            loan_amount=application.loan_amount,
            purpose=application.purpose,
            credit_score=application.credit_score,
            employment_status=application.employment_status,
            monthly_income=application.monthly_income,
            status=application.status,
            submitted_at=application.submitted_at,
        )


class ApplicationListResponse(BaseModel):
    """Response for GET /v1/applications"""

    applications: List[ApplicationResponse]
    count: int


class StatusUpdateRequest(BaseModel):
    """Request body for POST /v1/applications/{id}/status"""

    status: Literal["approved", "rejected"]


class RiskAssessmentResponse(BaseModel):
    """Response for GET /v1/applications/{id}/risk"""

    application_id: str
    level: RiskLevel
    credit_score: int
    employment_status: str
    # None when monthly income is zero (unbounded ratio)
    debt_to_income_ratio: Optional[float] = None
    debt_to_income_percent: Optional[float] = None
    recommendations: List[str]

    @classmethod
    def from_domain(cls, application: LoanApplication, assessment: RiskAssessment) -> "RiskAssessmentResponse":
        ratio_percent = assessment.ratio_percent
        return cls(
            application_id=application.id,
            level=assessment.level,
            credit_score=application.credit_score,
            employment_status=application.employment_status,
            debt_to_income_ratio=assessment.debt_to_income_ratio if ratio_percent is not None else None,
            debt_to_income_percent=float(ratio_percent) if ratio_percent is not None else None,
            recommendations=list(assessment.recommendations),
        )


class StatusCount(BaseModel):
    status: ApplicationStatus
    count: int


class StatsResponse(BaseModel):
    """Response for GET /v1/stats"""

    total_applications: int
    approved_applications: int
    pending_applications: int
    rejected_applications: int
    total_amount: Decimal
    approved_amount: Decimal
    avg_loan_amount: Decimal
    approval_rate: int = Field(..., description="Approved share of all applications, whole percent")
    status_breakdown: List[StatusCount]


class TrendPoint(BaseModel):
    day: date
    applications: int


class TrendResponse(BaseModel):
    """Response for GET /v1/stats/trend"""

    days: int
    points: List[TrendPoint]


class ReferenceResponse(BaseModel):
    """Response for GET /v1/reference"""

    loan_purposes: List[str]
    employment_statuses: List[str]
    min_loan_amount: Decimal
    max_loan_amount: Decimal
    min_credit_score: int
    max_credit_score: int
