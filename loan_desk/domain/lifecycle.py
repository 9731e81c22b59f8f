"""Application lifecycle - creation and the review status state machine"""

import uuid
from datetime import datetime
from dataclasses import replace
from typing import Callable, Dict, FrozenSet, Optional

from loan_desk.domain.models import ApplicationStatus, LoanApplication, NewApplication
from loan_desk.domain.exceptions import IllegalStatusTransitionError
from loan_desk.utils.date_utils import ensure_utc, utc_now

# approved and rejected are terminal
ALLOWED_TRANSITIONS: Dict[ApplicationStatus, FrozenSet[ApplicationStatus]] = {
    ApplicationStatus.PENDING: frozenset({ApplicationStatus.APPROVED, ApplicationStatus.REJECTED}),
    ApplicationStatus.APPROVED: frozenset(),
    ApplicationStatus.REJECTED: frozenset(),
}


def create_application(
    data: NewApplication,
    now: Optional[datetime] = None,
    id_factory: Callable[[], uuid.UUID] = uuid.uuid4,
) -> LoanApplication:
    """Build a new pending application with a fresh id and submission time"""
    submitted_at = ensure_utc(now) if now is not None else utc_now()

    return LoanApplication(
        id=str(id_factory()),
        full_name=data.full_name,
        email=data.email,
        phone_number=data.phone_number,
        loan_amount=data.loan_amount,
        purpose=data.purpose,
        credit_score=data.credit_score,
        employment_status=data.employment_status,
        monthly_income=data.monthly_income,
        status=ApplicationStatus.PENDING,
        submitted_at=submitted_at,
    )


def can_transition(current: ApplicationStatus, target: ApplicationStatus) -> bool:
    return ApplicationStatus(target) in ALLOWED_TRANSITIONS[ApplicationStatus(current)]


def transition(application: LoanApplication, target: ApplicationStatus) -> LoanApplication:
    """
    Move an application to a new review status.

    Returns a copy with only the status changed; the input is untouched.

    Raises:
        IllegalStatusTransitionError: If the application is not pending, or
            the target is not approved/rejected
    """
    target = ApplicationStatus(target)
    if not can_transition(application.status, target):
        raise IllegalStatusTransitionError(application.status.value, target.value)
    return replace(application, status=target)
