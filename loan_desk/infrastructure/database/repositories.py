"""Data access layer for loan applications"""

from typing import List, Optional
from sqlalchemy import update
from sqlalchemy.orm import Session
from loan_desk.infrastructure.database.models import LoanApplicationRecord
from loan_desk.domain.models import ApplicationStatus, LoanApplication
from loan_desk.domain.exceptions import ApplicationNotFoundError, IllegalStatusTransitionError
from loan_desk.domain.lifecycle import transition
from loan_desk.utils.date_utils import ensure_utc


def to_domain(record: LoanApplicationRecord) -> LoanApplication:
    """Map an ORM row to the immutable domain record"""
    return LoanApplication(
        id=record.id,
        full_name=record.full_name,
        email=record.email,
        phone_number=record.phone_number,
        loan_amount=record.loan_amount,
        purpose=record.purpose,
        credit_score=record.credit_score,
        employment_status=record.employment_status,
        monthly_income=record.monthly_income,
        status=ApplicationStatus(record.status),
        submitted_at=ensure_utc(record.submitted_at),
    )


class ApplicationRepository:
    """Repository for loan applications"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, application: LoanApplication) -> LoanApplication:
        """Persist a freshly created application"""
        db_application = LoanApplicationRecord(
            id=application.id,
            full_name=application.full_name,
            email=application.email,
            phone_number=application.phone_number,
            loan_amount=application.loan_amount,
            purpose=application.purpose,
            credit_score=application.credit_score,
            employment_status=application.employment_status,
            monthly_income=application.monthly_income,
            status=application.status.value,
            submitted_at=application.submitted_at,
        )
        self.db.add(db_application)
        self.db.flush()
        return application

    def get(self, application_id: str) -> Optional[LoanApplication]:
        """Fetch a single application by id"""
        record = (
            self.db.query(LoanApplicationRecord)
            .filter(LoanApplicationRecord.id == application_id)
            .first()
        )
        return to_domain(record) if record else None

    def list(self, status: Optional[ApplicationStatus] = None, limit: Optional[int] = None) -> List[LoanApplication]:
        """Fetch applications newest first, optionally filtered by status"""
        query = self.db.query(LoanApplicationRecord)
        if status is not None:
            query = query.filter(LoanApplicationRecord.status == ApplicationStatus(status).value)
        query = query.order_by(LoanApplicationRecord.submitted_at.desc(), LoanApplicationRecord.id)
        if limit is not None:
            query = query.limit(limit)
        return [to_domain(r) for r in query.all()]

    def list_all(self) -> List[LoanApplication]:
        """Snapshot of every application, for aggregation"""
        return [to_domain(r) for r in self.db.query(LoanApplicationRecord).all()]

    def update_status(self, application_id: str, target: ApplicationStatus) -> LoanApplication:
        """
        Apply a review decision to a pending application.

        The write is conditional on the row still being pending, so a decision
        made concurrently by another reviewer is never overwritten.

        Raises:
            ApplicationNotFoundError: If no application has this id
            IllegalStatusTransitionError: If the application is no longer pending
        """
        current = self.get(application_id)
        if current is None:
            raise ApplicationNotFoundError(application_id)

        updated = transition(current, target)

        result = self.db.execute(
            update(LoanApplicationRecord)
            .where(
                LoanApplicationRecord.id == application_id,
                LoanApplicationRecord.status == ApplicationStatus.PENDING.value,
            )
            .values(status=updated.status.value)
            .execution_options(synchronize_session=False)
        )
        # Loaded rows may still hold the old status
        self.db.expire_all()

        if result.rowcount == 0:
            # Lost the race: re-read to report the status that won
            latest = self.get(application_id)
            current_status = latest.status.value if latest else current.status.value
            raise IllegalStatusTransitionError(current_status, updated.status.value)

        return updated
