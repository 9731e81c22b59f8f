"""/v1/applications - loan intake, review list, detail, risk and status decisions"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from loan_desk.api.v1.schemas import (
    ApplicationCreate,
    ApplicationListResponse,
    ApplicationResponse,
    RiskAssessmentResponse,
    StatusUpdateRequest,
)
from loan_desk.api.dependencies import get_actor, get_request_id
from loan_desk.config import settings
from loan_desk.infrastructure.database.session import get_db
from loan_desk.infrastructure.database.repositories import ApplicationRepository
from loan_desk.domain.lifecycle import create_application
from loan_desk.domain.models import ApplicationStatus
from loan_desk.domain.risk import assess_risk
from loan_desk.domain.exceptions import ApplicationNotFoundError, IllegalStatusTransitionError
from loan_desk.infrastructure.observability.metrics import (
    illegal_transition_counter,
    record_risk_assessment,
    record_status_change,
    record_submission,
)
from loan_desk.infrastructure.observability.logging import log_status_change, log_submission

router = APIRouter()


@router.post("/applications", response_model=ApplicationResponse, status_code=201)
def submit_application(
    request_body: ApplicationCreate,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Accept a new loan application.

    The application is always created pending, with a server-assigned id
    and submission time.
    """
    request_id = get_request_id(request)

    try:
        application = create_application(request_body.to_domain())
        ApplicationRepository(db).create(application)
        db.commit()
    except Exception as e:
        db.rollback()
        logging.error(f"Failed to submit application: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_submission(application)
    log_submission(request_id, application)

    return ApplicationResponse.from_domain(application)


@router.get("/applications", response_model=ApplicationListResponse)
def list_applications(
    status: Optional[ApplicationStatus] = Query(None, description="Only applications with this status"),
    limit: Optional[int] = Query(None, ge=1, le=1000, description="Maximum number of applications"),
    db: Session = Depends(get_db),
):
    """
    List applications, newest submission first.
    """
    applications = ApplicationRepository(db).list(status=status, limit=limit or settings.default_list_limit)

    return ApplicationListResponse(
        applications=[ApplicationResponse.from_domain(a) for a in applications],
        count=len(applications),
    )


@router.get("/applications/{application_id}", response_model=ApplicationResponse)
def get_application(application_id: str, db: Session = Depends(get_db)):
    application = ApplicationRepository(db).get(application_id)
    if not application:
        raise HTTPException(status_code=404, detail="Application not found")

    return ApplicationResponse.from_domain(application)


@router.get("/applications/{application_id}/risk", response_model=RiskAssessmentResponse)
def get_risk_assessment(application_id: str, db: Session = Depends(get_db)):
    """
    Classify an application's risk from credit score and debt-to-income ratio.

    Computed on every request; nothing is stored.
    """
    application = ApplicationRepository(db).get(application_id)
    if not application:
        raise HTTPException(status_code=404, detail="Application not found")

    assessment = assess_risk(application)
    record_risk_assessment(assessment.level)

    return RiskAssessmentResponse.from_domain(application, assessment)


@router.post("/applications/{application_id}/status", response_model=ApplicationResponse)
def update_application_status(
    application_id: str,
    request_body: StatusUpdateRequest,
    request: Request,
    db: Session = Depends(get_db),
    actor: Optional[str] = Depends(get_actor),
):
    """
    Approve or reject a pending application.

    Approved and rejected are final: any further decision is refused with 409.
    """
    request_id = get_request_id(request)
    target = ApplicationStatus(request_body.status)

    try:
        updated = ApplicationRepository(db).update_status(application_id, target)
        db.commit()

    except ApplicationNotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))

    except IllegalStatusTransitionError as e:
        db.rollback()
        illegal_transition_counter.inc()
        logging.warning(f"Refused status change: {e}", extra={"request_id": request_id, "actor": actor})
        raise HTTPException(
            status_code=409,
            detail={"message": str(e), "current_status": e.current, "requested_status": e.target},
        )

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_status_change(updated.status)
    log_status_change(request_id, application_id, ApplicationStatus.PENDING.value, updated.status.value, actor)

    return ApplicationResponse.from_domain(updated)
