"""GET /v1/reference - values offered by the intake form"""

from fastapi import APIRouter

from loan_desk.api.v1.schemas import ReferenceResponse
from loan_desk.domain.constants import (
    EMPLOYMENT_STATUSES,
    LOAN_PURPOSES,
    MAX_CREDIT_SCORE,
    MAX_LOAN_AMOUNT,
    MIN_CREDIT_SCORE,
    MIN_LOAN_AMOUNT,
)

router = APIRouter()


@router.get("/reference", response_model=ReferenceResponse)
def get_reference_data():
    return ReferenceResponse(
        loan_purposes=LOAN_PURPOSES,
        employment_statuses=EMPLOYMENT_STATUSES,
        min_loan_amount=MIN_LOAN_AMOUNT,
        max_loan_amount=MAX_LOAN_AMOUNT,
        min_credit_score=MIN_CREDIT_SCORE,
        max_credit_score=MAX_CREDIT_SCORE,
    )
