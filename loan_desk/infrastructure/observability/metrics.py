"""Prometheus metrics for monitoring intake volume, review decisions and risk mix"""

from prometheus_client import Counter, Histogram

from loan_desk.domain.constants import LOAN_PURPOSES
from loan_desk.domain.models import ApplicationStatus, LoanApplication, RiskLevel

# Intake metrics
application_counter = Counter(
    "loan_desk_applications_submitted_total",
    "Total loan applications submitted",
    ["purpose"],
)

requested_amount_histogram = Histogram(
    "loan_desk_requested_amount",
    "Requested loan amounts",
    buckets=[1_000, 5_000, 10_000, 25_000, 50_000, 75_000, 100_000],
)

# Review metrics
status_transition_counter = Counter(
    "loan_desk_status_transitions_total",
    "Review decisions applied",
    ["status"],  # approved | rejected
)

illegal_transition_counter = Counter(
    "loan_desk_illegal_transitions_total",
    "Review decisions refused because the application was not pending",
)

risk_assessment_counter = Counter(
    "loan_desk_risk_assessments_total",
    "Risk assessments served",
    ["level"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_submission(application: LoanApplication) -> None:
    """Record intake metrics for volume and amount distribution"""
    # Free-text purposes are folded into "Other" to keep label cardinality bounded
    purpose = application.purpose if application.purpose in LOAN_PURPOSES else "Other"
    application_counter.labels(purpose=purpose).inc()
    requested_amount_histogram.observe(float(application.loan_amount))


def record_status_change(status: ApplicationStatus) -> None:
    status_transition_counter.labels(status=ApplicationStatus(status).value).inc()


def record_risk_assessment(level: RiskLevel) -> None:
    risk_assessment_counter.labels(level=RiskLevel(level).value).inc()
