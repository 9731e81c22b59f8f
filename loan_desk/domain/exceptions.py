"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ApplicationNotFoundError(DomainException):
    """No loan application exists with the given id"""

    def __init__(self, application_id: str):
        super().__init__(f"Loan application {application_id} not found")
        self.application_id = application_id


class IllegalStatusTransitionError(DomainException):
    """Status change not allowed from the application's current status"""

    def __init__(self, current: str, target: str):
        super().__init__(f"Cannot move application from {current} to {target}")
        self.current = current
        self.target = target
