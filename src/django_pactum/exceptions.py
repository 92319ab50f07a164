"""Custom exceptions for django-pactum."""


class PactumError(Exception):
    """Base exception for agreement errors."""
    pass


class PactumValidationError(PactumError):
    """Raised when a record is built from invalid input."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


class AgreementValidationError(PactumValidationError):
    """Raised when an agreement is constructed from invalid input."""
    pass


class CounterpartyValidationError(PactumValidationError):
    """Raised when a counterparty is registered with invalid input."""
    pass


class BusinessRuleViolation(PactumError):
    """Raised when a status transition is not allowed from the current status."""

    def __init__(self, current_status: str, attempted_status: str, message: str):
        self.current_status = current_status
        self.attempted_status = attempted_status
        self.message = message
        super().__init__(message)


class ImmutableTransitionError(PactumError):
    """Raised when attempting to modify a recorded transition."""

    def __init__(self, transition_id):
        self.transition_id = transition_id
        super().__init__(
            f"Cannot modify transition {transition_id} - transition records are immutable."
        )
