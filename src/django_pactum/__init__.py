"""Django Pactum - Agreement lifecycle primitives.

Models:
    Counterparty: External party, referenced by CounterpartyId only
    Agreement: Legal agreement moving draft -> active -> terminated
    AgreementTransition: Append-only audit of status changes

Services (the only supported write path):
    create_agreement: Build and save a draft agreement
    activate_agreement: draft -> active
    terminate_agreement: active -> terminated
    get_allowed_transitions: Next statuses for an agreement
"""

__version__ = "0.1.0"

__all__ = [
    # Identifiers
    "AgreementId",
    "CounterpartyId",
    # Models
    "AgreementStatus",
    "Counterparty",
    "Agreement",
    "AgreementTransition",
    # Services
    "create_counterparty",
    "create_agreement",
    "activate_agreement",
    "terminate_agreement",
    "get_allowed_transitions",
    "get_transition_history",
    # Exceptions
    "PactumError",
    "AgreementValidationError",
    "CounterpartyValidationError",
    "BusinessRuleViolation",
]

_LOCATIONS = {
    "AgreementId": "ids",
    "CounterpartyId": "ids",
    "AgreementStatus": "lifecycle",
    "Counterparty": "models",
    "Agreement": "models",
    "AgreementTransition": "models",
    "create_counterparty": "services",
    "create_agreement": "services",
    "activate_agreement": "services",
    "terminate_agreement": "services",
    "get_allowed_transitions": "services",
    "get_transition_history": "services",
    "PactumError": "exceptions",
    "AgreementValidationError": "exceptions",
    "CounterpartyValidationError": "exceptions",
    "BusinessRuleViolation": "exceptions",
}


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name in _LOCATIONS:
        from importlib import import_module
        module = import_module(f".{_LOCATIONS[name]}", __name__)
        return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
