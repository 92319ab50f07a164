"""Typed identifier value objects.

Identifiers never cross module boundaries as bare UUIDs. Each entity gets its
own id class so an AgreementId can't be passed where a CounterpartyId is
expected, even though both wrap a UUID.

Usage:
    agreement_id = AgreementId.new()
    counterparty_id = CounterpartyId.parse("7d1c...")

    agreement_id == AgreementId(agreement_id.value)  # True
    agreement_id == CounterpartyId(agreement_id.value)  # False
"""

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class TypedId:
    """Base class for typed identifiers wrapping a UUID."""

    value: uuid.UUID

    def __post_init__(self):
        if not isinstance(self.value, uuid.UUID):
            raise TypeError(
                f"{type(self).__name__} wraps a UUID, got {type(self.value).__name__}"
            )

    @classmethod
    def new(cls):
        """Generate a fresh random identifier."""
        return cls(uuid.uuid4())

    @classmethod
    def parse(cls, text: str):
        """Build an identifier from its string form.

        Raises:
            ValueError: If text is not a valid UUID
        """
        return cls(uuid.UUID(str(text)))

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"{type(self).__name__}('{self.value}')"


@dataclass(frozen=True, repr=False)
class AgreementId(TypedId):
    """Identifier of an Agreement."""


@dataclass(frozen=True, repr=False)
class CounterpartyId(TypedId):
    """Identifier of a Counterparty."""
