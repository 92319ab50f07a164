"""Model fields storing typed identifiers in UUID columns.

The column is a plain UUID; the Python value is the field's TypedId class.
Lookups and writes accept the matching id class, a bare UUID, or a UUID
string. An id of another class raises TypeError.
"""

import uuid

from django.db import models

from .ids import AgreementId, CounterpartyId, TypedId


class TypedIdField(models.UUIDField):
    """UUIDField whose Python value is a TypedId subclass."""

    id_class = TypedId

    def _to_uuid(self, value):
        if isinstance(value, TypedId):
            if not isinstance(value, self.id_class):
                raise TypeError(
                    f"{self.__class__.__name__} expects {self.id_class.__name__}, "
                    f"got {type(value).__name__}"
                )
            return value.value
        return super().to_python(value)

    def to_python(self, value):
        value = self._to_uuid(value)
        if value is None:
            return None
        return self.id_class(value)

    def from_db_value(self, value, expression, connection):
        if value is None:
            return None
        if not isinstance(value, uuid.UUID):
            value = uuid.UUID(str(value))
        return self.id_class(value)

    def get_prep_value(self, value):
        return self._to_uuid(value)

    def get_db_prep_value(self, value, connection, prepared=False):
        return super().get_db_prep_value(self._to_uuid(value), connection, prepared)

    def value_to_string(self, obj):
        value = self.value_from_object(obj)
        return "" if value is None else str(value)


class AgreementIdField(TypedIdField):
    id_class = AgreementId


class CounterpartyIdField(TypedIdField):
    id_class = CounterpartyId
