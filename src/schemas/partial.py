"""Three-state field handling for partial-update request bodies.

A partial update distinguishes three cases for every optional field:

- absent: the key was not sent, the stored value stays as it is;
- explicit null: the key was sent as ``null``, the stored value is cleared;
- explicit value: the key was sent with a value, the stored value is replaced.

Pydantic records which fields were actually provided in ``model_fields_set``,
so the two "None" cases never collapse into one.
"""

from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class FieldState(str, Enum):
    """How a field appeared in a partial-update request."""

    ABSENT = "absent"
    NULL = "null"
    VALUE = "value"


def reject_null(value: T | None) -> T:
    """Field validator body for optional fields that may be omitted but not nulled.

    Raises:
        ValueError: If the caller explicitly sent null.
    """
    if value is None:
        raise ValueError("may be omitted but not set to null")
    return value


class PartialUpdate(BaseModel):
    """Base class for request bodies where every field is optional."""

    model_config = ConfigDict(from_attributes=True)

    def field_state(self, name: str) -> FieldState:
        """Classify a single field."""
        if name not in type(self).model_fields:
            raise KeyError(name)
        if name not in self.model_fields_set:
            return FieldState.ABSENT
        if getattr(self, name) is None:
            return FieldState.NULL
        return FieldState.VALUE

    def field_states(self) -> dict[str, FieldState]:
        """Classify every declared field."""
        return {name: self.field_state(name) for name in type(self).model_fields}

    def fields_in_state(self, state: FieldState) -> list[str]:
        """Names of the declared fields in the given state, in declaration order."""
        return [name for name, field_state in self.field_states().items() if field_state is state]

    def provided_fields(self) -> dict[str, Any]:
        """Fields the caller sent, explicit nulls included.

        Never drop None here: a None in this dict is an instruction to
        clear the stored value.
        """
        dumped = self.model_dump()
        return {name: dumped[name] for name, state in self.field_states().items() if state is not FieldState.ABSENT}
