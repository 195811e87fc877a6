"""Default snapshot policy: turn a host object into an audit payload.

Hosts may supply their own provider per subject type; ModelSnapshotter
covers pydantic models, dataclasses and plain mappings.
"""

import dataclasses
from collections.abc import Collection, Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Protocol
from uuid import UUID

from pydantic import BaseModel

SCALAR_TYPES = (str, int, float, Decimal, UUID, date, datetime, time, Enum)


class SnapshotProvider(Protocol):
    """Builds the payload for one subject."""

    def __call__(self, subject: Any) -> dict[str, Any]: ...


def own_fields(subject: Any) -> dict[str, Any]:
    """Return the declared fields of a subject, in declaration order."""
    if isinstance(subject, BaseModel):
        return {name: getattr(subject, name) for name in type(subject).model_fields}
    if dataclasses.is_dataclass(subject) and not isinstance(subject, type):
        return {f.name: getattr(subject, f.name) for f in dataclasses.fields(subject)}
    if isinstance(subject, Mapping):
        return {str(key): value for key, value in subject.items()}
    names = slot_names(type(subject)) + list(getattr(subject, "__dict__", {}))
    return {
        name: getattr(subject, name)
        for name in dict.fromkeys(names)
        if not name.startswith("_") and hasattr(subject, name)
    }


def slot_names(cls: type) -> list[str]:
    """Attribute names declared through __slots__ anywhere in the MRO, base first."""
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        names.extend([slots] if isinstance(slots, str) else slots)
    return names


def serialize_scalar(value: Any) -> str:
    """Stringify a scalar the way it is stored in payloads."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (date, datetime, time)):
        return value.isoformat()
    return str(value)


class ModelSnapshotter:
    """Snapshot own fields, summarising to-one relations as ``{id, display}``.

    Args:
        only: If given, only these fields are captured (in this order).
        exclude: Field names never captured.
        id_attr: Attribute naming a subject's identifier; excluded from the
            snapshot and used to recognise related objects.
    """

    def __init__(
        self,
        only: Collection[str] | None = None,
        exclude: Collection[str] = (),
        id_attr: str = "id",
    ) -> None:
        self._only = list(only) if only is not None else None
        self._exclude = set(exclude) | {id_attr}
        self._id_attr = id_attr

    def __call__(self, subject: Any) -> dict[str, Any]:
        fields = own_fields(subject)
        names = self._only if self._only is not None else list(fields)
        return {
            name: self.serialize(fields.get(name))
            for name in names
            if name not in self._exclude
        }

    def serialize(self, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, bool) or isinstance(value, SCALAR_TYPES):
            return serialize_scalar(value)
        if self._is_relation(value):
            return self.relation_summary(value)
        if isinstance(value, Mapping):
            return {str(key): self.serialize(item) for key, item in value.items()}
        if isinstance(value, (list, tuple, set, frozenset)):
            return [self.serialize(item) for item in value]
        return str(value)

    def relation_summary(self, related: Any) -> dict[str, str | None]:
        related_id = getattr(related, self._id_attr)
        return {
            "id": None if related_id is None else str(related_id),
            "display": str(related),
        }

    def _is_relation(self, value: Any) -> bool:
        return not isinstance(value, Mapping) and hasattr(value, self._id_attr)
