"""Registry of audited subject types."""

from collections.abc import Callable, Collection
from dataclasses import dataclass
from typing import Any

from scribe.audit.errors import UnregisteredSubjectError
from scribe.audit.snapshot import ModelSnapshotter, SnapshotProvider
from scribe.observability.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AuditedType:
    """How one host type is audited."""

    name: str
    provider: SnapshotProvider
    id_attr: str = "id"

    def subject_id(self, subject: Any) -> str:
        return str(getattr(subject, self.id_attr))


class AuditRegistry:
    """Maps host classes to subject type names and snapshot providers.

    Lookups walk the subject's MRO, so registering a base class covers its
    subclasses unless they are registered themselves.
    """

    def __init__(self, default_exclude: Collection[str] = ()) -> None:
        self._default_exclude = tuple(default_exclude)
        self._types: dict[type, AuditedType] = {}

    def register(
        self,
        cls: type,
        *,
        name: str | None = None,
        provider: SnapshotProvider | None = None,
        only: Collection[str] | None = None,
        exclude: Collection[str] = (),
        id_attr: str = "id",
    ) -> AuditedType:
        """Start auditing ``cls``.

        ``only``/``exclude`` configure the default ModelSnapshotter and are
        ignored when a custom ``provider`` is given.
        """
        if provider is None:
            provider = ModelSnapshotter(
                only=only,
                exclude=[*self._default_exclude, *exclude],
                id_attr=id_attr,
            )
        audited = AuditedType(name=name or cls.__name__, provider=provider, id_attr=id_attr)
        self._types[cls] = audited
        logger.debug("audited_type_registered", subject_type=audited.name)
        return audited

    def audited(self, **options: Any) -> Callable[[type], type]:
        """Class decorator form of register()."""

        def decorator(cls: type) -> type:
            self.register(cls, **options)
            return cls

        return decorator

    def lookup(self, subject: Any) -> AuditedType:
        for cls in type(subject).__mro__:
            if cls in self._types:
                return self._types[cls]
        raise UnregisteredSubjectError(type(subject))

    def is_audited(self, subject: Any) -> bool:
        return any(cls in self._types for cls in type(subject).__mro__)
