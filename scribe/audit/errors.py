"""Audit error types."""


class AuditError(Exception):
    """Base class for audit errors that are not storage failures."""


class UnregisteredSubjectError(AuditError):
    """record_subject() was given an object whose type was never registered."""

    def __init__(self, subject_cls: type) -> None:
        super().__init__(f"{subject_cls.__qualname__} is not registered for auditing")
        self.subject_cls = subject_cls
