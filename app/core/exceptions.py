# app/core/exceptions.py
"""
Domain exceptions raised by repositories and services.

They carry no HTTP knowledge; `app.main` maps each one to a status code.
"""


class DomainException(Exception):
    """Base exception for the domain layer."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Malformed or missing input (e.g. quantity < 1)."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field


class NotFoundError(DomainException):
    """A referenced product or cart item does not exist."""

    def __init__(self, entity_name: str, entity_id: object):
        super().__init__(
            message=f"{entity_name} not found.",
            code="NOT_FOUND",
        )
        self.entity_name = entity_name
        self.entity_id = str(entity_id)


class StoreError(DomainException):
    """Underlying persistence failure. Opaque to callers."""

    def __init__(self, message: str):
        super().__init__(message=message, code="STORE_ERROR")
