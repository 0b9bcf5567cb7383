# app/core/exceptions.py
"""
Domain errors raised by the service layer.

Services never raise HTTP errors themselves; routers translate these
into status codes.
"""


class DomainError(Exception):
    """Base class for expected business-rule failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AlreadyExists(DomainError):
    """A unique key (email, nit) is already taken."""

    def __init__(self, entity: str, message: str):
        super().__init__(message)
        self.entity = entity


class NotFound(DomainError):
    """A referenced record does not exist."""

    def __init__(self, entity: str, message: str):
        super().__init__(message)
        self.entity = entity


class NotAuthorized(DomainError):
    """Login credentials did not match an account."""
