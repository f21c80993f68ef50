"""Exception types shared by the order and user services.

Every error raised by the business layer derives from ``ServiceError`` so the
HTTP boundary can translate it with a single handler.
"""


class ServiceError(Exception):
    """Base class for errors the services raise on purpose."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """The client sent a request that breaks a field rule."""


class NotFoundError(ServiceError):
    """A locally stored entity with the requested id does not exist."""


class InvalidReferenceError(ServiceError):
    """The user service confirmed that a referenced user does not exist."""


class RemoteValidationError(ServiceError):
    """The user service could not be asked whether a user exists.

    Raised on timeouts, transport failures and unexpected status codes. It
    must never be read as "user absent".
    """


class InternalError(ServiceError):
    """A store or other internal failure. The message is safe to show clients."""
