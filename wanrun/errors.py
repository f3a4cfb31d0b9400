"""Domain exceptions for the application.

Every error carries two dimensions: the functional *domain* it belongs to
and its *kind* (caused by the client or by the server). The exception
handlers map client-kind errors to 4xx and server-kind errors to 500.
"""

from enum import Enum

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
VALIDATION_ERROR = "VALIDATION_ERROR"
FORBIDDEN = "FORBIDDEN"
UNAUTHORIZED = "UNAUTHORIZED"
INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorDomain(str, Enum):
    OTHER = "other"
    AUTH = "auth"
    DOG = "dog"
    DOG_OWNER = "dog_owner"
    DOGRUN = "dogrun"
    CMS = "cms"
    INTERACTION = "interaction"


class ErrorKind(str, Enum):
    CLIENT = "client"
    SERVER = "server"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    kind = ErrorKind.CLIENT
    code = VALIDATION_ERROR

    def __init__(
        self,
        message: str,
        *,
        domain: ErrorDomain = ErrorDomain.OTHER,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.domain = domain
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        """``"<domain>-<kind>"``, e.g. ``"dogrun-client"``."""
        return f"{self.domain.value}-{self.kind.value}"

    @property
    def is_client_error(self) -> bool:
        return self.kind is ErrorKind.CLIENT


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    code = NOT_FOUND


class DuplicateResourceError(DomainError):
    """Raised when attempting to create a resource that would violate a uniqueness constraint."""

    code = DUPLICATE_RESOURCE


class DomainValidationError(DomainError):
    """Raised when business rules or domain validation fail."""

    code = VALIDATION_ERROR


class ForbiddenError(DomainError):
    """Raised when the caller may not act on a resource (e.g. a dog they do not own)."""

    code = FORBIDDEN


class UnauthorizedError(DomainError):
    """Raised when no verified identity is attached to the request."""

    code = UNAUTHORIZED

    def __init__(self, message: str = "Could not validate credentials", **kwargs) -> None:
        kwargs.setdefault("domain", ErrorDomain.AUTH)
        super().__init__(message, **kwargs)


class ServerError(DomainError):
    """Raised when a collaborator (database, external API) fails."""

    kind = ErrorKind.SERVER
    code = INTERNAL_ERROR


def duplicate_bookmark_error(
    dogrun_id: int, cause: BaseException | None = None
) -> DuplicateResourceError:
    """The error raised whichever way a duplicate bookmark is detected (check or constraint)."""
    return DuplicateResourceError(
        f"Dogrun {dogrun_id} is already bookmarked",
        domain=ErrorDomain.INTERACTION,
        cause=cause,
    )
