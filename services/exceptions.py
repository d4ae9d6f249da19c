class ServiceError(Exception):
    """Base class for predictable service-layer exceptions."""


class NotFoundError(ServiceError):
    """Raised when the requested resource does not exist."""


class InvalidIDError(ServiceError):
    """Raised when an id cannot be parsed into the store's native form."""


class ValidationError(ServiceError):
    """Raised when business rules are violated."""


class StorageError(ServiceError):
    """Raised when the underlying persistence layer fails."""
