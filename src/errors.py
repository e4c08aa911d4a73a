class ServiceError(Exception):
    """Base class for every error the account and catalog code raises."""


class InvalidInput(ServiceError):
    """A required field is missing or malformed."""


class InvalidCredentials(ServiceError):
    """Password does not match the stored hash."""


class NotFound(ServiceError):
    """Unknown username or character id."""


class StorageFailure(ServiceError):
    """A JSON document could not be read, parsed or written."""
