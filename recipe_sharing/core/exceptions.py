class RecipeSharingException(Exception):
    """Base exception for recipe sharing"""

    pass


class UnauthorizedException(RecipeSharingException):
    """Raised when the acting household cannot be resolved"""

    pass


class NotFoundException(RecipeSharingException):
    """Raised when resource not found"""

    pass


class ForbiddenException(RecipeSharingException):
    """Raised when a household tries to modify another household's data"""

    pass


class ValidationException(RecipeSharingException):
    """Raised for business logic validation errors"""

    pass


class ConstraintViolationException(RecipeSharingException):
    """
    Raised when a unique or foreign-key constraint rejects a write.

    On copy inserts this means a concurrent request already created the
    household's copy of the same source row.
    """

    pass


class StorageException(RecipeSharingException):
    """Raised for database driver or I/O failures"""

    pass
