class UnionOfficeException(Exception):
    """Base exception for the union office manager"""

    pass


class UnauthorizedException(UnionOfficeException):
    """Raised when JWT validation fails or there is no active session"""

    pass


class NotFoundException(UnionOfficeException):
    """Raised when resource not found in the caller's office"""

    pass


class ForbiddenException(UnionOfficeException):
    """Raised when the user's role does not allow the operation"""

    pass


class ValidationException(UnionOfficeException):
    """Raised for business logic validation errors"""

    pass


class ConflictException(UnionOfficeException):
    """Raised when a collection was changed by another writer since it was read"""

    pass


class ConfigurationException(UnionOfficeException):
    """Raised when a required external credential is not configured"""

    pass
