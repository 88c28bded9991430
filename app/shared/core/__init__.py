"""
Core utilities package for Plant Care Application.
Provides security, exceptions and request dependencies.
"""

from .security import (
    create_access_token,
    verify_token,
    SecurityManager,
    get_security_manager
)

from .exceptions import (
    PlantCareException,
    AuthenticationError,
    AuthorizationError,
    ValidationError,
    NotFoundError,
    AIProviderError,
    ExternalServiceError,
    RateLimitError,
    DatabaseError,
    PlantNotFoundError,
    CareLogNotFoundError
)

from .dependencies import (
    CurrentUser,
    get_current_user
)

__all__ = [
    # Security
    "create_access_token",
    "verify_token",
    "SecurityManager",
    "get_security_manager",

    # Exceptions
    "PlantCareException",
    "AuthenticationError",
    "AuthorizationError",
    "ValidationError",
    "NotFoundError",
    "AIProviderError",
    "ExternalServiceError",
    "RateLimitError",
    "DatabaseError",
    "PlantNotFoundError",
    "CareLogNotFoundError",

    # Dependencies
    "CurrentUser",
    "get_current_user",
]
