# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# The named problems our plant care app can run into (a missing plant, someone else's care log,
# a busy AI service) so every screen gets a clear, consistent error instead of a crash.
# 🧪 Purpose (Technical Summary):
# Application exception hierarchy. Each class pins its HTTP status and machine-readable error
# code; the FastAPI handler in app.main turns them into the error envelope. AI provider
# failures form their own family so routes can answer 429/502/503 without parsing messages;
# the plant species database has a smaller family of its own.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# app.main (exception handlers), plant care handlers and repositories, Groq advisor, api_client,
# Perenual plant catalog

from typing import Any, Dict, Optional
from fastapi import status


def _with_details(details: Optional[Dict[str, Any]], **fields: Any) -> Dict[str, Any]:
    merged = dict(details or {})
    merged.update({key: value for key, value in fields.items() if value not in (None, "")})
    return merged


class PlantCareException(Exception):
    """
    Root of every error the plant care API raises on purpose.

    Anything else reaching the app-level handler is reported as a plain 500.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# ACCESS
# =============================================================================

class AuthenticationError(PlantCareException):
    """Bearer token missing, malformed or expired."""

    def __init__(self, message: str = "Not authorized", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            error_code="AUTHENTICATION_ERROR"
        )


class AuthorizationError(PlantCareException):
    """The caller does not own the plant or care log they asked for."""

    def __init__(
        self,
        message: str = "Access denied",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        user_id: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=_with_details(None, resource_type=resource_type, resource_id=resource_id, user_id=user_id),
            error_code="AUTHORIZATION_ERROR"
        )


# =============================================================================
# INPUT & LOOKUP
# =============================================================================

class ValidationError(PlantCareException):
    """Input that passed schema parsing but breaks a domain rule."""

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=_with_details(details, field=field, value=None if value is None else str(value)),
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(PlantCareException):
    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=_with_details(None, resource_type=resource_type, resource_id=resource_id),
            error_code="NOT_FOUND"
        )


class PlantNotFoundError(NotFoundError):
    def __init__(self, plant_id: str, message: Optional[str] = None):
        super().__init__(
            message=message or "Plant not found",
            resource_type="plant",
            resource_id=plant_id
        )


class CareLogNotFoundError(NotFoundError):
    def __init__(self, care_log_id: str, message: Optional[str] = None):
        super().__init__(
            message=message or "Care log not found",
            resource_type="care_log",
            resource_id=care_log_id
        )


# =============================================================================
# AI PROVIDER
# =============================================================================

class AIProviderError(PlantCareException):
    """
    Failure talking to the AI advice provider.

    The generic form answers 500 and carries the provider's own status and
    response body in ``details``. Subclasses cover the failures clients can
    act on: throttling, bad credentials, a cold model and unreadable replies.
    """

    def __init__(
        self,
        message: str = "AI service error",
        provider: Optional[str] = None,
        provider_status: Optional[int] = None,
        retry_after: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str = "AI_SERVICE_ERROR"
    ):
        self.retry_after = retry_after
        super().__init__(
            message=message,
            status_code=status_code,
            details=_with_details(
                details, provider=provider, provider_status=provider_status, retry_after=retry_after
            ),
            error_code=error_code
        )


class AIRateLimitedError(AIProviderError):
    def __init__(self, message: str = "AI service is rate limited, please retry later", **kwargs):
        super().__init__(
            message=message,
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            error_code="RATE_LIMITED",
            **kwargs
        )


class AIAuthenticationError(AIProviderError):
    def __init__(self, message: str = "AI service authentication failed", **kwargs):
        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            error_code="AUTH_ERROR",
            **kwargs
        )


class AIModelLoadingError(AIProviderError):
    def __init__(self, message: str = "AI model is loading, please retry shortly", **kwargs):
        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error_code="MODEL_LOADING",
            **kwargs
        )


class AIResponseFormatError(AIProviderError):
    """The provider answered, but not with the JSON object the prompt asked for."""

    def __init__(self, message: str = "AI service returned an unreadable response", **kwargs):
        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            error_code="AI_RESPONSE_FORMAT",
            **kwargs
        )


# =============================================================================
# EXTERNAL SERVICES
# =============================================================================

class ExternalServiceError(PlantCareException):
    """The plant species database failed, timed out or answered with an error status."""

    def __init__(
        self,
        message: str = "External service error",
        service: Optional[str] = None,
        service_status: Optional[int] = None,
        retry_after: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = status.HTTP_502_BAD_GATEWAY,
        error_code: str = "EXTERNAL_SERVICE_ERROR"
    ):
        self.retry_after = retry_after
        super().__init__(
            message=message,
            status_code=status_code,
            details=_with_details(
                details, service=service, service_status=service_status, retry_after=retry_after
            ),
            error_code=error_code
        )


class RateLimitError(ExternalServiceError):
    def __init__(self, message: str = "Plant database rate limit reached, please retry later", **kwargs):
        super().__init__(
            message=message,
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            error_code="RATE_LIMITED",
            **kwargs
        )


# =============================================================================
# STORAGE
# =============================================================================

class DatabaseError(PlantCareException):
    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        table: Optional[str] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=_with_details(None, operation=operation, table=table),
            error_code="DATABASE_ERROR"
        )
