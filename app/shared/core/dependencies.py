"""
Common FastAPI dependencies for Plant Care Application.
Provides the authenticated user extracted from the bearer token.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .exceptions import AuthenticationError
from .security import verify_token
from ..utils.logging import user_id_var

logger = logging.getLogger(__name__)

# Security scheme for OpenAPI documentation
security = HTTPBearer(auto_error=False)

DEFAULT_CITY = "Mumbai"
DEFAULT_STATE = "Maharashtra"
DEFAULT_CLIMATE_ZONE = "tropical"
DEFAULT_BALCONY_TYPE = "balcony"
DEFAULT_SUNLIGHT_HOURS = 6.0


class CurrentUser:
    """User information extracted from JWT token."""

    def __init__(
        self,
        user_id: str,
        email: Optional[str] = None,
        city: Optional[str] = None,
        state: Optional[str] = None,
        climate_zone: Optional[str] = None,
        balcony_type: Optional[str] = None,
        sunlight_hours: Optional[float] = None,
        token_payload: Optional[Dict[str, Any]] = None
    ):
        self.user_id = user_id
        self.email = email
        self.city = city
        self.state = state
        self.climate_zone = climate_zone
        self.balcony_type = balcony_type
        self.sunlight_hours = sunlight_hours
        self.token_payload = token_payload or {}

    @classmethod
    def from_token_payload(cls, payload: Dict[str, Any]) -> "CurrentUser":
        sunlight = payload.get("sunlight_hours")
        return cls(
            user_id=str(payload["sub"]),
            email=payload.get("email"),
            city=payload.get("city"),
            state=payload.get("state"),
            climate_zone=payload.get("climate_zone"),
            balcony_type=payload.get("balcony_type"),
            sunlight_hours=float(sunlight) if isinstance(sunlight, (int, float)) else None,
            token_payload=payload
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert user info to dictionary."""
        return {
            "user_id": self.user_id,
            "email": self.email,
            "city": self.city,
            "state": self.state,
            "climate_zone": self.climate_zone,
            "balcony_type": self.balcony_type,
            "sunlight_hours": self.sunlight_hours
        }


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> CurrentUser:
    """
    Get current authenticated user from the bearer token.

    Raises:
        AuthenticationError: If the token is missing or invalid
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authorized, no token")

    payload = verify_token(credentials.credentials)
    current_user = CurrentUser.from_token_payload(payload)
    user_id_var.set(current_user.user_id)

    logger.debug(f"Current user retrieved: {current_user.user_id}")
    return current_user
