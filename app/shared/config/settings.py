# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and provides them to the rest of our Plant Care app in a organized way.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for application, database, AI provider,
# care-policy and diagnosis-accuracy tuning parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
# - typing for type hints
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - Database connection modules
# - Groq care advisor client
# - Care schedule engine and diagnosis accuracy scorer

from functools import lru_cache
from typing import Any, Dict, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file. Every field
    carries a default so the service can boot in development and tests
    without any environment configured.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="Plant Care API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Plant care schedules, care logs and AI-assisted diagnosis",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=True, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json/text)")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    RELOAD: bool = Field(default=True, description="Auto-reload on changes")
    WORKERS: int = Field(default=1, description="Number of worker processes")

    # =========================================================================
    # DATABASE CONFIGURATION
    # =========================================================================

    DATABASE_URL: str = Field(
        default="sqlite+aiosqlite:///./plant_care.db",
        description="Async SQLAlchemy database URL"
    )
    DB_ECHO: bool = Field(default=False, description="Echo SQL statements")
    DB_POOL_SIZE: int = Field(default=10, description="Database pool size")
    DB_MAX_OVERFLOW: int = Field(default=20, description="Database pool overflow")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Database pool recycle time")

    # =========================================================================
    # SECURITY SETTINGS
    # =========================================================================

    JWT_SECRET_KEY: str = Field(
        default="plant-care-development-secret",
        description="JWT secret key"
    )
    JWT_ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=60 * 24 * 7,
        description="JWT access token expiry"
    )

    # CORS Settings
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="CORS allowed origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="CORS allow credentials")

    # =========================================================================
    # AI / LLM APIs
    # =========================================================================

    GROQ_API_KEY: str = Field(default="", description="Groq API key")
    GROQ_API_URL: str = Field(
        default="https://api.groq.com/openai/v1",
        description="Groq OpenAI-compatible API base URL"
    )
    GROQ_MODEL: str = Field(default="llama-3.3-70b-versatile", description="Groq chat model")
    GROQ_VISION_MODEL: str = Field(
        default="meta-llama/llama-4-scout-17b-16e-instruct",
        description="Groq model used for image-based diagnosis"
    )
    AI_REQUEST_TIMEOUT: int = Field(default=30, description="AI request timeout (seconds)")
    AI_MAX_RETRIES: int = Field(default=3, description="AI transport retry attempts")

    # =========================================================================
    # PLANT SPECIES DATABASE
    # =========================================================================

    PERENUAL_API_KEY: str = Field(default="", description="Perenual plant database API key")
    PERENUAL_API_URL: str = Field(default="https://perenual.com/api", description="Perenual API base URL")
    PLANT_DATA_TIMEOUT: int = Field(default=15, description="Plant database request timeout (seconds)")
    PLANT_DATA_MAX_RETRIES: int = Field(default=2, description="Plant database transport retry attempts")
    SUGGESTION_SEARCH_TERM: str = Field(
        default="tomato",
        description="Plant database search used to build the candidate list for AI suggestions"
    )
    SUGGESTION_CANDIDATE_LIMIT: int = Field(
        default=20, ge=1, le=30,
        description="Candidates listed in the suggestions prompt"
    )

    # =========================================================================
    # CARE POLICY
    # =========================================================================

    DEFAULT_WATERING_FREQUENCY: int = Field(default=2, ge=1, description="Watering days for moderate needs")
    HIGH_WATER_NEED_FREQUENCY: int = Field(default=1, ge=1, description="Watering days for high needs")
    LOW_WATER_NEED_FREQUENCY: int = Field(default=7, ge=1, description="Watering days for low needs")
    DEFAULT_FERTILIZING_FREQUENCY: int = Field(default=30, ge=1, description="Fertilizing days")
    DEFAULT_PRUNING_FREQUENCY: int = Field(default=60, ge=1, description="Pruning days")
    RECENT_CARE_LOGS_LIMIT: int = Field(default=10, ge=1, description="Care logs shown with a plant")

    # =========================================================================
    # DIAGNOSIS ACCURACY TUNING
    # =========================================================================

    ACCURACY_BASELINE: int = Field(default=20, description="Context score every diagnosis starts with")
    ACCURACY_WEIGHT_SPECIES: int = Field(default=20)
    ACCURACY_WEIGHT_CATEGORY: int = Field(default=10)
    ACCURACY_WEIGHT_SOIL_TYPE: int = Field(default=15)
    ACCURACY_WEIGHT_LOCATION: int = Field(default=10)
    ACCURACY_WEIGHT_SUNLIGHT: int = Field(default=10)
    ACCURACY_WEIGHT_CITY: int = Field(default=10)
    ACCURACY_WEIGHT_CLIMATE_ZONE: int = Field(default=5)
    ACCURACY_CONTEXT_BLEND: float = Field(default=0.45, description="Share of context score in blend")
    ACCURACY_CONFIDENCE_BLEND: float = Field(default=0.55, description="Share of AI confidence in blend")
    ACCURACY_DEFAULT_CONFIDENCE: float = Field(default=50, description="Confidence assumed when AI omits one")
    ACCURACY_MISMATCH_CAP: int = Field(default=55, description="Ceiling applied on species mismatch")
    ACCURACY_FLOOR: int = Field(default=15)
    ACCURACY_CEILING: int = Field(default=100)

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v.lower()

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        """Validate JWT algorithm."""
        allowed_algorithms = ["HS256", "HS384", "HS512"]
        if v not in allowed_algorithms:
            raise ValueError(f"JWT algorithm must be one of {allowed_algorithms}")
        return v

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        """Validate CORS origins format."""
        origins = [origin.strip() for origin in v.split(",")]
        for origin in origins:
            if not origin.startswith(("http://", "https://", "*")):
                raise ValueError(f"Invalid CORS origin format: {origin}")
        return v

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.ENVIRONMENT == "test"

    # =========================================================================
    # PROVIDER AND POLICY CONFIGURATIONS
    # =========================================================================

    def get_ai_api_config(self) -> Dict[str, Any]:
        """Get Groq AI API configuration."""
        return {
            "api_key": self.GROQ_API_KEY,
            "api_url": self.GROQ_API_URL,
            "model": self.GROQ_MODEL,
            "vision_model": self.GROQ_VISION_MODEL,
            "timeout": self.AI_REQUEST_TIMEOUT,
            "max_retries": self.AI_MAX_RETRIES,
        }

    def get_plant_data_api_config(self) -> Dict[str, Any]:
        """Get Perenual plant database configuration."""
        return {
            "api_key": self.PERENUAL_API_KEY,
            "api_url": self.PERENUAL_API_URL,
            "timeout": self.PLANT_DATA_TIMEOUT,
            "max_retries": self.PLANT_DATA_MAX_RETRIES,
        }

    def get_watering_policy(self) -> Dict[str, int]:
        """Watering frequency bands keyed by watering need."""
        return {
            "high": self.HIGH_WATER_NEED_FREQUENCY,
            "low": self.LOW_WATER_NEED_FREQUENCY,
        }

    def get_accuracy_weights(self) -> Dict[str, Any]:
        """Get diagnosis accuracy weighting constants."""
        return {
            "baseline": self.ACCURACY_BASELINE,
            "species": self.ACCURACY_WEIGHT_SPECIES,
            "category": self.ACCURACY_WEIGHT_CATEGORY,
            "soil_type": self.ACCURACY_WEIGHT_SOIL_TYPE,
            "location": self.ACCURACY_WEIGHT_LOCATION,
            "sunlight": self.ACCURACY_WEIGHT_SUNLIGHT,
            "city": self.ACCURACY_WEIGHT_CITY,
            "climate_zone": self.ACCURACY_WEIGHT_CLIMATE_ZONE,
            "context_blend": self.ACCURACY_CONTEXT_BLEND,
            "confidence_blend": self.ACCURACY_CONFIDENCE_BLEND,
            "default_confidence": self.ACCURACY_DEFAULT_CONFIDENCE,
            "mismatch_cap": self.ACCURACY_MISMATCH_CAP,
            "floor": self.ACCURACY_FLOOR,
            "ceiling": self.ACCURACY_CEILING,
        }


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
