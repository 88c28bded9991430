# 📄 File: app/modules/plant_care/domain/models/plant.py
# 🧭 Purpose (Layman Explanation):
# Defines what we know about each plant in a user's garden: its name and species, where it lives,
# how often it needs watering, fertilizing and pruning, and how healthy it currently is.
# 🧪 Purpose (Technical Summary):
# Domain model for the Plant aggregate with its CareSchedule and PlantInfo value objects,
# category/location/status enums, UTC-normalised timestamps and soft-delete semantics.
# 🔗 Dependencies:
# pydantic, datetime, typing, uuid, enum, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# care_schedule_engine.py, plant_health.py, plant repositories, command and query handlers

import uuid
from datetime import datetime
from enum import Enum
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

from app.shared.utils.helpers import ensure_utc, utc_now

# Datetimes inside the domain are always timezone-aware UTC
UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]


class PlantCategory(str, Enum):
    """Broad plant categories"""
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    FLOWER = "flower"
    HERB = "herb"
    INDOOR = "indoor"
    SUCCULENT = "succulent"
    TREE = "tree"
    OTHER = "other"


class PlantLocation(str, Enum):
    """Where the plant is kept"""
    INDOOR = "indoor"
    BALCONY = "balcony"
    TERRACE = "terrace"
    GARDEN = "garden"


class PlantStatus(str, Enum):
    """Plant health status"""
    HEALTHY = "healthy"
    NEEDS_ATTENTION = "needs-attention"
    DISEASED = "diseased"
    DORMANT = "dormant"        # Only ever set explicitly by the owner


class CareSchedule(BaseModel):
    """
    Per-activity care cadence.

    Frequencies are whole days. ``next_*_due`` fields are derived by the
    care schedule engine and never written by API clients.
    """
    model_config = ConfigDict(validate_assignment=True)

    watering_frequency: int = Field(default=2, ge=1)
    last_watered: Optional[UtcDatetime] = None
    next_watering_due: Optional[UtcDatetime] = None

    fertilizing_frequency: int = Field(default=30, ge=1)
    last_fertilized: Optional[UtcDatetime] = None
    next_fertilizing_due: Optional[UtcDatetime] = None

    pruning_frequency: int = Field(default=60, ge=1)
    last_pruned: Optional[UtcDatetime] = None
    next_pruning_due: Optional[UtcDatetime] = None


class PlantInfo(BaseModel):
    """Growing requirements, usually filled in from the AI care profile"""
    model_config = ConfigDict(validate_assignment=True)

    watering_needs: str = "moderate"
    sunlight_needs: str = "4-6 hours"
    soil_type: str = "well-drained"
    ideal_temperature: str = "20-30°C"
    growth_time: int = 90
    estimated_harvest_date: Optional[UtcDatetime] = None


class PlantImage(BaseModel):
    """Photo attached to a plant (disease checks, progress shots)"""
    url: str
    note: str = ""
    uploaded_at: UtcDatetime = Field(default_factory=utc_now)


class Plant(BaseModel):
    """
    Plant domain model, owned by exactly one user.

    Plants are never hard-deleted; ``is_active`` is cleared instead so
    care history stays intact.
    """
    model_config = ConfigDict(validate_assignment=True)

    plant_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    user_id: str

    nickname: str = Field(..., min_length=1, max_length=100)
    species: str = Field(..., min_length=1, max_length=150)
    scientific_name: str = ""
    category: PlantCategory = PlantCategory.OTHER
    location: PlantLocation = PlantLocation.BALCONY
    sunlight_received: float = Field(default=6, ge=0, le=24)
    planted_date: UtcDatetime = Field(default_factory=utc_now)
    notes: str = ""
    images: List[PlantImage] = Field(default_factory=list)

    care_schedule: CareSchedule = Field(default_factory=CareSchedule)
    plant_info: PlantInfo = Field(default_factory=PlantInfo)

    status: PlantStatus = PlantStatus.HEALTHY
    health_score: int = Field(default=100, ge=0, le=100)
    is_active: bool = True

    created_at: UtcDatetime = Field(default_factory=utc_now)
    updated_at: UtcDatetime = Field(default_factory=utc_now)

    @field_validator("nickname", "species")
    @classmethod
    def strip_required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    def add_image(self, url: str, note: str = "", uploaded_at: Optional[datetime] = None) -> PlantImage:
        image = PlantImage(url=url, note=note, uploaded_at=uploaded_at or utc_now())
        self.images = [*self.images, image]
        return image

    def deactivate(self, now: Optional[datetime] = None) -> None:
        """Soft delete."""
        self.is_active = False
        self.touch(now)

    def touch(self, now: Optional[datetime] = None) -> None:
        self.updated_at = now or utc_now()
