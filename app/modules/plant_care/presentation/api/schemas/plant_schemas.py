# 📄 File: app/modules/plant_care/presentation/api/schemas/plant_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what the app sends when adding or editing a plant, and what it gets back.
#
# 🧪 Purpose (Technical Summary):
# Request/response schemas for plant endpoints. Requests accept snake_case or camelCase keys;
# responses expose the Plant aggregate with its derived schedule dates.
#
# 🔗 Dependencies:
# - pydantic (alias generator, validators)
# - app.modules.plant_care.domain.models.plant, application update command (schedule patch)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.api.v1.plants

"""
Plant API Schemas

Request Schemas:
- PlantCreateRequest: New plant (location and sunlight default from the user profile)
- PlantUpdateRequest: Partial update including a care schedule patch

Response Schemas:
- PlantResponse: Full plant with care schedule and plant info
- PlantDetailResponse: Plant plus its most recent care logs
- PlantImageResponse: Gallery entry
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.modules.plant_care.application.commands.update_plant import CareScheduleUpdate
from app.modules.plant_care.domain.models.plant import (
    CareSchedule,
    Plant,
    PlantCategory,
    PlantImage,
    PlantInfo,
    PlantLocation,
    PlantStatus,
)
from app.modules.plant_care.presentation.api.schemas.care_schemas import CareLogResponse


class _CamelRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlantCreateRequest(_CamelRequest):
    """Schema for adding a plant"""
    nickname: str = Field(..., min_length=1, max_length=100, description="Name for your plant")
    species: str = Field(..., min_length=1, max_length=150, description="Common species name")
    scientific_name: Optional[str] = Field(default=None, max_length=200)
    category: PlantCategory = PlantCategory.OTHER
    planted_date: Optional[datetime] = None
    location: Optional[PlantLocation] = None
    sunlight_received: Optional[float] = Field(default=None, ge=0, le=24, description="Hours per day")
    notes: str = Field(default="", max_length=1000)

    @field_validator("nickname", "species")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Nickname and species are required")
        return v.strip()


class PlantUpdateRequest(_CamelRequest):
    """Schema for plant updates; omitted fields stay unchanged"""
    nickname: Optional[str] = Field(default=None, min_length=1, max_length=100)
    species: Optional[str] = Field(default=None, min_length=1, max_length=150)
    category: Optional[PlantCategory] = None
    location: Optional[PlantLocation] = None
    sunlight_received: Optional[float] = Field(default=None, ge=0, le=24)
    notes: Optional[str] = Field(default=None, max_length=1000)
    health_score: Optional[float] = None
    status: Optional[PlantStatus] = None
    care_schedule: Optional[CareScheduleUpdate] = None


class PlantImageResponse(BaseModel):
    url: str
    note: str
    uploaded_at: datetime

    @classmethod
    def from_domain(cls, image: PlantImage) -> "PlantImageResponse":
        return cls(url=image.url, note=image.note, uploaded_at=image.uploaded_at)


class PlantResponse(BaseModel):
    """Schema for plant data in responses"""
    plant_id: str
    user_id: str
    nickname: str
    species: str
    scientific_name: str
    category: PlantCategory
    location: PlantLocation
    sunlight_received: float
    planted_date: datetime
    notes: str
    images: List[PlantImageResponse]
    care_schedule: CareSchedule
    plant_info: PlantInfo
    status: PlantStatus
    health_score: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, plant: Plant) -> "PlantResponse":
        return cls(
            **plant.model_dump(exclude={"images", "care_schedule", "plant_info"}),
            images=[PlantImageResponse.from_domain(image) for image in plant.images],
            care_schedule=plant.care_schedule.model_copy(),
            plant_info=plant.plant_info.model_copy(),
        )


class PlantDetailResponse(BaseModel):
    plant: PlantResponse
    recent_care_logs: List[CareLogResponse]
