# 📄 File: app/modules/plant_care/presentation/api/schemas/care_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what the app sends when recording plant care, and the diary entries it gets back.
#
# 🧪 Purpose (Technical Summary):
# Request/response schemas for care log endpoints (camelCase accepted on input).
#
# 🔗 Dependencies:
# - pydantic
# - app.modules.plant_care.domain.models.care_log
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.api.v1.care, plant_schemas (plant detail)

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.modules.plant_care.domain.models.care_log import ActivityType, CareLog, CareMeasurements


class CareLogCreateRequest(BaseModel):
    """Schema for recording a care activity"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    plant_id: str = Field(..., min_length=1)
    activity_type: ActivityType
    activity_date: Optional[datetime] = Field(default=None, description="Defaults to now")
    notes: str = Field(default="", max_length=1000)
    measurements: Optional[CareMeasurements] = None


class CareLogResponse(BaseModel):
    care_log_id: str
    user_id: str
    plant_id: str
    activity_type: ActivityType
    activity_date: datetime
    notes: str
    measurements: Optional[CareMeasurements] = None
    created_at: datetime

    @classmethod
    def from_domain(cls, care_log: CareLog) -> "CareLogResponse":
        return cls(**care_log.model_dump(exclude={"measurements"}), measurements=care_log.measurements)


class PlantScheduleSummary(BaseModel):
    """The parts of a plant that change when care is logged"""
    plant_id: str
    status: str
    health_score: int
    last_watered: Optional[datetime] = None
    next_watering_due: Optional[datetime] = None
    last_fertilized: Optional[datetime] = None
    next_fertilizing_due: Optional[datetime] = None
    last_pruned: Optional[datetime] = None


class CareLogCreatedResponse(BaseModel):
    care_log: CareLogResponse
    plant: PlantScheduleSummary
