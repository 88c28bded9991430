# 📄 File: app/modules/plant_care/application/commands/update_plant.py
# 🧭 Purpose (Layman Explanation):
# The "edit my plant" request: only the fields the user actually changed are included.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for partial plant updates. Unset fields mean "no change"; the care schedule can be
# merged field by field. Derived due dates are never accepted from clients.
#
# 🔗 Dependencies:
# - pydantic for command validation
# - app.modules.plant_care.domain.models.plant (enums)
#
# 🔄 Connected Modules / Calls From:
# - UpdatePlantCommandHandler
# - app.modules.plant_care.presentation.api.v1.plants (PUT /plants/{plant_id})

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from app.modules.plant_care.domain.models.plant import PlantCategory, PlantLocation, PlantStatus


class CareScheduleUpdate(BaseModel):
    """Client-editable part of a care schedule"""
    watering_frequency: Optional[int] = Field(default=None, ge=1)
    last_watered: Optional[datetime] = None
    fertilizing_frequency: Optional[int] = Field(default=None, ge=1)
    last_fertilized: Optional[datetime] = None
    pruning_frequency: Optional[int] = Field(default=None, ge=1)
    last_pruned: Optional[datetime] = None


class UpdatePlantCommand(BaseModel):
    """
    Command for updating an existing plant.

    Update Semantics:
    - Only provided fields are updated (partial updates supported)
    - A provided health_score is clamped to 0-100 and drives status
    - A provided status of "dormant" is kept; other statuses are re-derived
      from the health score
    """

    plant_id: str
    user_id: str

    nickname: Optional[str] = Field(default=None, min_length=1, max_length=100)
    species: Optional[str] = Field(default=None, min_length=1, max_length=150)
    category: Optional[PlantCategory] = None
    location: Optional[PlantLocation] = None
    sunlight_received: Optional[float] = Field(default=None, ge=0, le=24)
    notes: Optional[str] = Field(default=None, max_length=1000)
    health_score: Optional[float] = None
    status: Optional[PlantStatus] = None
    care_schedule: Optional[CareScheduleUpdate] = None

    @field_validator("nickname", "species")
    @classmethod
    def validate_text(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    def get_update_fields(self) -> Dict[str, Any]:
        """Plain plant fields that were provided (schedule, score and status excluded)."""
        return self.model_dump(
            exclude_unset=True,
            exclude_none=True,
            exclude={"plant_id", "user_id", "health_score", "status", "care_schedule"},
        )

    def get_schedule_updates(self) -> Dict[str, Any]:
        if self.care_schedule is None:
            return {}
        return self.care_schedule.model_dump(exclude_unset=True, exclude_none=True)

    def has_updates(self) -> bool:
        return bool(
            self.get_update_fields()
            or self.get_schedule_updates()
            or self.health_score is not None
            or self.status is not None
        )
