# 📄 File: app/modules/plant_care/application/commands/create_plant.py
# 🧭 Purpose (Layman Explanation):
# The "add a plant" request: everything we need to put a new plant in the user's garden,
# plus the user's growing conditions so the AI can suggest a care schedule.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for plant creation with field validation and optional inputs that fall back to
# the user's growing conditions (location from balcony type, sunlight from profile hours).
#
# 🔗 Dependencies:
# - pydantic for command validation
# - app.modules.plant_care.domain.models (PlantCategory, PlantLocation, GrowingConditions)
#
# 🔄 Connected Modules / Calls From:
# - CreatePlantCommandHandler
# - app.modules.plant_care.presentation.api.v1.plants (POST /plants)

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.modules.plant_care.domain.models.advice import GrowingConditions
from app.modules.plant_care.domain.models.plant import PlantCategory, PlantLocation


class CreatePlantCommand(BaseModel):
    """
    Command for adding a plant to a user's garden.

    Location and sunlight default to the user's growing conditions when
    omitted; planted_date defaults to "now" in the handler.
    """

    user_id: str = Field(..., description="Owner of the new plant")
    nickname: str = Field(..., min_length=1, max_length=100, description="Name the user gives the plant")
    species: str = Field(..., min_length=1, max_length=150, description="Common species name")
    scientific_name: Optional[str] = Field(default=None, max_length=200)
    category: PlantCategory = PlantCategory.OTHER
    planted_date: Optional[datetime] = None
    location: Optional[PlantLocation] = None
    sunlight_received: Optional[float] = Field(default=None, ge=0, le=24)
    notes: str = Field(default="", max_length=1000)
    conditions: GrowingConditions = Field(default_factory=GrowingConditions)

    @field_validator("nickname", "species")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        """Nickname and species are required"""
        v = v.strip()
        if not v:
            raise ValueError("Nickname and species are required")
        return v

    def resolved_location(self) -> PlantLocation:
        if self.location is not None:
            return self.location
        try:
            return PlantLocation(self.conditions.balcony_type)
        except ValueError:
            return PlantLocation.BALCONY

    def resolved_sunlight(self) -> float:
        if self.sunlight_received is not None:
            return self.sunlight_received
        return min(max(self.conditions.sunlight_hours, 0), 24)
