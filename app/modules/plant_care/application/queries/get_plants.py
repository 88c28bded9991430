# 📄 File: app/modules/plant_care/application/queries/get_plants.py
# 🧭 Purpose (Layman Explanation):
# The "show me my plants" requests: the whole garden, one plant with its recent care diary,
# the plants that need attention today, and a plant's photo gallery.
#
# 🧪 Purpose (Technical Summary):
# CQRS read queries over the Plant aggregate. Every query carries the requesting user_id so
# handlers can enforce ownership.
#
# 🔗 Dependencies:
# - pydantic for query validation
# - app.modules.plant_care.domain.models.plant (filter enums)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.application.handlers.query_handlers
# - app.modules.plant_care.presentation.api.v1.plants

"""
Plant Queries

- ListPlantsQuery: Active plants of a user, optionally filtered
- GetPlantQuery: One plant plus its most recent care logs
- PlantsNeedingCareQuery: Active plants with anything due by end of today
- PlantImagesQuery: A plant's image gallery
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.plant_care.domain.models.plant import PlantCategory, PlantStatus


class ListPlantsQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: str
    category: Optional[PlantCategory] = None
    status: Optional[PlantStatus] = None
    is_active: Optional[bool] = Field(default=True, description="None lists active and deleted plants")


class GetPlantQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    plant_id: str
    user_id: str
    recent_care_limit: int = Field(default=10, ge=1, le=100)


class PlantsNeedingCareQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: str


class PlantImagesQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    plant_id: str
    user_id: str
