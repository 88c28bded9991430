# 📄 File: app/modules/plant_care/application/queries/get_plant_data.py
# 🧭 Purpose (Layman Explanation):
# Looking plants up in the encyclopedia, and asking the AI gardener which ones suit your balcony.
#
# 🧪 Purpose (Technical Summary):
# CQRS read queries over the plant species database plus the AI suggestion query. None of them
# touch the user's own garden, so only the suggestions query carries growing conditions.
#
# 🔗 Dependencies:
# - pydantic
# - app.modules.plant_care.domain.models.advice (GrowingConditions)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.application.handlers.query_handlers
# - app.modules.plant_care.presentation.api.v1.plant_data

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.plant_care.domain.models.advice import GrowingConditions


class SearchPlantSpeciesQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str = Field(..., min_length=1, max_length=100)
    page: int = Field(default=1, ge=1)


class GetPlantSpeciesQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    species_id: int = Field(..., ge=1)


class PlantSuggestionsQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    conditions: GrowingConditions = Field(default_factory=GrowingConditions)
    # Search term used to gather candidates; None uses the configured default
    search_term: Optional[str] = Field(default=None, max_length=100)
