# 📄 File: app/modules/plant_care/presentation/api/schemas/disease_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes a disease check request (photo link and/or symptoms) and the diagnosis we send back,
# including how far the user can trust it.
#
# 🧪 Purpose (Technical Summary):
# Request/response schemas for POST /disease/analyze. The request requires an image URL or a
# description; the response carries the normalised analysis, the accuracy assessment and whether
# the linked plant was updated.
#
# 🔗 Dependencies:
# - pydantic
# - app.modules.plant_care.domain.models.diagnosis
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.api.v1.disease

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from app.modules.plant_care.domain.models.diagnosis import AccuracyAssessment, DiseaseAnalysis, PlantContext


class DiseaseAnalyzeRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    plant_id: Optional[str] = None
    image_url: Optional[str] = Field(default=None, max_length=2000)
    description: Optional[str] = Field(default=None, max_length=2000)
    plant_context: Optional[PlantContext] = Field(
        default=None,
        description="Plant details to use when the plant is not on record"
    )

    @model_validator(mode="after")
    def require_image_or_description(self) -> "DiseaseAnalyzeRequest":
        if not (self.image_url or "").strip() and not (self.description or "").strip():
            raise ValueError("Please provide an image URL or a description of the symptoms")
        return self


class DiseaseAnalysisResponse(BaseModel):
    image_url: Optional[str] = None
    analysis: DiseaseAnalysis
    accuracy: AccuracyAssessment
    context: PlantContext
    plant_id: Optional[str] = None
    plant_updated: bool = False
