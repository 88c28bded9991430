# 📄 File: app/modules/plant_care/application/commands/analyze_disease.py
# 🧭 Purpose (Layman Explanation):
# The "what's wrong with my plant?" request: a photo link and/or a description of the symptoms,
# optionally tied to one of the user's plants so its health can be updated.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for AI disease analysis. At least one of image_url or description is required.
# The user's city and climate zone ride along as diagnosis context.
#
# 🔗 Dependencies:
# - pydantic
# - app.modules.plant_care.domain.models.diagnosis (PlantContext)
#
# 🔄 Connected Modules / Calls From:
# - AnalyzeDiseaseCommandHandler
# - app.modules.plant_care.presentation.api.v1.disease (POST /disease/analyze)

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from app.modules.plant_care.domain.models.diagnosis import PlantContext


class AnalyzeDiseaseCommand(BaseModel):
    """Command for a disease check"""
    user_id: str
    plant_id: Optional[str] = None
    image_url: Optional[str] = Field(default=None, max_length=2000)
    description: Optional[str] = Field(default=None, max_length=2000)
    user_city: Optional[str] = None
    user_climate_zone: Optional[str] = None
    context_override: Optional[PlantContext] = Field(
        default=None,
        description="Context supplied by the client when no plant is on record"
    )

    @model_validator(mode="after")
    def require_image_or_description(self) -> "AnalyzeDiseaseCommand":
        has_image = bool(self.image_url and self.image_url.strip())
        has_description = bool(self.description and self.description.strip())
        if not has_image and not has_description:
            raise ValueError("Please provide an image URL or a description of the symptoms")
        return self
