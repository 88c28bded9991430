# 📄 File: app/modules/plant_care/application/queries/get_advice.py
# 🧭 Purpose (Layman Explanation):
# Asking the AI gardener for tips: what to do this season, and whether a water source is okay.
#
# 🧪 Purpose (Technical Summary):
# CQRS read queries for AI advice about one owned plant. Handlers fall back to fixed advice
# when the provider fails.
#
# 🔗 Dependencies:
# - pydantic
# - app.modules.plant_care.domain.models.advice (GrowingConditions, WaterSource)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.application.handlers.query_handlers
# - app.modules.plant_care.presentation.api.v1 (plants seasonal tips, water quality)

from pydantic import BaseModel, ConfigDict, Field

from app.modules.plant_care.domain.models.advice import GrowingConditions, WaterSource


class SeasonalTipsQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    plant_id: str
    user_id: str
    conditions: GrowingConditions = Field(default_factory=GrowingConditions)


class WaterQualityQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    plant_id: str
    user_id: str
    water_source: WaterSource
