# 📄 File: app/modules/plant_care/domain/models/advice.py
# 🧭 Purpose (Layman Explanation):
# The shapes of the advice our AI gardener gives back: a care profile for a new plant,
# tips for the current season, whether a water source suits the plant, and which plants to grow.
# 🧪 Purpose (Technical Summary):
# Pydantic value objects for AI advice (CareProfile, SeasonalTips, WaterQualityAdvice,
# PlantSuggestions) with fixed fallbacks used whenever the provider fails, plus GrowingConditions
# built from user claims.
# 🔗 Dependencies:
# pydantic, enum, typing
# 🔄 Connected Modules / Calls From:
# care_advisor.py (interface), groq_advisor.py (parsing), plant command and query handlers

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from app.shared.utils.helpers import safe_int


class WaterSource(str, Enum):
    TAP = "tap"
    RO = "ro"
    RAINWATER = "rainwater"
    BOREWELL = "borewell"
    FILTERED = "filtered"


class GrowingConditions(BaseModel):
    """Where and how the user grows plants (Indian defaults)"""
    city: str = "Mumbai"
    state: str = "Maharashtra"
    climate_zone: str = "tropical"
    balcony_type: str = "balcony"
    sunlight_hours: float = 6

    @property
    def location_label(self) -> str:
        return f"{self.city}, {self.state}"


class CareProfile(BaseModel):
    """AI-suggested care requirements for a species"""
    watering_frequency: int = 2
    watering_needs: str = "moderate"
    watering_instructions: str = "Water when top soil is dry"
    fertilizing_frequency: int = 30
    fertilizing_instructions: str = "Use balanced NPK fertilizer"
    pruning_frequency: int = 60
    sunlight_requirement: str = "4-6 hours"
    soil_type: str = "Well-drained potting mix"
    ideal_temperature: str = "20-30°C"
    growth_time_days: int = 90

    @classmethod
    def fallback(cls) -> "CareProfile":
        return cls()

    @classmethod
    def from_ai_payload(cls, payload: Dict[str, Any]) -> "CareProfile":
        defaults = cls()
        return cls(
            watering_frequency=_positive_int(payload.get("wateringFrequency"), defaults.watering_frequency),
            watering_needs=_text(payload.get("wateringNeeds"), defaults.watering_needs).lower(),
            watering_instructions=_text(payload.get("wateringInstructions"), defaults.watering_instructions),
            fertilizing_frequency=_positive_int(payload.get("fertilizingFrequency"), defaults.fertilizing_frequency),
            fertilizing_instructions=_text(payload.get("fertilizingInstructions"), defaults.fertilizing_instructions),
            pruning_frequency=_positive_int(payload.get("pruningFrequency"), defaults.pruning_frequency),
            sunlight_requirement=_text(payload.get("sunlightRequirement"), defaults.sunlight_requirement),
            soil_type=_text(payload.get("soilType"), defaults.soil_type),
            ideal_temperature=_text(payload.get("idealTemperature"), defaults.ideal_temperature),
            growth_time_days=safe_int(payload.get("growthTimeDays"), defaults.growth_time_days),
        )


class SeasonalTips(BaseModel):
    watering_tips: str = "Adjust watering based on weather conditions"
    common_issues: str = "Monitor for pests and diseases"
    protection_needed: str = "Protect from extreme weather"
    fertilization_advice: str = "Continue regular fertilization schedule"
    additional_care: str = "Observe plant health regularly"

    @classmethod
    def fallback(cls) -> "SeasonalTips":
        return cls()

    @classmethod
    def from_ai_payload(cls, payload: Dict[str, Any]) -> "SeasonalTips":
        defaults = cls()
        return cls(
            watering_tips=_text(payload.get("wateringTips"), defaults.watering_tips),
            common_issues=_text(payload.get("commonIssues"), defaults.common_issues),
            protection_needed=_text(payload.get("protectionNeeded"), defaults.protection_needed),
            fertilization_advice=_text(payload.get("fertilizationAdvice"), defaults.fertilization_advice),
            additional_care=_text(payload.get("additionalCare"), defaults.additional_care),
        )


class WaterQualityAdvice(BaseModel):
    suitability: str = "suitable"
    recommendation: str = "This water source is generally suitable for most plants"
    preparation: str = "Let water sit for 24 hours before use"
    frequency: str = "Can be used regularly"

    @classmethod
    def fallback(cls) -> "WaterQualityAdvice":
        return cls()

    @classmethod
    def from_ai_payload(cls, payload: Dict[str, Any]) -> "WaterQualityAdvice":
        defaults = cls()
        return cls(
            suitability=_text(payload.get("suitability"), defaults.suitability).lower(),
            recommendation=_text(payload.get("recommendation"), defaults.recommendation),
            preparation=_text(payload.get("preparation"), defaults.preparation),
            frequency=_text(payload.get("frequency"), defaults.frequency),
        )


SUGGESTION_COUNT = 5
FALLBACK_SUGGESTION_REASONING = "These plants are generally suitable for various conditions"


class PlantSuggestions(BaseModel):
    """
    The AI's pick of plants to grow, chosen from a candidate list.

    At most SUGGESTION_COUNT names, case-insensitively unique. The fallback
    takes the first candidates in order.
    """
    suggestions: List[str] = Field(default_factory=list)
    reasoning: str = FALLBACK_SUGGESTION_REASONING

    @classmethod
    def fallback(cls, candidates: List[str]) -> "PlantSuggestions":
        return cls(suggestions=_unique_names(candidates))

    @classmethod
    def from_ai_payload(cls, payload: Dict[str, Any]) -> "PlantSuggestions":
        raw = payload.get("suggestions")
        return cls(
            suggestions=_unique_names(raw if isinstance(raw, list) else []),
            reasoning=_text(payload.get("reasoning"), FALLBACK_SUGGESTION_REASONING),
        )


class PlantSuggestionsResult(BaseModel):
    conditions: GrowingConditions
    season: str
    suggestions: List[str] = Field(default_factory=list)
    reasoning: str = FALLBACK_SUGGESTION_REASONING
    available_plants: List[str] = Field(default_factory=list)
    is_fallback: bool = False


class AdviceResult(BaseModel):
    """Advice plus whether it came from the AI or the fixed fallback"""
    plant: str
    season: Optional[str] = None
    location: Optional[str] = None
    water_source: Optional[WaterSource] = None
    advice: Dict[str, Any] = Field(default_factory=dict)
    is_fallback: bool = False


def _text(value: Any, default: str) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _positive_int(value: Any, default: int) -> int:
    result = safe_int(value, default)
    return result if result >= 1 else default


def _unique_names(values: List[Any]) -> List[str]:
    names: List[str] = []
    seen = set()
    for value in values:
        if not isinstance(value, str) or not value.strip():
            continue
        key = value.strip().lower()
        if key in seen:
            continue
        seen.add(key)
        names.append(value.strip())
        if len(names) == SUGGESTION_COUNT:
            break
    return names
