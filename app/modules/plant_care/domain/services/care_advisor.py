# 📄 File: app/modules/plant_care/domain/services/care_advisor.py
# 🧭 Purpose (Layman Explanation):
# Describes what we expect from our AI gardening expert, without tying the app to one AI company.
# 🧪 Purpose (Technical Summary):
# Abstract interface for AI-backed plant advice: care profiles, seasonal tips, water-quality
# advice, disease diagnosis and plant suggestions. Implementations raise the AIProviderError family
# on failure.
# 🔗 Dependencies:
# abc, typing, advice/diagnosis domain models
# 🔄 Connected Modules / Calls From:
# groq_advisor.py (implementation), plant command and query handlers, test fakes

from abc import ABC, abstractmethod
from typing import List, Optional

from app.modules.plant_care.domain.models.advice import (
    CareProfile,
    GrowingConditions,
    PlantSuggestions,
    SeasonalTips,
    WaterQualityAdvice,
    WaterSource,
)
from app.modules.plant_care.domain.models.diagnosis import DiseaseAnalysis, PlantContext


class PlantCareAdvisor(ABC):
    """AI plant care advisor interface"""

    @abstractmethod
    async def generate_care_profile(
        self,
        plant_name: str,
        plant_type: str,
        conditions: GrowingConditions,
        season: str,
        scientific_name: Optional[str] = None
    ) -> CareProfile:
        """Suggest care requirements for a species under the user's conditions."""
        pass

    @abstractmethod
    async def generate_seasonal_tips(self, plant_name: str, location: str, season: str) -> SeasonalTips:
        """Season-specific care tips."""
        pass

    @abstractmethod
    async def generate_water_quality_advice(self, plant_name: str, water_source: WaterSource) -> WaterQualityAdvice:
        """Whether a water source suits the plant and how to prepare it."""
        pass

    @abstractmethod
    async def analyze_disease(
        self,
        image_url: Optional[str],
        description: Optional[str],
        context: Optional[PlantContext]
    ) -> DiseaseAnalysis:
        """Diagnose plant health from an image URL and/or a symptom description."""
        pass

    @abstractmethod
    async def generate_plant_suggestions(
        self,
        conditions: GrowingConditions,
        season: str,
        candidates: List[str]
    ) -> PlantSuggestions:
        """Pick the plants from ``candidates`` best suited to the user's conditions and season."""
        pass
