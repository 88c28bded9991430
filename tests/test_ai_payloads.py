import pytest

from app.modules.plant_care.domain.models.advice import (
    FALLBACK_SUGGESTION_REASONING,
    CareProfile,
    PlantSuggestions,
    SeasonalTips,
    WaterQualityAdvice,
)
from app.modules.plant_care.domain.models.diagnosis import (
    DEFAULT_CONFIDENCE,
    UNKNOWN_DISEASE,
    DiseaseAnalysis,
    DiseaseSeverity,
    PlantContext,
)
from app.shared.core.exceptions import (
    AIAuthenticationError,
    AIModelLoadingError,
    AIProviderError,
    AIRateLimitedError,
)
from app.shared.infrastructure.external_apis.api_client import provider_error_for_status


class TestDiseaseAnalysisPayload:
    def test_full_unhealthy_payload(self):
        analysis = DiseaseAnalysis.from_ai_payload({
            "isHealthy": False,
            "confidence": 82,
            "disease": "Early blight",
            "plantType": "Tomato",
            "severity": "Severe",
            "symptoms": ["Brown rings on leaves"],
            "treatment": {"immediate": "Remove infected leaves", "organicOptions": ["Copper spray"]},
        })
        assert analysis.disease == "Early blight"
        assert analysis.severity == DiseaseSeverity.SEVERE
        assert analysis.confidence == 82
        assert analysis.ai_confidence == 82
        assert analysis.symptoms == ["Brown rings on leaves"]
        assert analysis.treatment.immediate == "Remove infected leaves"
        assert analysis.treatment.organic_options == ["Copper spray"]
        assert analysis.treatment.long_term == "Maintain proper care routine"

    def test_empty_payload_gets_defaults(self):
        analysis = DiseaseAnalysis.from_ai_payload({})
        assert analysis.is_healthy is False
        assert analysis.confidence == DEFAULT_CONFIDENCE
        assert analysis.ai_confidence is None
        assert analysis.disease == UNKNOWN_DISEASE
        assert analysis.severity == DiseaseSeverity.MODERATE
        assert analysis.prevention

    def test_healthy_plants_have_no_severity(self):
        analysis = DiseaseAnalysis.from_ai_payload({"isHealthy": True, "severity": "severe"})
        assert analysis.severity is None

    def test_confidence_is_clamped(self):
        assert DiseaseAnalysis.from_ai_payload({"confidence": 180}).confidence == 100
        assert DiseaseAnalysis.from_ai_payload({"confidence": "high"}).confidence == DEFAULT_CONFIDENCE
        assert DiseaseAnalysis.from_ai_payload({"confidence": 180}).ai_confidence == 100
        assert DiseaseAnalysis.from_ai_payload({"confidence": "inf"}).ai_confidence is None

    def test_model_mismatch_flag_wins(self):
        context = PlantContext(species="Tomato")
        analysis = DiseaseAnalysis.from_ai_payload({"plantType": "Tomato", "plantMismatch": True}, context)
        assert analysis.plant_mismatch is True

    @pytest.mark.parametrize("plant_type,mismatch", [
        ("Cherry tomato", False),
        ("tomato", False),
        ("Rose", True),
    ])
    def test_mismatch_from_species_on_record(self, plant_type, mismatch):
        context = PlantContext(species="Tomato")
        analysis = DiseaseAnalysis.from_ai_payload({"plantType": plant_type}, context)
        assert analysis.plant_mismatch is mismatch

    def test_no_mismatch_without_species(self):
        analysis = DiseaseAnalysis.from_ai_payload({"plantType": "Rose"}, PlantContext(city="Pune"))
        assert analysis.plant_mismatch is False


class TestAdvicePayloads:
    def test_care_profile(self):
        profile = CareProfile.from_ai_payload({
            "wateringNeeds": "High",
            "wateringFrequency": "0",
            "growthTimeDays": "120",
            "soilType": "Loamy",
        })
        assert profile.watering_needs == "high"
        assert profile.watering_frequency == 2
        assert profile.growth_time_days == 120
        assert profile.soil_type == "Loamy"

    def test_care_profile_fallback(self):
        assert CareProfile.fallback().watering_needs == "moderate"

    def test_seasonal_tips_fill_gaps(self):
        tips = SeasonalTips.from_ai_payload({"wateringTips": "Water early morning"})
        assert tips.watering_tips == "Water early morning"
        assert tips.common_issues == SeasonalTips.fallback().common_issues

    def test_water_quality(self):
        advice = WaterQualityAdvice.from_ai_payload({"suitability": "Excellent", "frequency": 3})
        assert advice.suitability == "excellent"
        assert advice.frequency == "3"

    def test_plant_suggestions_are_unique_and_capped(self):
        suggestions = PlantSuggestions.from_ai_payload({
            "suggestions": ["Mint", " mint ", 3, "", "Tulsi", "Okra", "Rose", "Marigold", "Jasmine"],
            "reasoning": "  ",
        })
        assert suggestions.suggestions == ["Mint", "Tulsi", "Okra", "Rose", "Marigold"]
        assert suggestions.reasoning == FALLBACK_SUGGESTION_REASONING

    def test_plant_suggestions_not_a_list(self):
        assert PlantSuggestions.from_ai_payload({"suggestions": "Mint"}).suggestions == []

    def test_plant_suggestions_fallback_takes_first_candidates(self):
        fallback = PlantSuggestions.fallback(["A", "B", "a", "C", "D", "E", "F"])
        assert fallback.suggestions == ["A", "B", "C", "D", "E"]


class TestProviderErrors:
    def test_rate_limited_with_retry_after(self):
        error = provider_error_for_status("groq", 429, headers={"Retry-After": "12"})
        assert isinstance(error, AIRateLimitedError)
        assert error.status_code == 429
        assert error.retry_after == 12

    @pytest.mark.parametrize("status_code", [401, 403])
    def test_auth_errors(self, status_code):
        error = provider_error_for_status("groq", status_code)
        assert isinstance(error, AIAuthenticationError)
        assert error.status_code == 502

    def test_model_loading(self):
        assert isinstance(provider_error_for_status("groq", 503), AIModelLoadingError)
        assert isinstance(provider_error_for_status("groq", 500, body="Model is loading"), AIModelLoadingError)

    def test_other_failures(self):
        error = provider_error_for_status("groq", 500, body="boom")
        assert type(error) is AIProviderError
        assert error.status_code == 500
        assert error.details["service_response"] == "boom"
