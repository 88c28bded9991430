import json

import pytest

from app.modules.plant_care.domain.models.advice import GrowingConditions, WaterSource
from app.modules.plant_care.domain.models.diagnosis import PlantContext
from app.modules.plant_care.infrastructure.external.groq_advisor import GroqPlantCareAdvisor
from app.shared.core.exceptions import AIResponseFormatError


class StubClient:
    """Answers every chat completion with the queued reply text."""

    def __init__(self, reply):
        self.reply = reply
        self.requests = []

    async def post(self, endpoint, payload=None):
        self.requests.append((endpoint, payload))
        if isinstance(self.reply, dict):
            return self.reply
        return {"choices": [{"message": {"content": self.reply}}]}

    async def close(self):
        pass


def advisor_with(reply) -> GroqPlantCareAdvisor:
    return GroqPlantCareAdvisor(StubClient(reply), model="text-model", vision_model="vision-model")


async def test_care_profile_prompt_and_parsing():
    advisor = advisor_with('```json\n{"wateringNeeds": "High", "growthTimeDays": 60}\n```')
    profile = await advisor.generate_care_profile(
        "Tomato", "vegetable", GrowingConditions(city="Pune"), "monsoon", scientific_name=None
    )
    assert profile.watering_needs == "high"
    assert profile.growth_time_days == 60

    endpoint, payload = advisor.client.requests[0]
    assert endpoint == "/chat/completions"
    assert payload["model"] == "text-model"
    prompt = payload["messages"][0]["content"]
    assert "Pune, Maharashtra" in prompt
    assert "monsoon" in prompt


async def test_disease_with_image_uses_vision_model():
    advisor = advisor_with(json.dumps({"isHealthy": False, "disease": "Rust", "plantType": "Rose"}))
    analysis = await advisor.analyze_disease(
        "https://example.com/rose.jpg", None, PlantContext(species="Rose", city="Delhi")
    )
    assert analysis.disease == "Rust"
    assert analysis.plant_mismatch is False

    _, payload = advisor.client.requests[0]
    assert payload["model"] == "vision-model"
    user_content = payload["messages"][1]["content"]
    assert user_content[1]["image_url"]["url"] == "https://example.com/rose.jpg"
    assert "Species on record: Rose" in user_content[0]["text"]


async def test_disease_from_description_uses_text_model():
    advisor = advisor_with('{"isHealthy": true, "confidence": 88}')
    analysis = await advisor.analyze_disease(None, "Small holes in leaves", None)
    assert analysis.is_healthy is True

    _, payload = advisor.client.requests[0]
    assert payload["model"] == "text-model"
    assert "Small holes in leaves" in payload["messages"][1]["content"]


async def test_water_quality_source_in_prompt():
    advisor = advisor_with('{"suitability": "Excellent"}')
    advice = await advisor.generate_water_quality_advice("Fern", WaterSource.RAINWATER)
    assert advice.suitability == "excellent"
    assert "rainwater" in advisor.client.requests[0][1]["messages"][0]["content"]


async def test_reply_without_json_is_a_format_error():
    advisor = advisor_with("Sorry, I cannot help with that.")
    with pytest.raises(AIResponseFormatError):
        await advisor.generate_seasonal_tips("Tomato", "Pune, Maharashtra", "winter")


async def test_reply_without_choices_is_a_format_error():
    advisor = advisor_with({"error": "unexpected"})
    with pytest.raises(AIResponseFormatError):
        await advisor.analyze_disease(None, "wilting", None)


async def test_plant_suggestions_prompt_lists_numbered_candidates():
    advisor = advisor_with(json.dumps({
        "suggestions": ["Tulsi", "tulsi", "Mint", "Curry Leaf", "Aloe Vera", "Okra", "Spinach"],
        "reasoning": "Heat tolerant and compact",
    }))
    suggestions = await advisor.generate_plant_suggestions(
        GrowingConditions(city="Chennai", state="Tamil Nadu", sunlight_hours=3),
        "summer",
        ["Tulsi", "Mint", "Rose"],
    )
    assert suggestions.suggestions == ["Tulsi", "Mint", "Curry Leaf", "Aloe Vera", "Okra"]
    assert suggestions.reasoning == "Heat tolerant and compact"

    payload = advisor.client.requests[0][1]
    assert payload["temperature"] == 0.7
    prompt = payload["messages"][0]["content"]
    assert "1. Tulsi\n2. Mint\n3. Rose" in prompt
    assert "Chennai, Tamil Nadu" in prompt
    assert "Sunlight: 3.0 hours/day" in prompt
    assert "top 5 plants" in prompt


async def test_plant_suggestions_without_names_is_a_format_error():
    advisor = advisor_with('{"suggestions": [], "reasoning": "none fit"}')
    with pytest.raises(AIResponseFormatError):
        await advisor.generate_plant_suggestions(GrowingConditions(), "winter", ["Rose"])
