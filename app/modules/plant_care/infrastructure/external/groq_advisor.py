# 📄 File: app/modules/plant_care/infrastructure/external/groq_advisor.py
# 🧭 Purpose (Layman Explanation):
# Our AI gardening expert. It asks a large language model hosted by Groq for care schedules,
# seasonal tips, water advice, disease diagnoses and plant picks, then turns the replies into tidy
# answers.
#
# 🧪 Purpose (Technical Summary):
# PlantCareAdvisor implementation over Groq's OpenAI-compatible chat completions API. Builds
# prompts tuned for Indian growing conditions, extracts the JSON object from the reply and
# normalises it into domain value objects. Transport and HTTP failures surface as the
# AIProviderError family (via APIClient); unreadable replies as AIResponseFormatError.
#
# 🔗 Dependencies:
# - app.shared.infrastructure.external_apis.api_client (aiohttp + tenacity client)
# - app.modules.plant_care.domain (advisor interface, advice and diagnosis models)
# - app.shared.config.settings (Groq configuration)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.dependencies (advisor provider)
# - app.main (client shutdown on application exit)

from typing import Any, Dict, List, Optional

from app.modules.plant_care.domain.models.advice import (
    SUGGESTION_COUNT,
    CareProfile,
    GrowingConditions,
    PlantSuggestions,
    SeasonalTips,
    WaterQualityAdvice,
    WaterSource,
)
from app.modules.plant_care.domain.models.diagnosis import DiseaseAnalysis, PlantContext
from app.modules.plant_care.domain.services.care_advisor import PlantCareAdvisor
from app.shared.config.settings import Settings
from app.shared.core.exceptions import AIResponseFormatError
from app.shared.infrastructure.external_apis.api_client import APIClient
from app.shared.utils.helpers import extract_json_object
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

PROVIDER_NAME = "Groq"

CARE_PROFILE_PROMPT = """You are an expert horticulturist specializing in Indian climate conditions.

Plant Details:
- Name: {name}
- Scientific Name: {scientific_name}
- Type: {plant_type}

User Conditions:
- Location: {location} (Climate: {climate_zone})
- Growing Location: {balcony_type}
- Available Sunlight: {sunlight_hours} hours/day
- Current Season: {season}

Generate a personalized care schedule in JSON format ONLY (no markdown, no other text):
{{
  "wateringFrequency": <number of days between watering>,
  "wateringNeeds": "<low/moderate/high>",
  "wateringInstructions": "<brief instruction>",
  "fertilizingFrequency": <days>,
  "fertilizingInstructions": "<brief instruction>",
  "pruningFrequency": <days>,
  "sunlightRequirement": "<hours per day>",
  "soilType": "<recommended soil type>",
  "idealTemperature": "<temperature range in Celsius>",
  "growthTimeDays": <estimated days to maturity or full growth>
}}

Consider Indian climate, monsoon season, and balcony/terrace constraints."""

SEASONAL_TIPS_PROMPT = """You are an expert in Indian gardening and agriculture.

Plant: {plant}
Location: {location}
Season: {season}

Provide specific care tips for this plant during {season} season in India. Focus on:
1. Watering adjustments
2. Common issues during this season
3. Protection needed (from rain/heat/cold)
4. Fertilization changes

Return ONLY valid JSON (no markdown):
{{
  "wateringTips": "<specific watering advice for this season>",
  "commonIssues": "<issues to watch for>",
  "protectionNeeded": "<how to protect the plant>",
  "fertilizationAdvice": "<fertilization tips>",
  "additionalCare": "<any other important care tips>"
}}"""

WATER_QUALITY_PROMPT = """You are a plant care expert.

Plant: {plant}
Water Source: {water_source}

Provide water quality advice for this plant. Return ONLY valid JSON (no markdown):
{{
  "suitability": "<excellent/good/suitable/not-recommended>",
  "recommendation": "<brief recommendation>",
  "preparation": "<any preparation needed before using this water>",
  "frequency": "<how often to use this water type>"
}}"""

PLANT_SUGGESTIONS_PROMPT = """You are an expert in Indian gardening.

User Conditions:
- Location: {location}
- Climate Zone: {climate_zone}
- Growing Space: {balcony_type}
- Sunlight: {sunlight_hours} hours/day
- Current Season: {season}

Available plants:
{candidates}

Recommend the top {count} plants from this list that would grow best in these conditions.
Return ONLY valid JSON (no markdown):
{{
  "suggestions": ["<plant name>", ...],
  "reasoning": "<why these plants suit the conditions>"
}}"""

DISEASE_SYSTEM_PROMPT = """You are an expert plant pathologist. Provide plant disease analysis in JSON format.

IMPORTANT: Always respond with ONLY valid JSON, no markdown code blocks, no extra text.

Response format:
{
  "isHealthy": boolean,
  "confidence": number (0-100),
  "disease": "string",
  "plantType": "string",
  "plantMismatch": boolean (true when the plant you see is not the species on record),
  "severity": "mild" | "moderate" | "severe" | null,
  "symptoms": ["string"],
  "causes": ["string"],
  "treatment": {
    "immediate": "string",
    "shortTerm": "string",
    "longTerm": "string",
    "organicOptions": ["string"],
    "chemicalOptions": ["string"]
  },
  "prevention": ["string"]
}"""


class GroqPlantCareAdvisor(PlantCareAdvisor):
    """
    Groq-backed plant care advisor.

    One shared APIClient is used for every call; close() releases its
    aiohttp session.
    """

    def __init__(
        self,
        client: APIClient,
        model: str = "llama-3.3-70b-versatile",
        vision_model: Optional[str] = None
    ):
        self.client = client
        self.model = model
        self.vision_model = vision_model or model

    @classmethod
    def from_settings(cls, settings: Settings) -> "GroqPlantCareAdvisor":
        config = settings.get_ai_api_config()
        client = APIClient(
            base_url=config["api_url"],
            api_key=config["api_key"],
            api_name=PROVIDER_NAME,
            timeout=config["timeout"],
            max_retries=config["max_retries"],
        )
        return cls(client, model=config["model"], vision_model=config["vision_model"])

    async def close(self):
        await self.client.close()

    async def generate_care_profile(
        self,
        plant_name: str,
        plant_type: str,
        conditions: GrowingConditions,
        season: str,
        scientific_name: Optional[str] = None
    ) -> CareProfile:
        prompt = CARE_PROFILE_PROMPT.format(
            name=plant_name,
            scientific_name=scientific_name or "N/A",
            plant_type=plant_type,
            location=conditions.location_label,
            climate_zone=conditions.climate_zone,
            balcony_type=conditions.balcony_type,
            sunlight_hours=conditions.sunlight_hours,
            season=season,
        )
        payload = await self._chat_json([{"role": "user", "content": prompt}], temperature=0.5)
        return CareProfile.from_ai_payload(payload)

    async def generate_seasonal_tips(self, plant_name: str, location: str, season: str) -> SeasonalTips:
        prompt = SEASONAL_TIPS_PROMPT.format(plant=plant_name, location=location, season=season)
        payload = await self._chat_json([{"role": "user", "content": prompt}], temperature=0.5)
        return SeasonalTips.from_ai_payload(payload)

    async def generate_water_quality_advice(self, plant_name: str, water_source: WaterSource) -> WaterQualityAdvice:
        prompt = WATER_QUALITY_PROMPT.format(plant=plant_name, water_source=WaterSource(water_source).value)
        payload = await self._chat_json([{"role": "user", "content": prompt}], temperature=0.5, max_tokens=512)
        return WaterQualityAdvice.from_ai_payload(payload)

    async def generate_plant_suggestions(
        self,
        conditions: GrowingConditions,
        season: str,
        candidates: List[str]
    ) -> PlantSuggestions:
        prompt = PLANT_SUGGESTIONS_PROMPT.format(
            location=conditions.location_label,
            climate_zone=conditions.climate_zone,
            balcony_type=conditions.balcony_type,
            sunlight_hours=conditions.sunlight_hours,
            season=season,
            candidates="\n".join(f"{index}. {name}" for index, name in enumerate(candidates, start=1)),
            count=SUGGESTION_COUNT,
        )
        payload = await self._chat_json([{"role": "user", "content": prompt}], temperature=0.7)
        suggestions = PlantSuggestions.from_ai_payload(payload)
        if not suggestions.suggestions:
            raise AIResponseFormatError(provider=PROVIDER_NAME, details={"reason": "no plant suggestions"})
        return suggestions

    async def analyze_disease(
        self,
        image_url: Optional[str],
        description: Optional[str],
        context: Optional[PlantContext]
    ) -> DiseaseAnalysis:
        text = self._disease_prompt(image_url, description, context)
        if image_url:
            user_content: Any = [
                {"type": "text", "text": text},
                {"type": "image_url", "image_url": {"url": image_url}},
            ]
            model = self.vision_model
        else:
            user_content = text
            model = self.model

        payload = await self._chat_json(
            [
                {"role": "system", "content": DISEASE_SYSTEM_PROMPT},
                {"role": "user", "content": user_content},
            ],
            temperature=0.3,
            model=model,
        )
        return DiseaseAnalysis.from_ai_payload(payload, context)

    @staticmethod
    def _disease_prompt(
        image_url: Optional[str],
        description: Optional[str],
        context: Optional[PlantContext]
    ) -> str:
        lines = []
        if image_url:
            lines.append(f"Analyze this plant image for potential diseases: {image_url}")
        if description:
            lines.append(f'Symptoms reported by the gardener: "{description.strip()}"')
        if context is not None:
            context_lines = context.prompt_lines()
            if context_lines:
                lines.append("")
                lines.append("Known plant context:")
                lines.extend(f"- {line}" for line in context_lines)
        lines.append("")
        lines.append(
            "Provide a detailed plant health analysis. If the plant appears healthy, indicate that. "
            "If there are signs of disease, identify the most likely condition and provide treatment "
            "recommendations."
        )
        lines.append("")
        lines.append("Respond with JSON only.")
        return "\n".join(lines)

    async def _chat_json(
        self,
        messages: List[Dict[str, Any]],
        temperature: float,
        max_tokens: int = 1024,
        model: Optional[str] = None
    ) -> Dict[str, Any]:
        content = await self._chat(messages, temperature, max_tokens, model or self.model)
        try:
            return extract_json_object(content)
        except ValueError as e:
            logger.warning(
                "AI reply did not contain a JSON object",
                extra={"provider": PROVIDER_NAME, "reply_preview": content[:200]}
            )
            raise AIResponseFormatError(provider=PROVIDER_NAME, details={"reason": str(e)}) from e

    async def _chat(self, messages: List[Dict[str, Any]], temperature: float, max_tokens: int, model: str) -> str:
        response = await self.client.post(
            "/chat/completions",
            {
                "model": model,
                "messages": messages,
                "temperature": temperature,
                "max_tokens": max_tokens,
            },
        )
        try:
            content = response["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise AIResponseFormatError(
                provider=PROVIDER_NAME,
                details={"reason": "missing choices[0].message.content"}
            ) from e
        if not isinstance(content, str) or not content.strip():
            raise AIResponseFormatError(provider=PROVIDER_NAME, details={"reason": "empty reply"})
        return content
