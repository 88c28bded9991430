# 📄 File: app/modules/plant_care/domain/models/diagnosis.py
# 🧭 Purpose (Layman Explanation):
# Describes a plant health check: what we told the AI about the plant, what the AI thinks is wrong,
# how to treat it, and how much the user should trust the answer.
# 🧪 Purpose (Technical Summary):
# Value objects for disease diagnosis: PlantContext (context-presence inputs for accuracy scoring),
# DiseaseAnalysis (normalised AI reply with defaults), DiseaseTreatment and AccuracyAssessment.
# 🔗 Dependencies:
# pydantic, typing, enum, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# diagnosis_accuracy.py, plant_health.py, groq_advisor.py, AnalyzeDiseaseCommandHandler

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.shared.utils.helpers import clamp, is_empty_or_whitespace, safe_float

UNKNOWN_DISEASE = "Unknown condition"
UNKNOWN_PLANT = "Unknown plant"
DEFAULT_CONFIDENCE = 70.0


class DiseaseSeverity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class PlantContext(BaseModel):
    """
    What the system knew about the plant when it asked for a diagnosis.

    Only presence matters for accuracy scoring; values are also passed to
    the AI prompt. Accepts camelCase keys (``soilType``, ``climateZone``).
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    species: Optional[str] = None
    category: Optional[str] = None
    soil_type: Optional[str] = Field(default=None, alias="soilType")
    location: Optional[str] = None
    sunlight: Optional[Union[float, str]] = None
    city: Optional[str] = None
    climate_zone: Optional[str] = Field(default=None, alias="climateZone")

    def has(self, field_name: str) -> bool:
        """True when the field carries a usable value (blank strings do not count)."""
        return not is_empty_or_whitespace(getattr(self, field_name))

    def prompt_lines(self) -> List[str]:
        labels = {
            "species": "Species on record",
            "category": "Category",
            "soil_type": "Soil type",
            "location": "Location",
            "sunlight": "Sunlight",
            "city": "City",
            "climate_zone": "Climate zone",
        }
        return [f"{label}: {getattr(self, name)}" for name, label in labels.items() if self.has(name)]


class DiseaseTreatment(BaseModel):
    immediate: str = "Isolate plant and assess damage"
    short_term: str = "Monitor closely for changes"
    long_term: str = "Maintain proper care routine"
    organic_options: List[str] = Field(default_factory=lambda: ["Neem oil spray", "Remove affected parts"])
    chemical_options: List[str] = Field(default_factory=lambda: ["Consult local garden center"])


class DiseaseAnalysis(BaseModel):
    """Normalised AI diagnosis"""
    is_healthy: bool = False
    confidence: float = Field(default=DEFAULT_CONFIDENCE, ge=0, le=100)
    # As reported by the model; None when the reply left it out
    ai_confidence: Optional[float] = Field(default=None, ge=0, le=100)
    disease: str = UNKNOWN_DISEASE
    plant_type: str = UNKNOWN_PLANT
    severity: Optional[DiseaseSeverity] = None
    symptoms: List[str] = Field(default_factory=lambda: ["Visual inspection recommended"])
    causes: List[str] = Field(default_factory=lambda: ["Multiple factors possible"])
    treatment: DiseaseTreatment = Field(default_factory=DiseaseTreatment)
    prevention: List[str] = Field(
        default_factory=lambda: ["Regular monitoring", "Proper watering", "Good air circulation"]
    )
    plant_mismatch: bool = False

    @classmethod
    def from_ai_payload(
        cls,
        payload: Dict[str, Any],
        context: Optional[PlantContext] = None
    ) -> "DiseaseAnalysis":
        """
        Build an analysis from a raw AI JSON object, filling every gap with a default.

        Keys are read in camelCase as the model is prompted to answer.
        Severity is forced to None for healthy plants and to "moderate"
        when an unhealthy verdict omits or garbles it.
        """
        is_healthy = payload.get("isHealthy") is True

        ai_confidence = safe_float(payload.get("confidence"), default=None)
        if ai_confidence is not None:
            ai_confidence = clamp(ai_confidence, 0, 100)
        confidence = DEFAULT_CONFIDENCE if ai_confidence is None else ai_confidence

        severity: Optional[DiseaseSeverity] = None
        if not is_healthy:
            raw_severity = str(payload.get("severity") or "").strip().lower()
            try:
                severity = DiseaseSeverity(raw_severity)
            except ValueError:
                severity = DiseaseSeverity.MODERATE

        raw_treatment = payload.get("treatment")
        raw_treatment = raw_treatment if isinstance(raw_treatment, dict) else {}
        defaults = DiseaseTreatment()
        treatment = DiseaseTreatment(
            immediate=_text(raw_treatment.get("immediate"), defaults.immediate),
            short_term=_text(raw_treatment.get("shortTerm"), defaults.short_term),
            long_term=_text(raw_treatment.get("longTerm"), defaults.long_term),
            organic_options=_text_list(raw_treatment.get("organicOptions"), defaults.organic_options),
            chemical_options=_text_list(raw_treatment.get("chemicalOptions"), defaults.chemical_options),
        )

        base = cls()
        plant_type = _text(payload.get("plantType"), UNKNOWN_PLANT)
        return cls(
            is_healthy=is_healthy,
            confidence=confidence,
            ai_confidence=ai_confidence,
            disease=_text(payload.get("disease"), UNKNOWN_DISEASE),
            plant_type=plant_type,
            severity=severity,
            symptoms=_text_list(payload.get("symptoms"), base.symptoms),
            causes=_text_list(payload.get("causes"), base.causes),
            treatment=treatment,
            prevention=_text_list(payload.get("prevention"), base.prevention),
            plant_mismatch=_detect_mismatch(payload.get("plantMismatch"), plant_type, context),
        )


class AccuracyAssessment(BaseModel):
    """Display-facing trust score for a diagnosis"""
    score: int = Field(..., ge=15, le=100)
    label: str


def _text(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _text_list(value: Any, default: List[str]) -> List[str]:
    if isinstance(value, list):
        items = [str(item).strip() for item in value if not is_empty_or_whitespace(item)]
        if items:
            return items
    return list(default)


def _detect_mismatch(flag: Any, plant_type: str, context: Optional[PlantContext]) -> bool:
    """
    Prefer the model's own mismatch flag; otherwise compare the detected
    plant with the species on record (loose, case-insensitive containment).
    """
    if isinstance(flag, bool):
        return flag
    if context is None or not context.has("species") or plant_type == UNKNOWN_PLANT:
        return False

    recorded = context.species.strip().lower()
    detected = plant_type.strip().lower()
    return recorded not in detected and detected not in recorded
