# 📄 File: app/modules/plant_care/domain/services/diagnosis_accuracy.py
# 🧭 Purpose (Layman Explanation):
# Tells the user how much to trust an AI disease diagnosis. The AI's own confidence is not enough,
# so we also reward how much we actually knew about the plant and punish species mix-ups.
# 🧪 Purpose (Technical Summary):
# Deterministic accuracy heuristic: context-presence weights on a flat baseline (capped at 100),
# blended 45/55 with AI confidence, capped on species mismatch and clamped to [15, 100].
# Scores are banded into display labels. All constants come from AccuracyWeights.
# 🔗 Dependencies:
# dataclasses, typing, diagnosis domain models, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# AnalyzeDiseaseCommandHandler, disease API router (accuracy badge data)

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from app.modules.plant_care.domain.models.diagnosis import AccuracyAssessment, PlantContext
from app.shared.config.settings import Settings
from app.shared.utils.helpers import clamp, round_half_up, safe_float

# (minimum score, label), checked top-down
ACCURACY_BANDS: Tuple[Tuple[int, str], ...] = (
    (80, "High Accuracy"),
    (60, "Good Accuracy"),
    (40, "Moderate Accuracy"),
    (0, "Low Accuracy"),
)

# Context fields in weight order
CONTEXT_FIELDS = ("species", "category", "soil_type", "location", "sunlight", "city", "climate_zone")


@dataclass(frozen=True)
class AccuracyWeights:
    baseline: int = 20
    species: int = 20
    category: int = 10
    soil_type: int = 15
    location: int = 10
    sunlight: int = 10
    city: int = 10
    climate_zone: int = 5
    context_ceiling: int = 100
    context_blend: float = 0.45
    confidence_blend: float = 0.55
    default_confidence: float = 50
    mismatch_cap: int = 55
    floor: int = 15
    ceiling: int = 100

    @classmethod
    def from_settings(cls, settings: Settings) -> "AccuracyWeights":
        return cls(**settings.get_accuracy_weights())


class DiagnosisAccuracyScorer:
    """
    Converts (context presence, AI confidence, mismatch flag) into a trust score.

    Never raises: missing context scores as the baseline and a missing or
    unreadable confidence counts as ``default_confidence``.
    """

    def __init__(self, weights: Optional[AccuracyWeights] = None):
        self.weights = weights or AccuracyWeights()

    @classmethod
    def from_settings(cls, settings: Settings) -> "DiagnosisAccuracyScorer":
        return cls(AccuracyWeights.from_settings(settings))

    def context_score(self, context: Union[PlantContext, Mapping[str, Any], None]) -> int:
        context = _as_context(context)
        score = self.weights.baseline
        if context is not None:
            for name in CONTEXT_FIELDS:
                if context.has(name):
                    score += getattr(self.weights, name)
        return min(score, self.weights.context_ceiling)

    def score(
        self,
        context: Union[PlantContext, Mapping[str, Any], None] = None,
        ai_confidence: Optional[float] = None,
        plant_mismatch: bool = False
    ) -> int:
        w = self.weights
        confidence = safe_float(ai_confidence, default=None)
        if confidence is None:
            confidence = w.default_confidence

        blended = round_half_up(self.context_score(context) * w.context_blend + confidence * w.confidence_blend)
        if plant_mismatch:
            blended = min(blended, w.mismatch_cap)
        return int(clamp(blended, w.floor, w.ceiling))

    def assess(
        self,
        context: Union[PlantContext, Mapping[str, Any], None] = None,
        ai_confidence: Optional[float] = None,
        plant_mismatch: bool = False
    ) -> AccuracyAssessment:
        score = self.score(context, ai_confidence, plant_mismatch)
        return AccuracyAssessment(score=score, label=accuracy_label(score))


def accuracy_label(score: int) -> str:
    for minimum, label in ACCURACY_BANDS:
        if score >= minimum:
            return label
    return ACCURACY_BANDS[-1][1]


def calculate_accuracy_score(
    context: Union[PlantContext, Mapping[str, Any], None] = None,
    ai_confidence: Optional[float] = None,
    plant_mismatch: bool = False
) -> int:
    """Score with the default weights."""
    return DiagnosisAccuracyScorer().score(context, ai_confidence, plant_mismatch)


def _as_context(context: Union[PlantContext, Mapping[str, Any], None]) -> Optional[PlantContext]:
    if context is None or isinstance(context, PlantContext):
        return context
    return PlantContext.model_validate(dict(context))
