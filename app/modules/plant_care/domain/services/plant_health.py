# 📄 File: app/modules/plant_care/domain/services/plant_health.py
# 🧭 Purpose (Layman Explanation):
# Turns a health score (0-100) into a simple status like "healthy" or "needs attention",
# and updates a plant after the user records a measurement or runs a disease check.
# 🧪 Purpose (Technical Summary):
# Health-score clamping, score-to-status thresholds and the two plant mutations that depend on
# them: applying a measured score and applying an AI diagnosis. Dormant is never auto-assigned.
# 🔗 Dependencies:
# plant/diagnosis domain models, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# LogCareActivityCommandHandler, UpdatePlantCommandHandler, AnalyzeDiseaseCommandHandler

from typing import Union

from app.modules.plant_care.domain.models.diagnosis import DiseaseAnalysis, DiseaseSeverity
from app.modules.plant_care.domain.models.plant import Plant, PlantStatus
from app.shared.utils.helpers import clamp, round_half_up

HEALTHY_THRESHOLD = 80
NEEDS_ATTENTION_THRESHOLD = 50

# Diagnosis-driven score bounds
DIAGNOSED_MIN_SCORE = 20
UNHEALTHY_DEFAULT_CONFIDENCE = 50
HEALTHY_DEFAULT_CONFIDENCE = 90


def clamp_health_score(score: Union[int, float]) -> int:
    return int(clamp(round_half_up(score), 0, 100))


def status_from_health_score(score: Union[int, float]) -> PlantStatus:
    score = clamp_health_score(score)
    if score >= HEALTHY_THRESHOLD:
        return PlantStatus.HEALTHY
    if score >= NEEDS_ATTENTION_THRESHOLD:
        return PlantStatus.NEEDS_ATTENTION
    return PlantStatus.DISEASED


def apply_health_score(plant: Plant, score: Union[int, float]) -> Plant:
    """Store a clamped score and the status it implies (overrides dormant)."""
    plant.health_score = clamp_health_score(score)
    plant.status = status_from_health_score(plant.health_score)
    return plant


def apply_diagnosis(plant: Plant, analysis: DiseaseAnalysis) -> Plant:
    """
    Reflect a disease check on the plant.

    A confidence of 0 is treated like a missing one, matching how the
    diagnosis flow has always weighted an unsure model.
    """
    if analysis.is_healthy:
        plant.status = PlantStatus.HEALTHY
        plant.health_score = clamp_health_score(min(100, analysis.confidence or HEALTHY_DEFAULT_CONFIDENCE))
    else:
        plant.status = (
            PlantStatus.DISEASED
            if analysis.severity == DiseaseSeverity.SEVERE
            else PlantStatus.NEEDS_ATTENTION
        )
        plant.health_score = clamp_health_score(
            max(DIAGNOSED_MIN_SCORE, 100 - (analysis.confidence or UNHEALTHY_DEFAULT_CONFIDENCE))
        )
    return plant
