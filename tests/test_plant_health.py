import pytest

from app.modules.plant_care.domain.models.diagnosis import DiseaseAnalysis, DiseaseSeverity
from app.modules.plant_care.domain.models.plant import Plant, PlantStatus
from app.modules.plant_care.domain.services.plant_health import (
    apply_diagnosis,
    apply_health_score,
    clamp_health_score,
    status_from_health_score,
)
from app.modules.plant_care.domain.services.season import Season, season_for_month


def make_plant(**kwargs) -> Plant:
    return Plant(user_id="user-1", nickname="Rosy", species="Rose", **kwargs)


class TestHealthStatus:
    @pytest.mark.parametrize("score,status", [
        (100, PlantStatus.HEALTHY),
        (80, PlantStatus.HEALTHY),
        (79, PlantStatus.NEEDS_ATTENTION),
        (50, PlantStatus.NEEDS_ATTENTION),
        (49, PlantStatus.DISEASED),
        (0, PlantStatus.DISEASED),
    ])
    def test_thresholds(self, score, status):
        assert status_from_health_score(score) == status

    @pytest.mark.parametrize("raw,clamped", [(-10, 0), (120, 100), (79.5, 80), (42.4, 42)])
    def test_clamp(self, raw, clamped):
        assert clamp_health_score(raw) == clamped

    def test_apply_health_score_overrides_dormant(self):
        plant = make_plant(status=PlantStatus.DORMANT)
        apply_health_score(plant, 30)
        assert plant.health_score == 30
        assert plant.status == PlantStatus.DISEASED

    def test_zero_score_is_applied(self):
        plant = make_plant()
        apply_health_score(plant, 0)
        assert plant.health_score == 0
        assert plant.status == PlantStatus.DISEASED


class TestApplyDiagnosis:
    def test_healthy_verdict(self):
        plant = make_plant(health_score=40, status=PlantStatus.DISEASED)
        apply_diagnosis(plant, DiseaseAnalysis(is_healthy=True, confidence=85))
        assert plant.status == PlantStatus.HEALTHY
        assert plant.health_score == 85

    def test_healthy_without_confidence_uses_default(self):
        plant = make_plant()
        apply_diagnosis(plant, DiseaseAnalysis(is_healthy=True, confidence=0))
        assert plant.health_score == 90

    def test_severe_disease(self):
        plant = make_plant()
        apply_diagnosis(plant, DiseaseAnalysis(confidence=70, severity=DiseaseSeverity.SEVERE))
        assert plant.status == PlantStatus.DISEASED
        assert plant.health_score == 30

    def test_mild_disease_needs_attention(self):
        plant = make_plant()
        apply_diagnosis(plant, DiseaseAnalysis(confidence=40, severity=DiseaseSeverity.MILD))
        assert plant.status == PlantStatus.NEEDS_ATTENTION
        assert plant.health_score == 60

    def test_confident_diagnosis_keeps_minimum_score(self):
        plant = make_plant()
        apply_diagnosis(plant, DiseaseAnalysis(confidence=95, severity=DiseaseSeverity.MODERATE))
        assert plant.health_score == 20


class TestSeason:
    @pytest.mark.parametrize("month,season", [
        (1, Season.WINTER),
        (2, Season.WINTER),
        (3, Season.SUMMER),
        (5, Season.SUMMER),
        (6, Season.MONSOON),
        (9, Season.MONSOON),
        (10, Season.AUTUMN),
        (11, Season.AUTUMN),
        (12, Season.WINTER),
    ])
    def test_months(self, month, season):
        assert season_for_month(month) == season

    @pytest.mark.parametrize("month", [0, 13])
    def test_out_of_range(self, month):
        with pytest.raises(ValueError):
            season_for_month(month)
