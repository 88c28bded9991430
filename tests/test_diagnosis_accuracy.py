import pytest

from app.modules.plant_care.domain.models.diagnosis import PlantContext
from app.modules.plant_care.domain.services.diagnosis_accuracy import (
    AccuracyWeights,
    CONTEXT_FIELDS,
    DiagnosisAccuracyScorer,
    accuracy_label,
    calculate_accuracy_score,
)

FULL_CONTEXT = PlantContext(
    species="Tomato",
    category="vegetable",
    soil_type="loamy",
    location="balcony",
    sunlight=6,
    city="Pune",
    climate_zone="tropical",
)


@pytest.fixture
def scorer() -> DiagnosisAccuracyScorer:
    return DiagnosisAccuracyScorer()


class TestContextScore:
    def test_empty_context_is_baseline(self, scorer):
        assert scorer.context_score(None) == 20
        assert scorer.context_score(PlantContext()) == 20

    def test_full_context_caps_at_100(self, scorer):
        assert scorer.context_score(FULL_CONTEXT) == 100

    def test_blank_values_do_not_count(self, scorer):
        assert scorer.context_score(PlantContext(species="  ", city="")) == 20

    def test_individual_weights(self, scorer):
        assert scorer.context_score(PlantContext(species="Rose")) == 40
        assert scorer.context_score(PlantContext(soil_type="clay", climate_zone="arid")) == 40

    def test_mapping_with_camel_case_keys(self, scorer):
        context = {"soilType": "sandy", "climateZone": "dry", "city": "Jaipur"}
        assert scorer.context_score(context) == 20 + 15 + 5 + 10


class TestScore:
    def test_full_context_high_confidence(self, scorer):
        assert scorer.score(FULL_CONTEXT, ai_confidence=90) == 95

    def test_mismatch_caps_score(self, scorer):
        assert scorer.score(FULL_CONTEXT, ai_confidence=90, plant_mismatch=True) == 55

    def test_no_context(self, scorer):
        assert scorer.score(None, ai_confidence=80) == 53

    def test_missing_confidence_uses_default(self, scorer):
        # 20 * 0.45 + 50 * 0.55 = 36.5, rounded half up
        assert scorer.score() == 37

    def test_unreadable_confidence_uses_default(self, scorer):
        assert scorer.score(None, ai_confidence="not a number") == 37

    @pytest.mark.parametrize("confidence", [float("inf"), float("-inf"), "inf", float("nan")])
    def test_non_finite_confidence_uses_default(self, scorer, confidence):
        assert scorer.score(None, ai_confidence=confidence) == 37
        assert scorer.score(FULL_CONTEXT, ai_confidence=confidence, plant_mismatch=True) == 55

    def test_floor(self, scorer):
        assert scorer.score(None, ai_confidence=0) == 15

    def test_ceiling(self, scorer):
        assert scorer.score(FULL_CONTEXT, ai_confidence=150) == 100

    def test_mismatch_does_not_raise_low_scores(self, scorer):
        assert scorer.score(None, ai_confidence=10, plant_mismatch=True) == 15

    def test_module_level_helper_matches_default_weights(self):
        assert calculate_accuracy_score(FULL_CONTEXT, 90) == 95

    def test_custom_weights(self):
        scorer = DiagnosisAccuracyScorer(AccuracyWeights(mismatch_cap=40))
        assert scorer.score(FULL_CONTEXT, 90, plant_mismatch=True) == 40


class TestLabels:
    @pytest.mark.parametrize("score,label", [
        (100, "High Accuracy"),
        (80, "High Accuracy"),
        (79, "Good Accuracy"),
        (60, "Good Accuracy"),
        (59, "Moderate Accuracy"),
        (40, "Moderate Accuracy"),
        (39, "Low Accuracy"),
        (15, "Low Accuracy"),
    ])
    def test_bands(self, score, label):
        assert accuracy_label(score) == label

    def test_assess_returns_score_and_label(self, scorer):
        assessment = scorer.assess(FULL_CONTEXT, 90)
        assert assessment.score == 95
        assert assessment.label == "High Accuracy"


class TestMonotonicity:
    @pytest.mark.parametrize("plant_mismatch", [False, True])
    @pytest.mark.parametrize("confidence", [None, 0, 50, 90, 100])
    def test_more_context_never_lowers_the_score(self, scorer, confidence, plant_mismatch):
        known = {}
        previous = scorer.score(PlantContext(), confidence, plant_mismatch)
        for name in CONTEXT_FIELDS:
            known[name] = getattr(FULL_CONTEXT, name)
            current = scorer.score(PlantContext(**known), confidence, plant_mismatch)
            assert current >= previous, name
            previous = current
