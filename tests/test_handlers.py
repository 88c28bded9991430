from datetime import datetime, timedelta, timezone

import pytest

from app.modules.plant_care.application.commands.analyze_disease import AnalyzeDiseaseCommand
from app.modules.plant_care.application.commands.create_plant import CreatePlantCommand
from app.modules.plant_care.application.commands.delete_plant import DeletePlantCommand
from app.modules.plant_care.application.commands.log_care_activity import (
    DeleteCareLogCommand,
    LogCareActivityCommand,
)
from app.modules.plant_care.application.commands.update_plant import UpdatePlantCommand
from app.modules.plant_care.application.handlers.command_handlers import (
    AnalyzeDiseaseCommandHandler,
    CreatePlantCommandHandler,
    DeleteCareLogCommandHandler,
    DeletePlantCommandHandler,
    LogCareActivityCommandHandler,
    UpdatePlantCommandHandler,
)
from app.modules.plant_care.application.handlers.query_handlers import (
    GetPlantSpeciesQueryHandler,
    PlantsNeedingCareQueryHandler,
    PlantSuggestionsQueryHandler,
    SearchPlantSpeciesQueryHandler,
    SeasonalTipsQueryHandler,
    WaterQualityQueryHandler,
)
from app.modules.plant_care.application.queries.get_advice import SeasonalTipsQuery, WaterQualityQuery
from app.modules.plant_care.application.queries.get_plant_data import (
    GetPlantSpeciesQuery,
    PlantSuggestionsQuery,
    SearchPlantSpeciesQuery,
)
from app.modules.plant_care.application.queries.get_plants import PlantsNeedingCareQuery
from app.modules.plant_care.domain.models.advice import FALLBACK_SUGGESTION_REASONING, GrowingConditions, WaterSource
from app.modules.plant_care.domain.models.care_log import ActivityType, CareMeasurements
from app.modules.plant_care.domain.models.diagnosis import DEFAULT_CONFIDENCE, PlantContext
from app.modules.plant_care.domain.models.plant import PlantCategory, PlantLocation, PlantStatus
from app.modules.plant_care.domain.services.care_schedule_engine import CareScheduleEngine
from app.modules.plant_care.domain.services.diagnosis_accuracy import DiagnosisAccuracyScorer
from app.shared.core.exceptions import (
    AIRateLimitedError,
    AIResponseFormatError,
    AuthorizationError,
    CareLogNotFoundError,
    ExternalServiceError,
    NotFoundError,
    PlantNotFoundError,
)

NOW = datetime(2024, 7, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def engine() -> CareScheduleEngine:
    return CareScheduleEngine()


@pytest.fixture
def create_handler(plant_repository, advisor, engine, clock):
    return CreatePlantCommandHandler(plant_repository, advisor, engine, clock=clock)


async def create_plant(create_handler, user_id="user-1", **kwargs):
    command = CreatePlantCommand(user_id=user_id, nickname="Tommy", species="Tomato", **kwargs)
    return await create_handler.handle(command)


class TestCreatePlant:
    async def test_schedule_seeded_from_now(self, create_handler, plant_repository):
        plant = await create_plant(create_handler, category=PlantCategory.VEGETABLE)

        assert plant.care_schedule.last_watered == NOW
        assert plant.care_schedule.watering_frequency == 2
        assert plant.care_schedule.next_watering_due == NOW + timedelta(days=2)
        assert plant.care_schedule.next_fertilizing_due is None
        assert plant.plant_info.estimated_harvest_date == NOW + timedelta(days=90)
        assert plant.status == PlantStatus.HEALTHY
        assert plant.health_score == 100
        assert plant.plant_id in plant_repository.plants

    async def test_watering_frequency_follows_needs(self, create_handler, advisor):
        advisor.care_profile_payload = {"wateringNeeds": "low", "growthTimeDays": 0}
        plant = await create_plant(create_handler)
        assert plant.care_schedule.watering_frequency == 7
        assert plant.plant_info.estimated_harvest_date is None

    async def test_advisor_gets_season_from_clock(self, create_handler, advisor):
        await create_plant(create_handler)
        assert advisor.calls[0]["season"] == "monsoon"

    async def test_provider_failure_uses_defaults(self, create_handler, advisor):
        advisor.error = AIRateLimitedError(provider="groq")
        plant = await create_plant(create_handler)
        assert plant.plant_info.watering_needs == "moderate"
        assert plant.care_schedule.watering_frequency == 2

    async def test_location_and_sunlight_default_from_conditions(self, create_handler):
        conditions = GrowingConditions(balcony_type="terrace", sunlight_hours=4)
        plant = await create_plant(create_handler, conditions=conditions)
        assert plant.location == PlantLocation.TERRACE
        assert plant.sunlight_received == 4

    async def test_planted_date_drives_harvest(self, create_handler):
        planted = datetime(2024, 1, 1, tzinfo=timezone.utc)
        plant = await create_plant(create_handler, planted_date=planted)
        assert plant.plant_info.estimated_harvest_date == datetime(2024, 3, 31, tzinfo=timezone.utc)

    async def test_blank_species_rejected(self):
        with pytest.raises(ValueError):
            CreatePlantCommand(user_id="user-1", nickname="Tommy", species="   ")


class TestUpdatePlant:
    async def test_schedule_change_recomputes_due_date(self, create_handler, plant_repository, engine, clock):
        plant = await create_plant(create_handler)
        handler = UpdatePlantCommandHandler(plant_repository, engine, clock=clock)

        updated = await handler.handle(UpdatePlantCommand(
            plant_id=plant.plant_id,
            user_id="user-1",
            care_schedule={"watering_frequency": 5},
        ))
        assert updated.care_schedule.next_watering_due == NOW + timedelta(days=5)

    async def test_health_score_drives_status(self, create_handler, plant_repository, engine, clock):
        plant = await create_plant(create_handler)
        handler = UpdatePlantCommandHandler(plant_repository, engine, clock=clock)

        updated = await handler.handle(UpdatePlantCommand(
            plant_id=plant.plant_id, user_id="user-1", health_score=150, status=PlantStatus.DISEASED
        ))
        assert updated.health_score == 100
        assert updated.status == PlantStatus.HEALTHY

    async def test_dormant_is_kept(self, create_handler, plant_repository, engine, clock):
        plant = await create_plant(create_handler)
        handler = UpdatePlantCommandHandler(plant_repository, engine, clock=clock)

        updated = await handler.handle(UpdatePlantCommand(
            plant_id=plant.plant_id, user_id="user-1", health_score=30, status=PlantStatus.DORMANT
        ))
        assert updated.health_score == 30
        assert updated.status == PlantStatus.DORMANT

    async def test_other_users_plant(self, create_handler, plant_repository, engine, clock):
        plant = await create_plant(create_handler)
        handler = UpdatePlantCommandHandler(plant_repository, engine, clock=clock)
        with pytest.raises(AuthorizationError):
            await handler.handle(UpdatePlantCommand(plant_id=plant.plant_id, user_id="user-2", notes="mine"))

    async def test_missing_plant(self, plant_repository, engine, clock):
        handler = UpdatePlantCommandHandler(plant_repository, engine, clock=clock)
        with pytest.raises(PlantNotFoundError):
            await handler.handle(UpdatePlantCommand(plant_id="nope", user_id="user-1", notes="x"))


class TestDeletePlant:
    async def test_soft_delete(self, create_handler, plant_repository, clock):
        plant = await create_plant(create_handler)
        deleted = await DeletePlantCommandHandler(plant_repository, clock=clock).handle(
            DeletePlantCommand(plant_id=plant.plant_id, user_id="user-1")
        )
        assert deleted.is_active is False
        assert plant_repository.plants[plant.plant_id].is_active is False


class TestLogCareActivity:
    @pytest.fixture
    def log_handler(self, plant_repository, care_log_repository, engine, clock):
        return LogCareActivityCommandHandler(plant_repository, care_log_repository, engine, clock=clock)

    async def test_watering_advances_schedule(self, create_handler, log_handler, clock):
        plant = await create_plant(create_handler)
        watered_at = NOW + timedelta(days=1)

        result = await log_handler.handle(LogCareActivityCommand(
            user_id="user-1",
            plant_id=plant.plant_id,
            activity_type=ActivityType.WATERING,
            activity_date=watered_at,
        ))
        assert result.plant.care_schedule.last_watered == watered_at
        assert result.plant.care_schedule.next_watering_due == watered_at + timedelta(days=2)
        assert result.care_log.activity_type == ActivityType.WATERING

    async def test_activity_date_defaults_to_now(self, create_handler, log_handler):
        plant = await create_plant(create_handler)
        result = await log_handler.handle(LogCareActivityCommand(
            user_id="user-1", plant_id=plant.plant_id, activity_type=ActivityType.FERTILIZING
        ))
        assert result.care_log.activity_date == NOW
        assert result.plant.care_schedule.next_fertilizing_due == NOW + timedelta(days=30)

    async def test_measured_health_score_is_applied(self, create_handler, log_handler):
        plant = await create_plant(create_handler)
        result = await log_handler.handle(LogCareActivityCommand(
            user_id="user-1",
            plant_id=plant.plant_id,
            activity_type=ActivityType.INSPECTION,
            measurements=CareMeasurements(height=12, health_score=0),
        ))
        assert result.plant.health_score == 0
        assert result.plant.status == PlantStatus.DISEASED

    async def test_other_users_plant(self, create_handler, log_handler, care_log_repository):
        plant = await create_plant(create_handler)
        with pytest.raises(AuthorizationError):
            await log_handler.handle(LogCareActivityCommand(
                user_id="user-2", plant_id=plant.plant_id, activity_type=ActivityType.WATERING
            ))
        assert care_log_repository.care_logs == {}

    async def test_delete_care_log(self, create_handler, log_handler, care_log_repository):
        plant = await create_plant(create_handler)
        result = await log_handler.handle(LogCareActivityCommand(
            user_id="user-1", plant_id=plant.plant_id, activity_type=ActivityType.PRUNING
        ))
        handler = DeleteCareLogCommandHandler(care_log_repository)

        with pytest.raises(AuthorizationError):
            await handler.handle(DeleteCareLogCommand(care_log_id=result.care_log.care_log_id, user_id="user-2"))

        assert await handler.handle(
            DeleteCareLogCommand(care_log_id=result.care_log.care_log_id, user_id="user-1")
        ) is True

        with pytest.raises(CareLogNotFoundError):
            await handler.handle(DeleteCareLogCommand(care_log_id=result.care_log.care_log_id, user_id="user-1"))


class TestPlantsNeedingCare:
    async def test_due_today(self, create_handler, plant_repository, engine, clock):
        await create_plant(create_handler)
        handler = PlantsNeedingCareQueryHandler(plant_repository, engine, clock=clock)

        assert await handler.handle(PlantsNeedingCareQuery(user_id="user-1")) == []

        clock.set(NOW + timedelta(days=2))
        due = await handler.handle(PlantsNeedingCareQuery(user_id="user-1"))
        assert [plant.nickname for plant in due] == ["Tommy"]
        assert await handler.handle(PlantsNeedingCareQuery(user_id="user-2")) == []


class TestAnalyzeDisease:
    @pytest.fixture
    def disease_handler(self, plant_repository, advisor, clock):
        return AnalyzeDiseaseCommandHandler(plant_repository, advisor, DiagnosisAccuracyScorer(), clock=clock)

    async def test_applies_diagnosis_to_owned_plant(self, create_handler, disease_handler, advisor):
        plant = await create_plant(create_handler, category=PlantCategory.VEGETABLE)
        advisor.disease_payload = {
            "isHealthy": False, "confidence": 80, "disease": "Leaf spot", "plantType": "Tomato", "severity": "severe"
        }

        result = await disease_handler.handle(AnalyzeDiseaseCommand(
            user_id="user-1",
            plant_id=plant.plant_id,
            image_url="https://example.com/leaf.jpg",
            user_city="Pune",
            user_climate_zone="tropical",
        ))

        assert result.plant_updated is True
        assert result.plant.status == PlantStatus.DISEASED
        assert result.plant.health_score == 20
        assert result.plant.images[-1].note == "Disease check: Leaf spot"
        assert result.context.species == "Tomato"
        assert result.context.city == "Pune"
        # Every context field is known, so the score is the blend of 100 and 80
        assert result.accuracy.score == 89
        assert result.accuracy.label == "High Accuracy"

    async def test_other_users_plant_is_not_touched(self, create_handler, disease_handler, plant_repository):
        plant = await create_plant(create_handler)
        result = await disease_handler.handle(AnalyzeDiseaseCommand(
            user_id="user-2", plant_id=plant.plant_id, description="yellow leaves"
        ))
        assert result.plant is None
        assert result.plant_updated is False
        assert plant_repository.plants[plant.plant_id].images == []

    async def test_context_override_without_plant(self, disease_handler, advisor):
        advisor.disease_payload = {"isHealthy": True, "confidence": 80, "plantType": "Rose"}
        result = await disease_handler.handle(AnalyzeDiseaseCommand(
            user_id="user-1",
            description="spots",
            context_override=PlantContext(species="Tulsi", soil_type="loamy"),
        ))
        assert result.context.species == "Tulsi"
        assert result.analysis.plant_mismatch is True
        assert result.accuracy.score == 55

    async def test_missing_ai_confidence_scores_with_default(self, disease_handler, advisor):
        advisor.disease_payload = {"isHealthy": False, "disease": "Leaf spot"}
        result = await disease_handler.handle(AnalyzeDiseaseCommand(user_id="user-1", description="brown spots"))

        # Displayed confidence keeps its default while the score assumes 50
        assert result.analysis.confidence == DEFAULT_CONFIDENCE
        assert result.analysis.ai_confidence is None
        assert result.accuracy.score == 37
        assert result.accuracy.label == "Low Accuracy"

    async def test_provider_errors_propagate(self, disease_handler, advisor):
        advisor.error = AIRateLimitedError(provider="groq", retry_after=30)
        with pytest.raises(AIRateLimitedError):
            await disease_handler.handle(AnalyzeDiseaseCommand(user_id="user-1", description="wilting"))

    async def test_requires_image_or_description(self):
        with pytest.raises(ValueError):
            AnalyzeDiseaseCommand(user_id="user-1", description="   ")


class TestAdviceQueries:
    async def test_seasonal_tips(self, create_handler, plant_repository, advisor, clock):
        plant = await create_plant(create_handler)
        handler = SeasonalTipsQueryHandler(plant_repository, advisor, clock=clock)
        result = await handler.handle(SeasonalTipsQuery(
            plant_id=plant.plant_id, user_id="user-1", conditions=GrowingConditions(city="Pune")
        ))
        assert result.season == "monsoon"
        assert result.location == "Pune, Maharashtra"
        assert result.plant == "Tomato"
        assert result.is_fallback is False

    async def test_water_quality_fallback(self, create_handler, plant_repository, advisor):
        plant = await create_plant(create_handler)
        advisor.error = AIRateLimitedError(provider="groq")
        handler = WaterQualityQueryHandler(plant_repository, advisor)
        result = await handler.handle(WaterQualityQuery(
            plant_id=plant.plant_id, user_id="user-1", water_source=WaterSource.RO
        ))
        assert result.is_fallback is True
        assert result.water_source == WaterSource.RO
        assert result.advice["suitability"] == "suitable"


class TestPlantDataQueries:
    @pytest.fixture
    def suggestions_handler(self, plant_catalog, advisor, clock):
        return PlantSuggestionsQueryHandler(plant_catalog, advisor, clock=clock, search_term="tomato")

    async def test_search(self, plant_catalog):
        handler = SearchPlantSpeciesQueryHandler(plant_catalog)
        page = await handler.handle(SearchPlantSpeciesQuery(query="tomato", page=2))
        assert [species.name for species in page.results] == ["Tomato", "Cherry Tomato"]
        assert plant_catalog.searches == [{"query": "tomato", "page": 2}]

    async def test_details_unknown_species(self, plant_catalog):
        with pytest.raises(NotFoundError):
            await GetPlantSpeciesQueryHandler(plant_catalog).handle(GetPlantSpeciesQuery(species_id=999))

    async def test_suggestions_from_ai(self, suggestions_handler, advisor):
        conditions = GrowingConditions(city="Pune", sunlight_hours=4)
        result = await suggestions_handler.handle(PlantSuggestionsQuery(conditions=conditions))

        assert result.suggestions == ["Tulsi", "Mint"]
        assert result.reasoning == "Thrive in heat"
        assert result.season == "monsoon"
        assert result.available_plants == ["Tomato", "Cherry Tomato"]
        assert result.is_fallback is False

        call = advisor.calls[0]
        assert call["candidates"] == ["Tomato", "Cherry Tomato"]
        assert call["conditions"].city == "Pune"

    async def test_search_term_override(self, suggestions_handler, plant_catalog):
        result = await suggestions_handler.handle(PlantSuggestionsQuery(search_term="tulsi"))
        assert plant_catalog.searches == [{"query": "tulsi", "page": 1}]
        assert result.available_plants == ["Tulsi"]

    async def test_candidates_are_capped(self, plant_catalog, advisor, clock):
        handler = PlantSuggestionsQueryHandler(plant_catalog, advisor, clock=clock, candidate_limit=1)
        result = await handler.handle(PlantSuggestionsQuery())
        assert result.available_plants == ["Tomato"]

    @pytest.mark.parametrize("error", [
        AIRateLimitedError(provider="groq"),
        AIResponseFormatError(provider="groq"),
    ])
    async def test_provider_failure_falls_back_to_first_candidates(self, suggestions_handler, advisor, error):
        advisor.error = error
        result = await suggestions_handler.handle(PlantSuggestionsQuery())
        assert result.is_fallback is True
        assert result.suggestions == ["Tomato", "Cherry Tomato"]
        assert result.reasoning == FALLBACK_SUGGESTION_REASONING

    async def test_no_candidates(self, suggestions_handler, advisor):
        with pytest.raises(NotFoundError):
            await suggestions_handler.handle(PlantSuggestionsQuery(search_term="cactus"))
        assert advisor.calls == []

    async def test_catalog_failure_propagates(self, suggestions_handler, plant_catalog, advisor):
        plant_catalog.error = ExternalServiceError(service="Perenual", service_status=500)
        with pytest.raises(ExternalServiceError):
            await suggestions_handler.handle(PlantSuggestionsQuery())
        assert advisor.calls == []
