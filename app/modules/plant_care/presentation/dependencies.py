"""
Plant Care Module Dependencies

FastAPI dependency providers wiring repositories, domain services, the AI
advisor, the plant database and CQRS handlers for the plant care endpoints.
Tests replace the repository, advisor, catalog and clock providers through
``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

# Core imports
from app.shared.config.settings import Settings, get_settings
from app.shared.core.dependencies import (
    DEFAULT_BALCONY_TYPE,
    DEFAULT_CITY,
    DEFAULT_CLIMATE_ZONE,
    DEFAULT_STATE,
    DEFAULT_SUNLIGHT_HOURS,
    CurrentUser,
    get_current_user,
)
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.helpers import Clock, SystemClock

# Domain imports
from app.modules.plant_care.domain.models.advice import GrowingConditions
from app.modules.plant_care.domain.repositories.care_log_repository import CareLogRepository
from app.modules.plant_care.domain.repositories.plant_repository import PlantRepository
from app.modules.plant_care.domain.services.care_advisor import PlantCareAdvisor
from app.modules.plant_care.domain.services.care_schedule_engine import CareScheduleEngine
from app.modules.plant_care.domain.services.diagnosis_accuracy import DiagnosisAccuracyScorer
from app.modules.plant_care.domain.services.plant_catalog import PlantCatalog

# Application layer imports
from app.modules.plant_care.application.handlers.command_handlers import (
    AnalyzeDiseaseCommandHandler,
    CreatePlantCommandHandler,
    DeleteCareLogCommandHandler,
    DeletePlantCommandHandler,
    LogCareActivityCommandHandler,
    UpdatePlantCommandHandler,
)
from app.modules.plant_care.application.handlers.query_handlers import (
    GetPlantQueryHandler,
    GetPlantSpeciesQueryHandler,
    ListPlantCareLogsQueryHandler,
    ListPlantsQueryHandler,
    ListUserCareLogsQueryHandler,
    PlantImagesQueryHandler,
    PlantsNeedingCareQueryHandler,
    PlantSuggestionsQueryHandler,
    SearchPlantSpeciesQueryHandler,
    SeasonalTipsQueryHandler,
    WaterQualityQueryHandler,
)

# Infrastructure imports
from app.modules.plant_care.infrastructure.database.care_log_repository_impl import CareLogRepositoryImpl
from app.modules.plant_care.infrastructure.database.plant_repository_impl import PlantRepositoryImpl
from app.modules.plant_care.infrastructure.external.groq_advisor import GroqPlantCareAdvisor
from app.modules.plant_care.infrastructure.external.perenual_catalog import PerenualPlantCatalog


# =========================================================================
# INFRASTRUCTURE PROVIDERS
# =========================================================================

def get_plant_repository(session: AsyncSession = Depends(get_db_session)) -> PlantRepository:
    return PlantRepositoryImpl(session)


def get_care_log_repository(session: AsyncSession = Depends(get_db_session)) -> CareLogRepository:
    return CareLogRepositoryImpl(session)


@lru_cache()
def get_care_advisor() -> PlantCareAdvisor:
    """One advisor (and one HTTP session) per process."""
    return GroqPlantCareAdvisor.from_settings(get_settings())


@lru_cache()
def get_plant_catalog() -> PlantCatalog:
    """One plant database client per process."""
    return PerenualPlantCatalog.from_settings(get_settings())


def get_clock() -> Clock:
    return SystemClock()


# =========================================================================
# DOMAIN SERVICE PROVIDERS
# =========================================================================

def get_schedule_engine(settings: Settings = Depends(get_settings)) -> CareScheduleEngine:
    return CareScheduleEngine.from_settings(settings)


def get_accuracy_scorer(settings: Settings = Depends(get_settings)) -> DiagnosisAccuracyScorer:
    return DiagnosisAccuracyScorer.from_settings(settings)


def get_growing_conditions(current_user: CurrentUser = Depends(get_current_user)) -> GrowingConditions:
    """User growing conditions from token claims, with Indian defaults."""
    return GrowingConditions(
        city=current_user.city or DEFAULT_CITY,
        state=current_user.state or DEFAULT_STATE,
        climate_zone=current_user.climate_zone or DEFAULT_CLIMATE_ZONE,
        balcony_type=current_user.balcony_type or DEFAULT_BALCONY_TYPE,
        sunlight_hours=current_user.sunlight_hours or DEFAULT_SUNLIGHT_HOURS,
    )


# =========================================================================
# COMMAND HANDLER PROVIDERS
# =========================================================================

def get_create_plant_handler(
    plant_repository: PlantRepository = Depends(get_plant_repository),
    care_advisor: PlantCareAdvisor = Depends(get_care_advisor),
    schedule_engine: CareScheduleEngine = Depends(get_schedule_engine),
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_settings)
) -> CreatePlantCommandHandler:
    return CreatePlantCommandHandler(
        plant_repository,
        care_advisor,
        schedule_engine,
        clock=clock,
        fertilizing_frequency=settings.DEFAULT_FERTILIZING_FREQUENCY,
        pruning_frequency=settings.DEFAULT_PRUNING_FREQUENCY,
    )


def get_update_plant_handler(
    plant_repository: PlantRepository = Depends(get_plant_repository),
    schedule_engine: CareScheduleEngine = Depends(get_schedule_engine),
    clock: Clock = Depends(get_clock)
) -> UpdatePlantCommandHandler:
    return UpdatePlantCommandHandler(plant_repository, schedule_engine, clock=clock)


def get_delete_plant_handler(
    plant_repository: PlantRepository = Depends(get_plant_repository),
    clock: Clock = Depends(get_clock)
) -> DeletePlantCommandHandler:
    return DeletePlantCommandHandler(plant_repository, clock=clock)


def get_log_care_handler(
    plant_repository: PlantRepository = Depends(get_plant_repository),
    care_log_repository: CareLogRepository = Depends(get_care_log_repository),
    schedule_engine: CareScheduleEngine = Depends(get_schedule_engine),
    clock: Clock = Depends(get_clock)
) -> LogCareActivityCommandHandler:
    return LogCareActivityCommandHandler(plant_repository, care_log_repository, schedule_engine, clock=clock)


def get_delete_care_log_handler(
    care_log_repository: CareLogRepository = Depends(get_care_log_repository)
) -> DeleteCareLogCommandHandler:
    return DeleteCareLogCommandHandler(care_log_repository)


def get_analyze_disease_handler(
    plant_repository: PlantRepository = Depends(get_plant_repository),
    care_advisor: PlantCareAdvisor = Depends(get_care_advisor),
    accuracy_scorer: DiagnosisAccuracyScorer = Depends(get_accuracy_scorer),
    clock: Clock = Depends(get_clock)
) -> AnalyzeDiseaseCommandHandler:
    return AnalyzeDiseaseCommandHandler(plant_repository, care_advisor, accuracy_scorer, clock=clock)


# =========================================================================
# QUERY HANDLER PROVIDERS
# =========================================================================

def get_list_plants_handler(
    plant_repository: PlantRepository = Depends(get_plant_repository)
) -> ListPlantsQueryHandler:
    return ListPlantsQueryHandler(plant_repository)


def get_plant_handler(
    plant_repository: PlantRepository = Depends(get_plant_repository),
    care_log_repository: CareLogRepository = Depends(get_care_log_repository)
) -> GetPlantQueryHandler:
    return GetPlantQueryHandler(plant_repository, care_log_repository)


def get_plants_needing_care_handler(
    plant_repository: PlantRepository = Depends(get_plant_repository),
    schedule_engine: CareScheduleEngine = Depends(get_schedule_engine),
    clock: Clock = Depends(get_clock)
) -> PlantsNeedingCareQueryHandler:
    return PlantsNeedingCareQueryHandler(plant_repository, schedule_engine, clock=clock)


def get_plant_images_handler(
    plant_repository: PlantRepository = Depends(get_plant_repository)
) -> PlantImagesQueryHandler:
    return PlantImagesQueryHandler(plant_repository)


def get_plant_care_logs_handler(
    plant_repository: PlantRepository = Depends(get_plant_repository),
    care_log_repository: CareLogRepository = Depends(get_care_log_repository)
) -> ListPlantCareLogsQueryHandler:
    return ListPlantCareLogsQueryHandler(plant_repository, care_log_repository)


def get_user_care_logs_handler(
    care_log_repository: CareLogRepository = Depends(get_care_log_repository)
) -> ListUserCareLogsQueryHandler:
    return ListUserCareLogsQueryHandler(care_log_repository)


def get_seasonal_tips_handler(
    plant_repository: PlantRepository = Depends(get_plant_repository),
    care_advisor: PlantCareAdvisor = Depends(get_care_advisor),
    clock: Clock = Depends(get_clock)
) -> SeasonalTipsQueryHandler:
    return SeasonalTipsQueryHandler(plant_repository, care_advisor, clock=clock)


def get_water_quality_handler(
    plant_repository: PlantRepository = Depends(get_plant_repository),
    care_advisor: PlantCareAdvisor = Depends(get_care_advisor)
) -> WaterQualityQueryHandler:
    return WaterQualityQueryHandler(plant_repository, care_advisor)


def get_search_plant_species_handler(
    plant_catalog: PlantCatalog = Depends(get_plant_catalog)
) -> SearchPlantSpeciesQueryHandler:
    return SearchPlantSpeciesQueryHandler(plant_catalog)


def get_plant_species_handler(
    plant_catalog: PlantCatalog = Depends(get_plant_catalog)
) -> GetPlantSpeciesQueryHandler:
    return GetPlantSpeciesQueryHandler(plant_catalog)


def get_plant_suggestions_handler(
    plant_catalog: PlantCatalog = Depends(get_plant_catalog),
    care_advisor: PlantCareAdvisor = Depends(get_care_advisor),
    clock: Clock = Depends(get_clock),
    settings: Settings = Depends(get_settings)
) -> PlantSuggestionsQueryHandler:
    return PlantSuggestionsQueryHandler(
        plant_catalog,
        care_advisor,
        clock=clock,
        search_term=settings.SUGGESTION_SEARCH_TERM,
        candidate_limit=settings.SUGGESTION_CANDIDATE_LIMIT,
    )
