# 📄 File: app/modules/plant_care/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# The "information retrievers" for plant care: they list the user's plants and care diary,
# work out what needs doing today, fetch seasonal and water advice from the AI gardener and look
# species up in the plant encyclopedia.
#
# 🧪 Purpose (Technical Summary):
# CQRS query handlers over the plant and care log repositories with ownership checks, the
# due-today predicate from CareScheduleEngine, plant database lookups, and AI advice that degrades
# to fixed fallbacks.
#
# 🔗 Dependencies:
# - app.modules.plant_care.application.queries (query definitions)
# - app.modules.plant_care.domain (repositories, engine, season, advisor and catalog interfaces)
# - app.shared.core.exceptions, app.shared.utils (logging, clock)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.dependencies (handler factories)
# - app.modules.plant_care.presentation.api.v1 (read endpoints)

from dataclasses import dataclass, field
from typing import List, Optional

from app.modules.plant_care.application.handlers.command_handlers import load_owned_plant
from app.modules.plant_care.application.queries.get_advice import SeasonalTipsQuery, WaterQualityQuery
from app.modules.plant_care.application.queries.get_care_logs import (
    ListPlantCareLogsQuery,
    ListUserCareLogsQuery,
)
from app.modules.plant_care.application.queries.get_plant_data import (
    GetPlantSpeciesQuery,
    PlantSuggestionsQuery,
    SearchPlantSpeciesQuery,
)
from app.modules.plant_care.application.queries.get_plants import (
    GetPlantQuery,
    ListPlantsQuery,
    PlantImagesQuery,
    PlantsNeedingCareQuery,
)

from app.modules.plant_care.domain.models.advice import (
    AdviceResult,
    PlantSuggestions,
    PlantSuggestionsResult,
    SeasonalTips,
    WaterQualityAdvice,
)
from app.modules.plant_care.domain.models.care_log import CareLog
from app.modules.plant_care.domain.models.plant import Plant, PlantImage
from app.modules.plant_care.domain.models.plant_data import PlantSearchPage, PlantSpeciesDetails
from app.modules.plant_care.domain.repositories.care_log_repository import CareLogRepository
from app.modules.plant_care.domain.repositories.plant_repository import PlantRepository
from app.modules.plant_care.domain.services.care_advisor import PlantCareAdvisor
from app.modules.plant_care.domain.services.care_schedule_engine import CareScheduleEngine
from app.modules.plant_care.domain.services.plant_catalog import PlantCatalog
from app.modules.plant_care.domain.services.season import season_for_month

from app.shared.core.exceptions import AIProviderError, NotFoundError
from app.shared.utils.helpers import Clock, SystemClock
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    "ListPlantsQueryHandler",
    "GetPlantQueryHandler",
    "PlantWithCareLogs",
    "PlantsNeedingCareQueryHandler",
    "PlantImagesQueryHandler",
    "ListPlantCareLogsQueryHandler",
    "ListUserCareLogsQueryHandler",
    "SeasonalTipsQueryHandler",
    "WaterQualityQueryHandler",
    "SearchPlantSpeciesQueryHandler",
    "GetPlantSpeciesQueryHandler",
    "PlantSuggestionsQueryHandler",
]


class ListPlantsQueryHandler:
    def __init__(self, plant_repository: PlantRepository):
        self.plant_repository = plant_repository

    async def handle(self, query: ListPlantsQuery) -> List[Plant]:
        return await self.plant_repository.list_by_user(
            query.user_id,
            category=query.category,
            status=query.status,
            is_active=query.is_active,
        )


@dataclass
class PlantWithCareLogs:
    plant: Plant
    recent_care_logs: List[CareLog] = field(default_factory=list)


class GetPlantQueryHandler:
    """One plant with its most recent care logs"""

    def __init__(self, plant_repository: PlantRepository, care_log_repository: CareLogRepository):
        self.plant_repository = plant_repository
        self.care_log_repository = care_log_repository

    async def handle(self, query: GetPlantQuery) -> PlantWithCareLogs:
        plant = await load_owned_plant(self.plant_repository, query.plant_id, query.user_id)
        care_logs = await self.care_log_repository.list_by_plant(plant.plant_id, limit=query.recent_care_limit)
        return PlantWithCareLogs(plant=plant, recent_care_logs=care_logs)


class PlantsNeedingCareQueryHandler:
    """Active plants with a watering, fertilizing or pruning date due by the end of today"""

    def __init__(
        self,
        plant_repository: PlantRepository,
        schedule_engine: CareScheduleEngine,
        clock: Optional[Clock] = None
    ):
        self.plant_repository = plant_repository
        self.schedule_engine = schedule_engine
        self.clock = clock or SystemClock()

    async def handle(self, query: PlantsNeedingCareQuery) -> List[Plant]:
        now = self.clock.now()
        plants = await self.plant_repository.list_by_user(query.user_id, is_active=True)
        due = [plant for plant in plants if self.schedule_engine.needs_care(plant, now)]

        logger.debug(
            "Plants needing care computed",
            extra={"user_id": query.user_id, "active": len(plants), "due": len(due)}
        )
        return due


class PlantImagesQueryHandler:
    def __init__(self, plant_repository: PlantRepository):
        self.plant_repository = plant_repository

    async def handle(self, query: PlantImagesQuery) -> List[PlantImage]:
        plant = await load_owned_plant(self.plant_repository, query.plant_id, query.user_id)
        return list(plant.images)


class ListPlantCareLogsQueryHandler:
    def __init__(self, plant_repository: PlantRepository, care_log_repository: CareLogRepository):
        self.plant_repository = plant_repository
        self.care_log_repository = care_log_repository

    async def handle(self, query: ListPlantCareLogsQuery) -> List[CareLog]:
        plant = await load_owned_plant(self.plant_repository, query.plant_id, query.user_id)
        return await self.care_log_repository.list_by_plant(
            plant.plant_id,
            activity_type=query.activity_type,
            limit=query.limit,
        )


class ListUserCareLogsQueryHandler:
    def __init__(self, care_log_repository: CareLogRepository):
        self.care_log_repository = care_log_repository

    async def handle(self, query: ListUserCareLogsQuery) -> List[CareLog]:
        return await self.care_log_repository.list_by_user(
            query.user_id,
            activity_type=query.activity_type,
            start_date=query.start_date,
            end_date=query.end_date,
            limit=query.limit,
        )


class SeasonalTipsQueryHandler:
    """
    Seasonal care tips for an owned plant.

    The season comes from the injected clock. Provider failures return the
    fixed fallback tips with ``is_fallback`` set.
    """

    def __init__(
        self,
        plant_repository: PlantRepository,
        care_advisor: PlantCareAdvisor,
        clock: Optional[Clock] = None
    ):
        self.plant_repository = plant_repository
        self.care_advisor = care_advisor
        self.clock = clock or SystemClock()

    async def handle(self, query: SeasonalTipsQuery) -> AdviceResult:
        plant = await load_owned_plant(self.plant_repository, query.plant_id, query.user_id)
        season = season_for_month(self.clock.now().month).value
        location = query.conditions.location_label

        is_fallback = False
        try:
            tips = await self.care_advisor.generate_seasonal_tips(plant.species, location, season)
        except AIProviderError as e:
            logger.warning(
                "Seasonal tips generation failed, using fallback",
                extra={"plant_id": plant.plant_id, "error_code": e.error_code, "error": e.message}
            )
            tips = SeasonalTips.fallback()
            is_fallback = True

        return AdviceResult(
            plant=plant.species,
            season=season,
            location=location,
            advice=tips.model_dump(),
            is_fallback=is_fallback,
        )


class WaterQualityQueryHandler:
    """Water source suitability advice for an owned plant"""

    def __init__(self, plant_repository: PlantRepository, care_advisor: PlantCareAdvisor):
        self.plant_repository = plant_repository
        self.care_advisor = care_advisor

    async def handle(self, query: WaterQualityQuery) -> AdviceResult:
        plant = await load_owned_plant(self.plant_repository, query.plant_id, query.user_id)

        is_fallback = False
        try:
            advice = await self.care_advisor.generate_water_quality_advice(plant.species, query.water_source)
        except AIProviderError as e:
            logger.warning(
                "Water quality advice failed, using fallback",
                extra={"plant_id": plant.plant_id, "error_code": e.error_code, "error": e.message}
            )
            advice = WaterQualityAdvice.fallback()
            is_fallback = True

        return AdviceResult(
            plant=plant.species,
            water_source=query.water_source,
            advice=advice.model_dump(),
            is_fallback=is_fallback,
        )


class SearchPlantSpeciesQueryHandler:
    def __init__(self, plant_catalog: PlantCatalog):
        self.plant_catalog = plant_catalog

    async def handle(self, query: SearchPlantSpeciesQuery) -> PlantSearchPage:
        return await self.plant_catalog.search(query.query, query.page)


class GetPlantSpeciesQueryHandler:
    def __init__(self, plant_catalog: PlantCatalog):
        self.plant_catalog = plant_catalog

    async def handle(self, query: GetPlantSpeciesQuery) -> PlantSpeciesDetails:
        return await self.plant_catalog.get_details(query.species_id)


class PlantSuggestionsQueryHandler:
    """
    AI plant picks for the user's growing conditions.

    Candidates come from the first page of one plant database search; a
    failed search propagates and an empty one is a NotFoundError. AI provider
    failures fall back to the first candidates with ``is_fallback`` set.
    """

    def __init__(
        self,
        plant_catalog: PlantCatalog,
        care_advisor: PlantCareAdvisor,
        clock: Optional[Clock] = None,
        search_term: str = "tomato",
        candidate_limit: int = 20
    ):
        self.plant_catalog = plant_catalog
        self.care_advisor = care_advisor
        self.clock = clock or SystemClock()
        self.search_term = search_term
        self.candidate_limit = candidate_limit

    async def handle(self, query: PlantSuggestionsQuery) -> PlantSuggestionsResult:
        search_term = (query.search_term or "").strip() or self.search_term
        page = await self.plant_catalog.search(search_term, 1)
        candidates = list(dict.fromkeys(page.names))[:self.candidate_limit]
        if not candidates:
            raise NotFoundError(f"No plants found for '{search_term}'", resource_type="plant_species")

        season = season_for_month(self.clock.now().month).value
        is_fallback = False
        try:
            suggestions = await self.care_advisor.generate_plant_suggestions(query.conditions, season, candidates)
        except AIProviderError as e:
            logger.warning(
                "Plant suggestions failed, using fallback",
                extra={"search_term": search_term, "error_code": e.error_code, "error": e.message}
            )
            suggestions = PlantSuggestions.fallback(candidates)
            is_fallback = True

        return PlantSuggestionsResult(
            conditions=query.conditions,
            season=season,
            suggestions=suggestions.suggestions,
            reasoning=suggestions.reasoning,
            available_plants=candidates,
            is_fallback=is_fallback,
        )
