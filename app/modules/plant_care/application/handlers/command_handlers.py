# 📄 File: app/modules/plant_care/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# The "action takers" for plant care: they add and edit plants, record care activities,
# delete things the user owns, and run disease checks, keeping each plant's schedule up to date.
#
# 🧪 Purpose (Technical Summary):
# CQRS command handlers orchestrating repositories, the CareScheduleEngine, plant health rules,
# the DiagnosisAccuracyScorer and the AI care advisor. Ownership is enforced here; AI failures
# degrade to fixed defaults for care profiles and propagate for disease analysis.
#
# 🔗 Dependencies:
# - app.modules.plant_care.application.commands (command definitions)
# - app.modules.plant_care.domain.services (engine, scorer, health rules, season, advisor interface)
# - app.modules.plant_care.domain.repositories (repository interfaces)
# - app.shared.core.exceptions, app.shared.utils (logging, clock)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.dependencies (handler factories)
# - app.modules.plant_care.presentation.api.v1 (plants, care and disease endpoints)

"""
Plant Care Command Handlers

Command Handlers:
- CreatePlantCommandHandler: New plant with AI care profile and seeded schedule
- UpdatePlantCommandHandler: Partial plant update, health/status rules, schedule recompute
- DeletePlantCommandHandler: Soft delete
- LogCareActivityCommandHandler: Care log creation folded into the plant's schedule
- DeleteCareLogCommandHandler: Care log removal
- AnalyzeDiseaseCommandHandler: AI diagnosis, accuracy scoring, plant health update

Each handler:
- Loads the aggregate and checks ownership
- Applies domain rules through domain services
- Persists through repository interfaces
- Logs business events
"""

from dataclasses import dataclass
from typing import Optional

from app.modules.plant_care.application.commands.analyze_disease import AnalyzeDiseaseCommand
from app.modules.plant_care.application.commands.create_plant import CreatePlantCommand
from app.modules.plant_care.application.commands.delete_plant import DeletePlantCommand
from app.modules.plant_care.application.commands.log_care_activity import (
    DeleteCareLogCommand,
    LogCareActivityCommand,
)
from app.modules.plant_care.application.commands.update_plant import UpdatePlantCommand

from app.modules.plant_care.domain.models.advice import CareProfile
from app.modules.plant_care.domain.models.care_log import CareLog
from app.modules.plant_care.domain.models.diagnosis import AccuracyAssessment, DiseaseAnalysis, PlantContext
from app.modules.plant_care.domain.models.plant import CareSchedule, Plant, PlantInfo, PlantStatus
from app.modules.plant_care.domain.services.care_advisor import PlantCareAdvisor
from app.modules.plant_care.domain.services.care_schedule_engine import CareScheduleEngine
from app.modules.plant_care.domain.services.diagnosis_accuracy import DiagnosisAccuracyScorer
from app.modules.plant_care.domain.services.plant_health import (
    apply_diagnosis,
    apply_health_score,
    status_from_health_score,
)
from app.modules.plant_care.domain.services.season import season_for_month

from app.modules.plant_care.domain.repositories.care_log_repository import CareLogRepository
from app.modules.plant_care.domain.repositories.plant_repository import PlantRepository

from app.shared.core.exceptions import (
    AIProviderError,
    AuthorizationError,
    CareLogNotFoundError,
    PlantNotFoundError,
)
from app.shared.utils.helpers import Clock, SystemClock
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    "load_owned_plant",
    "CreatePlantCommandHandler",
    "UpdatePlantCommandHandler",
    "DeletePlantCommandHandler",
    "LogCareActivityCommandHandler",
    "LoggedCareActivity",
    "DeleteCareLogCommandHandler",
    "AnalyzeDiseaseCommandHandler",
    "DiseaseCheckResult",
]


async def load_owned_plant(plant_repository: PlantRepository, plant_id: str, user_id: str) -> Plant:
    """
    Fetch a plant and make sure the caller owns it.

    Raises:
        PlantNotFoundError: No plant with that ID
        AuthorizationError: Plant belongs to another user
    """
    plant = await plant_repository.get_by_id(plant_id)
    if plant is None:
        raise PlantNotFoundError(plant_id)
    if not plant.is_owned_by(user_id):
        logger.warning(
            "Plant access denied",
            extra={"plant_id": plant_id, "user_id": user_id}
        )
        raise AuthorizationError(
            "Not authorized to access this plant",
            resource_type="plant",
            resource_id=plant_id,
            user_id=user_id
        )
    return plant


class CreatePlantCommandHandler:
    """
    Handler for plant creation.

    The AI care profile is best effort: any provider failure falls back to
    the default profile so a plant can always be added.
    """

    def __init__(
        self,
        plant_repository: PlantRepository,
        care_advisor: PlantCareAdvisor,
        schedule_engine: CareScheduleEngine,
        clock: Optional[Clock] = None,
        fertilizing_frequency: int = 30,
        pruning_frequency: int = 60
    ):
        self.plant_repository = plant_repository
        self.care_advisor = care_advisor
        self.schedule_engine = schedule_engine
        self.clock = clock or SystemClock()
        self.fertilizing_frequency = fertilizing_frequency
        self.pruning_frequency = pruning_frequency

    async def handle(self, command: CreatePlantCommand) -> Plant:
        now = self.clock.now()
        profile = await self._care_profile(command, season_for_month(now.month).value)

        plant = Plant(
            user_id=command.user_id,
            nickname=command.nickname,
            species=command.species,
            scientific_name=command.scientific_name or "",
            category=command.category,
            location=command.resolved_location(),
            sunlight_received=command.resolved_sunlight(),
            planted_date=command.planted_date or now,
            notes=command.notes,
            care_schedule=CareSchedule(
                watering_frequency=self.schedule_engine.watering_frequency_for(profile.watering_needs),
                last_watered=now,
                fertilizing_frequency=self.fertilizing_frequency,
                pruning_frequency=self.pruning_frequency,
            ),
            plant_info=PlantInfo(
                watering_needs=profile.watering_needs,
                sunlight_needs=profile.sunlight_requirement,
                soil_type=profile.soil_type,
                ideal_temperature=profile.ideal_temperature,
                growth_time=profile.growth_time_days,
            ),
            created_at=now,
            updated_at=now,
        )
        self.schedule_engine.recompute_all(plant)

        created = await self.plant_repository.create(plant)
        logger.log_business_event(
            "plant_created",
            f"Plant added: {created.nickname}",
            entity_id=created.plant_id,
            entity_type="plant",
            extra={"user_id": created.user_id, "species": created.species}
        )
        return created

    async def _care_profile(self, command: CreatePlantCommand, season: str) -> CareProfile:
        try:
            return await self.care_advisor.generate_care_profile(
                plant_name=command.species,
                plant_type=command.category.value,
                conditions=command.conditions,
                season=season,
                scientific_name=command.scientific_name,
            )
        except AIProviderError as e:
            logger.warning(
                "Care profile generation failed, using defaults",
                extra={"species": command.species, "error_code": e.error_code, "error": e.message}
            )
            return CareProfile.fallback()


class UpdatePlantCommandHandler:
    """Handler for partial plant updates"""

    def __init__(
        self,
        plant_repository: PlantRepository,
        schedule_engine: CareScheduleEngine,
        clock: Optional[Clock] = None
    ):
        self.plant_repository = plant_repository
        self.schedule_engine = schedule_engine
        self.clock = clock or SystemClock()

    async def handle(self, command: UpdatePlantCommand) -> Plant:
        plant = await load_owned_plant(self.plant_repository, command.plant_id, command.user_id)

        for field_name, value in command.get_update_fields().items():
            setattr(plant, field_name, value)

        for field_name, value in command.get_schedule_updates().items():
            setattr(plant.care_schedule, field_name, value)

        if command.health_score is not None:
            apply_health_score(plant, command.health_score)

        if command.status is not None:
            # Dormant is the only status an owner can pin by hand
            if command.status is PlantStatus.DORMANT:
                plant.status = PlantStatus.DORMANT
            else:
                plant.status = status_from_health_score(plant.health_score)

        self.schedule_engine.recompute_all(plant)
        plant.touch(self.clock.now())

        updated = await self.plant_repository.update(plant)
        logger.info(
            "Plant updated",
            extra={"plant_id": updated.plant_id, "user_id": command.user_id}
        )
        return updated


class DeletePlantCommandHandler:
    """Handler for plant soft deletion"""

    def __init__(self, plant_repository: PlantRepository, clock: Optional[Clock] = None):
        self.plant_repository = plant_repository
        self.clock = clock or SystemClock()

    async def handle(self, command: DeletePlantCommand) -> Plant:
        plant = await load_owned_plant(self.plant_repository, command.plant_id, command.user_id)
        plant.deactivate(self.clock.now())
        deleted = await self.plant_repository.update(plant)

        logger.log_business_event(
            "plant_deleted",
            f"Plant removed: {deleted.nickname}",
            entity_id=deleted.plant_id,
            entity_type="plant",
            extra={"user_id": command.user_id}
        )
        return deleted


@dataclass
class LoggedCareActivity:
    care_log: CareLog
    plant: Plant


class LogCareActivityCommandHandler:
    """
    Handler for recording care.

    Watering, fertilizing and pruning move the matching ``last_*`` date and
    re-derive the due date. A measured health score (0 included) replaces
    the plant's score and status.
    """

    def __init__(
        self,
        plant_repository: PlantRepository,
        care_log_repository: CareLogRepository,
        schedule_engine: CareScheduleEngine,
        clock: Optional[Clock] = None
    ):
        self.plant_repository = plant_repository
        self.care_log_repository = care_log_repository
        self.schedule_engine = schedule_engine
        self.clock = clock or SystemClock()

    async def handle(self, command: LogCareActivityCommand) -> LoggedCareActivity:
        plant = await load_owned_plant(self.plant_repository, command.plant_id, command.user_id)
        now = self.clock.now()

        care_log = await self.care_log_repository.create(
            CareLog(
                user_id=command.user_id,
                plant_id=plant.plant_id,
                activity_type=command.activity_type,
                activity_date=command.activity_date or now,
                notes=command.notes,
                measurements=command.measurements,
                created_at=now,
            )
        )

        self.schedule_engine.on_activity_logged(plant, care_log.activity_type, care_log.activity_date)

        measurements = care_log.measurements
        if measurements is not None and measurements.health_score is not None:
            apply_health_score(plant, measurements.health_score)

        plant.touch(now)
        plant = await self.plant_repository.update(plant)

        logger.log_business_event(
            "care_logged",
            f"{care_log.activity_type.value.capitalize()} logged for {plant.nickname}",
            entity_id=care_log.care_log_id,
            entity_type="care_log",
            extra={"plant_id": plant.plant_id, "user_id": command.user_id}
        )
        return LoggedCareActivity(care_log=care_log, plant=plant)


class DeleteCareLogCommandHandler:
    """Handler for care log deletion (owner only)"""

    def __init__(self, care_log_repository: CareLogRepository):
        self.care_log_repository = care_log_repository

    async def handle(self, command: DeleteCareLogCommand) -> bool:
        care_log = await self.care_log_repository.get_by_id(command.care_log_id)
        if care_log is None:
            raise CareLogNotFoundError(command.care_log_id)
        if not care_log.is_owned_by(command.user_id):
            raise AuthorizationError(
                "Not authorized to delete this care log",
                resource_type="care_log",
                resource_id=command.care_log_id,
                user_id=command.user_id
            )

        deleted = await self.care_log_repository.delete(command.care_log_id)
        if not deleted:
            raise CareLogNotFoundError(command.care_log_id)

        logger.info(
            "Care log deleted",
            extra={"care_log_id": command.care_log_id, "user_id": command.user_id}
        )
        return True


@dataclass
class DiseaseCheckResult:
    analysis: DiseaseAnalysis
    accuracy: AccuracyAssessment
    context: PlantContext
    plant: Optional[Plant] = None
    plant_updated: bool = False


class AnalyzeDiseaseCommandHandler:
    """
    Handler for AI disease checks.

    Provider errors propagate so the API can answer 429/502/503. When the
    command names a plant the caller owns, the diagnosis is applied to it;
    a plant that is missing or owned by someone else is left alone.
    """

    def __init__(
        self,
        plant_repository: PlantRepository,
        care_advisor: PlantCareAdvisor,
        accuracy_scorer: DiagnosisAccuracyScorer,
        clock: Optional[Clock] = None
    ):
        self.plant_repository = plant_repository
        self.care_advisor = care_advisor
        self.accuracy_scorer = accuracy_scorer
        self.clock = clock or SystemClock()

    async def handle(self, command: AnalyzeDiseaseCommand) -> DiseaseCheckResult:
        plant = await self._owned_plant_or_none(command)
        context = self._build_context(command, plant)

        analysis = await self.care_advisor.analyze_disease(
            image_url=command.image_url,
            description=command.description,
            context=context,
        )
        accuracy = self.accuracy_scorer.assess(context, analysis.ai_confidence, analysis.plant_mismatch)

        result = DiseaseCheckResult(analysis=analysis, accuracy=accuracy, context=context, plant=plant)

        if plant is not None:
            now = self.clock.now()
            apply_diagnosis(plant, analysis)
            if command.image_url:
                plant.add_image(command.image_url, note=f"Disease check: {analysis.disease}", uploaded_at=now)
            plant.touch(now)
            result.plant = await self.plant_repository.update(plant)
            result.plant_updated = True

        logger.log_business_event(
            "disease_analyzed",
            f"Disease check: {analysis.disease}",
            entity_id=plant.plant_id if plant else None,
            entity_type="plant" if plant else None,
            extra={
                "user_id": command.user_id,
                "is_healthy": analysis.is_healthy,
                "accuracy_score": accuracy.score,
                "plant_mismatch": analysis.plant_mismatch,
            }
        )
        return result

    async def _owned_plant_or_none(self, command: AnalyzeDiseaseCommand) -> Optional[Plant]:
        if not command.plant_id:
            return None
        plant = await self.plant_repository.get_by_id(command.plant_id)
        if plant is None or not plant.is_owned_by(command.user_id):
            logger.warning(
                "Disease check plant not found for user, skipping plant update",
                extra={"plant_id": command.plant_id, "user_id": command.user_id}
            )
            return None
        return plant

    @staticmethod
    def _build_context(command: AnalyzeDiseaseCommand, plant: Optional[Plant]) -> PlantContext:
        """Plant record first, then client overrides, then the user's profile claims."""
        values = {}
        if plant is not None:
            values.update(
                species=plant.species,
                category=plant.category.value,
                soil_type=plant.plant_info.soil_type,
                location=plant.location.value,
                sunlight=plant.plant_info.sunlight_needs,
            )
        if command.context_override is not None:
            values.update(command.context_override.model_dump(exclude_none=True))

        values.setdefault("city", command.user_city)
        values.setdefault("climate_zone", command.user_climate_zone)
        return PlantContext(**values)
