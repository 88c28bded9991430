# 📄 File: app/modules/plant_care/infrastructure/database/plant_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves plants to the database and reads them back, turning table rows into the plant objects
# the rest of the app understands.
#
# 🧪 Purpose (Technical Summary):
# Concrete PlantRepository using SQLAlchemy async sessions, mapping PlantModel rows to the Plant
# aggregate (and back), normalising stored datetimes to UTC and translating driver errors.
#
# 🔗 Dependencies:
# - app.modules.plant_care.domain.repositories.plant_repository (interface)
# - app.modules.plant_care.domain.models.plant (domain model)
# - app.modules.plant_care.infrastructure.database.models (PlantModel)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.dependencies (repository provider)
# - Plant command and query handlers (through the interface)

"""
Plant Repository Implementation

Features:
- Async CRUD over the plants table
- Owner listings filtered by category, status and active flag, newest first
- Domain <-> model mapping for the flattened care schedule and plant info
"""

from typing import List, Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.plant_care.domain.models.plant import (
    CareSchedule,
    Plant,
    PlantCategory,
    PlantImage,
    PlantInfo,
    PlantStatus,
)
from app.modules.plant_care.domain.repositories.plant_repository import PlantRepository
from app.modules.plant_care.infrastructure.database.models import PlantModel
from app.shared.core.exceptions import DatabaseError, PlantNotFoundError
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


class PlantRepositoryImpl(PlantRepository):
    """SQLAlchemy implementation of the PlantRepository interface."""

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def create(self, plant: Plant) -> Plant:
        try:
            plant_model = self._domain_to_model(plant)
            self._session.add(plant_model)
            await self._session.flush()

            logger.debug("Created plant", extra={"plant_id": plant_model.plant_id})
            return self._model_to_domain(plant_model)

        except IntegrityError as e:
            logger.warning("Plant creation failed on constraint", extra={"plant_id": plant.plant_id})
            raise DatabaseError(f"Failed to create plant: {e.orig}", operation="create", table="plants") from e
        except SQLAlchemyError as e:
            logger.error(f"Database error during plant creation: {str(e)}")
            raise DatabaseError("Failed to create plant", operation="create", table="plants") from e

    async def get_by_id(self, plant_id: str) -> Optional[Plant]:
        try:
            plant_model = await self._get_model(plant_id)
            if plant_model is None:
                logger.debug("Plant not found", extra={"plant_id": plant_id})
                return None
            return self._model_to_domain(plant_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving plant {plant_id}: {str(e)}")
            raise DatabaseError("Failed to retrieve plant", operation="get", table="plants") from e

    async def update(self, plant: Plant) -> Plant:
        try:
            plant_model = await self._get_model(plant.plant_id)
            if plant_model is None:
                raise PlantNotFoundError(plant.plant_id)

            self._update_model_from_domain(plant_model, plant)
            await self._session.flush()

            logger.debug("Updated plant", extra={"plant_id": plant.plant_id})
            return self._model_to_domain(plant_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error updating plant {plant.plant_id}: {str(e)}")
            raise DatabaseError("Failed to update plant", operation="update", table="plants") from e

    async def list_by_user(
        self,
        user_id: str,
        category: Optional[PlantCategory] = None,
        status: Optional[PlantStatus] = None,
        is_active: Optional[bool] = True
    ) -> List[Plant]:
        try:
            stmt = select(PlantModel).where(PlantModel.user_id == user_id)
            if category is not None:
                stmt = stmt.where(PlantModel.category == PlantCategory(category).value)
            if status is not None:
                stmt = stmt.where(PlantModel.status == PlantStatus(status).value)
            if is_active is not None:
                stmt = stmt.where(PlantModel.is_active.is_(is_active))
            stmt = stmt.order_by(PlantModel.created_at.desc())

            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing plants for {user_id}: {str(e)}")
            raise DatabaseError("Failed to list plants", operation="list", table="plants") from e

    async def _get_model(self, plant_id: str) -> Optional[PlantModel]:
        stmt = select(PlantModel).where(PlantModel.plant_id == plant_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _domain_to_model(self, plant: Plant) -> PlantModel:
        plant_model = PlantModel(plant_id=plant.plant_id, user_id=plant.user_id)
        self._update_model_from_domain(plant_model, plant)
        return plant_model

    def _model_to_domain(self, plant_model: PlantModel) -> Plant:
        """Naive datetimes read back from SQLite are treated as UTC by the domain model."""
        return Plant(
            plant_id=plant_model.plant_id,
            user_id=plant_model.user_id,
            nickname=plant_model.nickname,
            species=plant_model.species,
            scientific_name=plant_model.scientific_name or "",
            category=plant_model.category,
            location=plant_model.location,
            sunlight_received=plant_model.sunlight_received,
            planted_date=plant_model.planted_date,
            notes=plant_model.notes or "",
            images=[PlantImage.model_validate(image) for image in (plant_model.images or [])],
            care_schedule=CareSchedule(
                watering_frequency=plant_model.watering_frequency,
                last_watered=plant_model.last_watered,
                next_watering_due=plant_model.next_watering_due,
                fertilizing_frequency=plant_model.fertilizing_frequency,
                last_fertilized=plant_model.last_fertilized,
                next_fertilizing_due=plant_model.next_fertilizing_due,
                pruning_frequency=plant_model.pruning_frequency,
                last_pruned=plant_model.last_pruned,
                next_pruning_due=plant_model.next_pruning_due,
            ),
            plant_info=PlantInfo(
                watering_needs=plant_model.watering_needs,
                sunlight_needs=plant_model.sunlight_needs,
                soil_type=plant_model.soil_type,
                ideal_temperature=plant_model.ideal_temperature,
                growth_time=plant_model.growth_time,
                estimated_harvest_date=plant_model.estimated_harvest_date,
            ),
            status=plant_model.status,
            health_score=plant_model.health_score,
            is_active=plant_model.is_active,
            created_at=plant_model.created_at,
            updated_at=plant_model.updated_at,
        )

    def _update_model_from_domain(self, plant_model: PlantModel, plant: Plant) -> None:
        schedule = plant.care_schedule
        info = plant.plant_info

        plant_model.nickname = plant.nickname
        plant_model.species = plant.species
        plant_model.scientific_name = plant.scientific_name
        plant_model.category = plant.category.value
        plant_model.location = plant.location.value
        plant_model.sunlight_received = plant.sunlight_received
        plant_model.planted_date = plant.planted_date
        plant_model.notes = plant.notes
        plant_model.images = [image.model_dump(mode="json") for image in plant.images]

        plant_model.watering_frequency = schedule.watering_frequency
        plant_model.last_watered = schedule.last_watered
        plant_model.next_watering_due = schedule.next_watering_due
        plant_model.fertilizing_frequency = schedule.fertilizing_frequency
        plant_model.last_fertilized = schedule.last_fertilized
        plant_model.next_fertilizing_due = schedule.next_fertilizing_due
        plant_model.pruning_frequency = schedule.pruning_frequency
        plant_model.last_pruned = schedule.last_pruned
        plant_model.next_pruning_due = schedule.next_pruning_due

        plant_model.watering_needs = info.watering_needs
        plant_model.sunlight_needs = info.sunlight_needs
        plant_model.soil_type = info.soil_type
        plant_model.ideal_temperature = info.ideal_temperature
        plant_model.growth_time = info.growth_time
        plant_model.estimated_harvest_date = info.estimated_harvest_date

        plant_model.status = plant.status.value
        plant_model.health_score = plant.health_score
        plant_model.is_active = plant.is_active
        plant_model.created_at = plant.created_at
        plant_model.updated_at = plant.updated_at
