# 📄 File: app/modules/plant_care/infrastructure/database/care_log_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Stores and reads back each plant's care diary entries.
#
# 🧪 Purpose (Technical Summary):
# Concrete CareLogRepository using SQLAlchemy async sessions with newest-first listings per plant
# or per user, activity and date-range filters, and hard deletes.
#
# 🔗 Dependencies:
# - app.modules.plant_care.domain.repositories.care_log_repository (interface)
# - app.modules.plant_care.infrastructure.database.models (CareLogModel)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.dependencies (repository provider)
# - Care command and query handlers, GetPlantQueryHandler

from datetime import datetime
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.plant_care.domain.models.care_log import ActivityType, CareLog, CareMeasurements
from app.modules.plant_care.domain.repositories.care_log_repository import CareLogRepository
from app.modules.plant_care.infrastructure.database.models import CareLogModel
from app.shared.core.exceptions import DatabaseError
from app.shared.infrastructure.database.session import get_db_session
from app.shared.utils.helpers import ensure_utc
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


class CareLogRepositoryImpl(CareLogRepository):
    """SQLAlchemy implementation of the CareLogRepository interface."""

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def create(self, care_log: CareLog) -> CareLog:
        try:
            care_log_model = self._domain_to_model(care_log)
            self._session.add(care_log_model)
            await self._session.flush()
            return self._model_to_domain(care_log_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error creating care log: {str(e)}")
            raise DatabaseError("Failed to create care log", operation="create", table="care_logs") from e

    async def get_by_id(self, care_log_id: str) -> Optional[CareLog]:
        try:
            stmt = select(CareLogModel).where(CareLogModel.care_log_id == care_log_id)
            result = await self._session.execute(stmt)
            care_log_model = result.scalar_one_or_none()
            return self._model_to_domain(care_log_model) if care_log_model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving care log {care_log_id}: {str(e)}")
            raise DatabaseError("Failed to retrieve care log", operation="get", table="care_logs") from e

    async def delete(self, care_log_id: str) -> bool:
        try:
            stmt = delete(CareLogModel).where(CareLogModel.care_log_id == care_log_id)
            result = await self._session.execute(stmt)
            await self._session.flush()
            return result.rowcount > 0

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting care log {care_log_id}: {str(e)}")
            raise DatabaseError("Failed to delete care log", operation="delete", table="care_logs") from e

    async def list_by_plant(
        self,
        plant_id: str,
        activity_type: Optional[ActivityType] = None,
        limit: int = 50
    ) -> List[CareLog]:
        try:
            stmt = select(CareLogModel).where(CareLogModel.plant_id == plant_id)
            if activity_type is not None:
                stmt = stmt.where(CareLogModel.activity_type == ActivityType(activity_type).value)
            stmt = stmt.order_by(CareLogModel.activity_date.desc()).limit(limit)

            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing care logs for plant {plant_id}: {str(e)}")
            raise DatabaseError("Failed to list care logs", operation="list", table="care_logs") from e

    async def list_by_user(
        self,
        user_id: str,
        activity_type: Optional[ActivityType] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        limit: int = 100
    ) -> List[CareLog]:
        try:
            stmt = select(CareLogModel).where(CareLogModel.user_id == user_id)
            if activity_type is not None:
                stmt = stmt.where(CareLogModel.activity_type == ActivityType(activity_type).value)
            if start_date is not None:
                stmt = stmt.where(CareLogModel.activity_date >= ensure_utc(start_date))
            if end_date is not None:
                stmt = stmt.where(CareLogModel.activity_date <= ensure_utc(end_date))
            stmt = stmt.order_by(CareLogModel.activity_date.desc()).limit(limit)

            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing care logs for user {user_id}: {str(e)}")
            raise DatabaseError("Failed to list care logs", operation="list", table="care_logs") from e

    def _domain_to_model(self, care_log: CareLog) -> CareLogModel:
        measurements = care_log.measurements
        return CareLogModel(
            care_log_id=care_log.care_log_id,
            user_id=care_log.user_id,
            plant_id=care_log.plant_id,
            activity_type=care_log.activity_type.value,
            activity_date=care_log.activity_date,
            notes=care_log.notes,
            has_measurements=measurements is not None,
            height=measurements.height if measurements else None,
            measured_health_score=measurements.health_score if measurements else None,
            observed_issues=measurements.observed_issues if measurements else None,
            created_at=care_log.created_at,
        )

    def _model_to_domain(self, care_log_model: CareLogModel) -> CareLog:
        measurements = None
        if care_log_model.has_measurements:
            measurements = CareMeasurements(
                height=care_log_model.height or 0,
                health_score=care_log_model.measured_health_score,
                observed_issues=care_log_model.observed_issues or "",
            )
        return CareLog(
            care_log_id=care_log_model.care_log_id,
            user_id=care_log_model.user_id,
            plant_id=care_log_model.plant_id,
            activity_type=care_log_model.activity_type,
            activity_date=care_log_model.activity_date,
            notes=care_log_model.notes or "",
            measurements=measurements,
            created_at=care_log_model.created_at,
        )
