# 📄 File: app/modules/plant_care/domain/repositories/care_log_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for saving and reading a plant's care diary.
# 🧪 Purpose (Technical Summary):
# Repository interface for CareLog entities: create, fetch, delete and newest-first listings
# per plant or per user with activity and date-range filters.
# 🔗 Dependencies:
# Domain models (CareLog, ActivityType), typing, abc, datetime
# 🔄 Connected Modules / Calls From:
# Care command/query handlers, GetPlantQueryHandler, CareLogRepositoryImpl, in-memory test fakes

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..models.care_log import ActivityType, CareLog


class CareLogRepository(ABC):
    """Repository interface for CareLog entity data access operations."""

    @abstractmethod
    async def create(self, care_log: CareLog) -> CareLog:
        """Persist a new care log."""
        pass

    @abstractmethod
    async def get_by_id(self, care_log_id: str) -> Optional[CareLog]:
        """Get care log by ID, None when missing."""
        pass

    @abstractmethod
    async def delete(self, care_log_id: str) -> bool:
        """Hard delete a care log. Returns False when nothing was deleted."""
        pass

    @abstractmethod
    async def list_by_plant(
        self,
        plant_id: str,
        activity_type: Optional[ActivityType] = None,
        limit: int = 50
    ) -> List[CareLog]:
        """Care logs of one plant, newest activity first."""
        pass

    @abstractmethod
    async def list_by_user(
        self,
        user_id: str,
        activity_type: Optional[ActivityType] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        limit: int = 100
    ) -> List[CareLog]:
        """
        Care logs across all of a user's plants, newest activity first.

        Args:
            start_date: Inclusive lower bound on activity_date
            end_date: Inclusive upper bound on activity_date
        """
        pass
