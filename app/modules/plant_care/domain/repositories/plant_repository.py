# 📄 File: app/modules/plant_care/domain/repositories/plant_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find and update the plants in a user's garden.
# 🧪 Purpose (Technical Summary):
# Repository interface for the Plant aggregate following the Repository pattern; implementations
# live in the infrastructure layer and return domain entities, never ORM models.
# 🔗 Dependencies:
# Domain models (Plant, PlantCategory, PlantStatus), typing, abc
# 🔄 Connected Modules / Calls From:
# Plant command/query handlers, PlantRepositoryImpl, in-memory test fakes

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.plant import Plant, PlantCategory, PlantStatus


class PlantRepository(ABC):
    """
    Repository interface for Plant entity data access operations.

    Implementation Notes:
    - Methods return domain entities (Plant), not database models
    - All operations are async for non-blocking I/O
    - Plants are soft-deleted through ``update`` with ``is_active = False``
    """

    @abstractmethod
    async def create(self, plant: Plant) -> Plant:
        """
        Persist a new plant.

        Args:
            plant: Plant entity to create

        Returns:
            Created Plant entity
        """
        pass

    @abstractmethod
    async def get_by_id(self, plant_id: str) -> Optional[Plant]:
        """
        Get plant by ID regardless of owner or active flag.

        Returns:
            Plant entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, plant: Plant) -> Plant:
        """
        Persist every field of an existing plant.

        Raises:
            NotFoundError: If the plant does not exist
        """
        pass

    @abstractmethod
    async def list_by_user(
        self,
        user_id: str,
        category: Optional[PlantCategory] = None,
        status: Optional[PlantStatus] = None,
        is_active: Optional[bool] = True
    ) -> List[Plant]:
        """
        List a user's plants, newest first.

        Args:
            user_id: Owner ID
            category: Optional category filter
            status: Optional status filter
            is_active: Active flag filter; None returns both
        """
        pass
