# 📄 File: app/modules/plant_care/domain/services/plant_catalog.py
# 🧭 Purpose (Layman Explanation):
# Describes the plant encyclopedia we look species up in, without tying the app to one provider.
# 🧪 Purpose (Technical Summary):
# Abstract interface for the plant species database: paged search and per-species details.
# Implementations raise ExternalServiceError / RateLimitError on provider failure and
# NotFoundError for unknown species.
# 🔗 Dependencies:
# abc, plant_data domain models
# 🔄 Connected Modules / Calls From:
# perenual_catalog.py (implementation), plant data query handlers, test fakes

from abc import ABC, abstractmethod

from app.modules.plant_care.domain.models.plant_data import PlantSearchPage, PlantSpeciesDetails


class PlantCatalog(ABC):
    """Plant species database interface"""

    @abstractmethod
    async def search(self, query: str, page: int = 1) -> PlantSearchPage:
        pass

    @abstractmethod
    async def get_details(self, species_id: int) -> PlantSpeciesDetails:
        """Fact sheet for one species; NotFoundError when the database has no such id."""
        pass
