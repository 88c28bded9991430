"""
Shared fixtures: in-memory repositories, a scripted AI advisor and plant
catalog, a frozen clock and a TestClient wired to them through dependency
overrides.
"""

import os

os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-plant-care-tests")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.modules.plant_care.domain.models.advice import (
    CareProfile,
    GrowingConditions,
    PlantSuggestions,
    SeasonalTips,
    WaterQualityAdvice,
    WaterSource,
)
from app.modules.plant_care.domain.models.care_log import ActivityType, CareLog
from app.modules.plant_care.domain.models.diagnosis import DiseaseAnalysis, PlantContext
from app.modules.plant_care.domain.models.plant import Plant, PlantCategory, PlantStatus
from app.modules.plant_care.domain.models.plant_data import PlantSearchPage, PlantSpecies, PlantSpeciesDetails
from app.modules.plant_care.domain.repositories.care_log_repository import CareLogRepository
from app.modules.plant_care.domain.repositories.plant_repository import PlantRepository
from app.modules.plant_care.domain.services.care_advisor import PlantCareAdvisor
from app.modules.plant_care.domain.services.plant_catalog import PlantCatalog
from app.modules.plant_care.presentation.dependencies import (
    get_care_advisor,
    get_care_log_repository,
    get_clock,
    get_plant_catalog,
    get_plant_repository,
)
from app.shared.core.exceptions import NotFoundError, PlantNotFoundError
from app.shared.core.security import create_access_token
from app.shared.utils.helpers import FixedClock

NOW = datetime(2024, 7, 15, 9, 30, tzinfo=timezone.utc)


class InMemoryPlantRepository(PlantRepository):
    def __init__(self):
        self.plants: Dict[str, Plant] = {}

    async def create(self, plant: Plant) -> Plant:
        self.plants[plant.plant_id] = plant.model_copy(deep=True)
        return plant.model_copy(deep=True)

    async def get_by_id(self, plant_id: str) -> Optional[Plant]:
        plant = self.plants.get(plant_id)
        return plant.model_copy(deep=True) if plant else None

    async def update(self, plant: Plant) -> Plant:
        if plant.plant_id not in self.plants:
            raise PlantNotFoundError(plant.plant_id)
        self.plants[plant.plant_id] = plant.model_copy(deep=True)
        return plant.model_copy(deep=True)

    async def list_by_user(
        self,
        user_id: str,
        category: Optional[PlantCategory] = None,
        status: Optional[PlantStatus] = None,
        is_active: Optional[bool] = True
    ) -> List[Plant]:
        plants = [
            plant for plant in self.plants.values()
            if plant.user_id == user_id
            and (category is None or plant.category == category)
            and (status is None or plant.status == status)
            and (is_active is None or plant.is_active == is_active)
        ]
        plants.sort(key=lambda plant: plant.created_at, reverse=True)
        return [plant.model_copy(deep=True) for plant in plants]


class InMemoryCareLogRepository(CareLogRepository):
    def __init__(self):
        self.care_logs: Dict[str, CareLog] = {}

    async def create(self, care_log: CareLog) -> CareLog:
        self.care_logs[care_log.care_log_id] = care_log
        return care_log

    async def get_by_id(self, care_log_id: str) -> Optional[CareLog]:
        return self.care_logs.get(care_log_id)

    async def delete(self, care_log_id: str) -> bool:
        return self.care_logs.pop(care_log_id, None) is not None

    async def list_by_plant(
        self,
        plant_id: str,
        activity_type: Optional[ActivityType] = None,
        limit: int = 50
    ) -> List[CareLog]:
        logs = [
            log for log in self.care_logs.values()
            if log.plant_id == plant_id and (activity_type is None or log.activity_type == activity_type)
        ]
        logs.sort(key=lambda log: log.activity_date, reverse=True)
        return logs[:limit]

    async def list_by_user(
        self,
        user_id: str,
        activity_type: Optional[ActivityType] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        limit: int = 100
    ) -> List[CareLog]:
        logs = [
            log for log in self.care_logs.values()
            if log.user_id == user_id
            and (activity_type is None or log.activity_type == activity_type)
            and (start_date is None or log.activity_date >= start_date)
            and (end_date is None or log.activity_date <= end_date)
        ]
        logs.sort(key=lambda log: log.activity_date, reverse=True)
        return logs[:limit]


class FakeAdvisor(PlantCareAdvisor):
    """
    Scripted advisor. Set ``error`` to make every call raise it, or set the
    payload attributes to control what the AI "answers".
    """

    def __init__(self):
        self.error: Optional[Exception] = None
        self.care_profile_payload: Dict[str, Any] = {"wateringNeeds": "moderate", "growthTimeDays": 90}
        self.disease_payload: Dict[str, Any] = {"isHealthy": True, "confidence": 90, "plantType": "Tomato"}
        self.suggestions_payload: Dict[str, Any] = {"suggestions": ["Tulsi", "Mint"], "reasoning": "Thrive in heat"}
        self.calls: List[Dict[str, Any]] = []

    def _record(self, name: str, **kwargs):
        self.calls.append({"method": name, **kwargs})
        if self.error is not None:
            raise self.error

    async def generate_care_profile(
        self,
        plant_name: str,
        plant_type: str,
        conditions: GrowingConditions,
        season: str,
        scientific_name: Optional[str] = None
    ) -> CareProfile:
        self._record("generate_care_profile", plant_name=plant_name, season=season, conditions=conditions)
        return CareProfile.from_ai_payload(self.care_profile_payload)

    async def generate_seasonal_tips(self, plant_name: str, location: str, season: str) -> SeasonalTips:
        self._record("generate_seasonal_tips", plant_name=plant_name, location=location, season=season)
        return SeasonalTips.from_ai_payload({"wateringTips": f"Water {plant_name} less in the {season}"})

    async def generate_water_quality_advice(self, plant_name: str, water_source: WaterSource) -> WaterQualityAdvice:
        self._record("generate_water_quality_advice", plant_name=plant_name, water_source=water_source)
        return WaterQualityAdvice.from_ai_payload({"suitability": "Good", "recommendation": "Fine to use"})

    async def analyze_disease(
        self,
        image_url: Optional[str],
        description: Optional[str],
        context: Optional[PlantContext]
    ) -> DiseaseAnalysis:
        self._record("analyze_disease", image_url=image_url, description=description, context=context)
        return DiseaseAnalysis.from_ai_payload(self.disease_payload, context)

    async def generate_plant_suggestions(
        self,
        conditions: GrowingConditions,
        season: str,
        candidates: List[str]
    ) -> PlantSuggestions:
        self._record("generate_plant_suggestions", conditions=conditions, season=season, candidates=candidates)
        return PlantSuggestions.from_ai_payload(self.suggestions_payload)


class FakePlantCatalog(PlantCatalog):
    """In-memory species database. Set ``error`` to make every lookup raise it."""

    def __init__(self):
        self.error: Optional[Exception] = None
        self.species: List[PlantSpeciesDetails] = [
            PlantSpeciesDetails(
                species_id=1, name="Tomato", scientific_name="Solanum lycopersicum", plant_type="vegetable"
            ),
            PlantSpeciesDetails(species_id=2, name="Cherry Tomato", scientific_name="Solanum lycopersicum"),
            PlantSpeciesDetails(species_id=3, name="Tulsi", scientific_name="Ocimum tenuiflorum", medicinal=True),
        ]
        self.searches: List[Dict[str, Any]] = []

    async def search(self, query: str, page: int = 1) -> PlantSearchPage:
        self.searches.append({"query": query, "page": page})
        if self.error is not None:
            raise self.error
        matches = [
            PlantSpecies(**species.model_dump(include=set(PlantSpecies.model_fields)))
            for species in self.species
            if query.lower() in species.name.lower()
        ]
        return PlantSearchPage(query=query, results=matches, total=len(matches), current_page=page, last_page=1)

    async def get_details(self, species_id: int) -> PlantSpeciesDetails:
        if self.error is not None:
            raise self.error
        for species in self.species:
            if species.species_id == species_id:
                return species
        raise NotFoundError("Plant species not found", resource_type="plant_species", resource_id=str(species_id))


@pytest.fixture
def plant_repository() -> InMemoryPlantRepository:
    return InMemoryPlantRepository()


@pytest.fixture
def care_log_repository() -> InMemoryCareLogRepository:
    return InMemoryCareLogRepository()


@pytest.fixture
def advisor() -> FakeAdvisor:
    return FakeAdvisor()


@pytest.fixture
def plant_catalog() -> FakePlantCatalog:
    return FakePlantCatalog()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def client(plant_repository, care_log_repository, advisor, plant_catalog, clock):
    app.dependency_overrides[get_plant_repository] = lambda: plant_repository
    app.dependency_overrides[get_care_log_repository] = lambda: care_log_repository
    app.dependency_overrides[get_care_advisor] = lambda: advisor
    app.dependency_overrides[get_plant_catalog] = lambda: plant_catalog
    app.dependency_overrides[get_clock] = lambda: clock
    # No context manager: the lifespan (database startup) is not needed with in-memory repositories
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_token(user_id: str = "user-1", **claims) -> str:
    return create_access_token({"sub": user_id, **claims})


def auth_headers(user_id: str = "user-1", **claims) -> Dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id, **claims)}"}


@pytest.fixture
def make_headers():
    return auth_headers


@pytest.fixture
def headers() -> Dict[str, str]:
    return auth_headers("user-1", city="Pune", state="Maharashtra", climate_zone="tropical")


@pytest.fixture
def other_headers() -> Dict[str, str]:
    return auth_headers("user-2")
