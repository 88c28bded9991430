from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.modules.plant_care.domain.models.care_log import ActivityType, CareLog, CareMeasurements
from app.modules.plant_care.domain.models.plant import CareSchedule, Plant, PlantCategory, PlantStatus
from app.modules.plant_care.infrastructure.database import models  # noqa: F401
from app.modules.plant_care.infrastructure.database.care_log_repository_impl import CareLogRepositoryImpl
from app.modules.plant_care.infrastructure.database.plant_repository_impl import PlantRepositoryImpl
from app.shared.core.exceptions import PlantNotFoundError
from app.shared.infrastructure.database.connection import Base

NOW = datetime(2024, 7, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
async def session(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'plants.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


def make_plant(**kwargs) -> Plant:
    defaults = dict(
        user_id="user-1",
        nickname="Tommy",
        species="Tomato",
        category=PlantCategory.VEGETABLE,
        planted_date=NOW,
        care_schedule=CareSchedule(last_watered=NOW, next_watering_due=NOW + timedelta(days=2)),
        created_at=NOW,
        updated_at=NOW,
    )
    defaults.update(kwargs)
    return Plant(**defaults)


class TestPlantRepository:
    async def test_create_and_read_back(self, session):
        repo = PlantRepositoryImpl(session)
        plant = make_plant()
        plant.add_image("https://example.com/a.jpg", note="first", uploaded_at=NOW)

        await repo.create(plant)
        await session.commit()

        loaded = await repo.get_by_id(plant.plant_id)
        assert loaded is not None
        assert loaded.nickname == "Tommy"
        assert loaded.category == PlantCategory.VEGETABLE
        assert loaded.care_schedule.next_watering_due == NOW + timedelta(days=2)
        assert loaded.care_schedule.last_watered.tzinfo is not None
        assert loaded.images[0].url == "https://example.com/a.jpg"
        assert loaded.images[0].uploaded_at == NOW

    async def test_missing_plant(self, session):
        assert await PlantRepositoryImpl(session).get_by_id("nope") is None

    async def test_update(self, session):
        repo = PlantRepositoryImpl(session)
        plant = await repo.create(make_plant())

        plant.health_score = 45
        plant.status = PlantStatus.DISEASED
        await repo.update(plant)
        await session.commit()

        loaded = await repo.get_by_id(plant.plant_id)
        assert loaded.health_score == 45
        assert loaded.status == PlantStatus.DISEASED

    async def test_update_missing_plant(self, session):
        with pytest.raises(PlantNotFoundError):
            await PlantRepositoryImpl(session).update(make_plant())

    async def test_list_filters(self, session):
        repo = PlantRepositoryImpl(session)
        await repo.create(make_plant(nickname="Old", created_at=NOW - timedelta(days=1)))
        await repo.create(make_plant(nickname="New", category=PlantCategory.HERB))
        await repo.create(make_plant(nickname="Gone", is_active=False))
        await repo.create(make_plant(nickname="Theirs", user_id="user-2"))
        await session.commit()

        active = await repo.list_by_user("user-1")
        assert [plant.nickname for plant in active] == ["New", "Old"]

        herbs = await repo.list_by_user("user-1", category=PlantCategory.HERB)
        assert [plant.nickname for plant in herbs] == ["New"]

        everything = await repo.list_by_user("user-1", is_active=None)
        assert len(everything) == 3


class TestCareLogRepository:
    async def test_round_trip_and_listing(self, session):
        plant = await PlantRepositoryImpl(session).create(make_plant())
        repo = CareLogRepositoryImpl(session)

        older = CareLog(
            user_id="user-1",
            plant_id=plant.plant_id,
            activity_type=ActivityType.WATERING,
            activity_date=NOW - timedelta(days=3),
        )
        newer = CareLog(
            user_id="user-1",
            plant_id=plant.plant_id,
            activity_type=ActivityType.INSPECTION,
            activity_date=NOW,
            measurements=CareMeasurements(height=14.5, health_score=0, observed_issues="aphids"),
        )
        await repo.create(older)
        await repo.create(newer)
        await session.commit()

        logs = await repo.list_by_plant(plant.plant_id)
        assert [log.care_log_id for log in logs] == [newer.care_log_id, older.care_log_id]
        assert logs[0].measurements.health_score == 0
        assert logs[0].measurements.observed_issues == "aphids"
        assert logs[1].measurements is None

        waterings = await repo.list_by_user("user-1", activity_type=ActivityType.WATERING)
        assert [log.care_log_id for log in waterings] == [older.care_log_id]

        recent = await repo.list_by_user("user-1", start_date=NOW - timedelta(days=1))
        assert [log.care_log_id for log in recent] == [newer.care_log_id]

    async def test_delete(self, session):
        plant = await PlantRepositoryImpl(session).create(make_plant())
        repo = CareLogRepositoryImpl(session)
        care_log = await repo.create(
            CareLog(user_id="user-1", plant_id=plant.plant_id, activity_type=ActivityType.PRUNING)
        )

        assert await repo.delete(care_log.care_log_id) is True
        assert await repo.get_by_id(care_log.care_log_id) is None
        assert await repo.delete(care_log.care_log_id) is False
