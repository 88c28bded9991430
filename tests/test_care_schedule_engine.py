from datetime import datetime, timedelta, timezone

import pytest

from app.modules.plant_care.domain.models.care_log import ActivityType
from app.modules.plant_care.domain.models.plant import CareSchedule, Plant, PlantInfo
from app.modules.plant_care.domain.services.care_schedule_engine import CareScheduleEngine, WateringPolicy


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def make_plant(**kwargs) -> Plant:
    return Plant(user_id="user-1", nickname="Tommy", species="Tomato", **kwargs)


@pytest.fixture
def engine() -> CareScheduleEngine:
    return CareScheduleEngine()


class TestWateringPolicy:
    @pytest.mark.parametrize("needs,expected", [
        ("high", 1),
        ("HIGH", 1),
        (" low ", 7),
        ("moderate", 2),
        ("unknown", 2),
        ("", 2),
        (None, 2),
    ])
    def test_default_bands(self, needs, expected):
        assert WateringPolicy().frequency_for(needs) == expected

    def test_custom_table(self):
        policy = WateringPolicy(bands={"high": 3}, default=5)
        engine = CareScheduleEngine(policy)
        assert engine.watering_frequency_for("high") == 3
        assert engine.watering_frequency_for("low") == 5


class TestNextWatering:
    def test_created_plant_gets_next_watering(self, engine):
        schedule = CareSchedule(watering_frequency=2, last_watered=utc(2024, 1, 1))
        engine.recompute_next_watering(schedule)
        assert schedule.next_watering_due == utc(2024, 1, 3)

    def test_missing_last_watered_is_left_alone(self, engine):
        schedule = CareSchedule(watering_frequency=2)
        engine.recompute_next_watering(schedule)
        assert schedule.next_watering_due is None

    def test_recompute_is_idempotent(self, engine):
        schedule = CareSchedule(watering_frequency=3, last_watered=utc(2024, 5, 10, 18))
        engine.recompute_next_watering(schedule)
        first = schedule.next_watering_due
        engine.recompute_next_watering(schedule)
        assert schedule.next_watering_due == first == utc(2024, 5, 13, 18)


class TestNextFertilizing:
    def test_no_schedule_until_first_fertilizing(self, engine):
        schedule = CareSchedule(fertilizing_frequency=30)
        engine.recompute_next_fertilizing(schedule)
        assert schedule.next_fertilizing_due is None

    def test_projects_from_last_fertilized(self, engine):
        schedule = CareSchedule(fertilizing_frequency=30, last_fertilized=utc(2024, 1, 1))
        engine.recompute_next_fertilizing(schedule)
        assert schedule.next_fertilizing_due == utc(2024, 1, 31)


class TestPruning:
    def test_pruning_due_date_is_never_projected(self, engine):
        schedule = CareSchedule(pruning_frequency=10, last_pruned=utc(2024, 1, 1))
        engine.recompute_next_pruning(schedule)
        assert schedule.next_pruning_due is None

    def test_logging_pruning_only_moves_last_pruned(self, engine):
        plant = make_plant()
        engine.on_activity_logged(plant, ActivityType.PRUNING, utc(2024, 2, 1))
        assert plant.care_schedule.last_pruned == utc(2024, 2, 1)
        assert plant.care_schedule.next_pruning_due is None


class TestHarvestProjection:
    def test_harvest_date_from_growth_time(self, engine):
        assert engine.recompute_harvest_date(utc(2024, 1, 1), 90) == utc(2024, 3, 31)

    @pytest.mark.parametrize("growth_time", [0, -5])
    def test_non_positive_growth_time_has_no_harvest(self, engine, growth_time):
        assert engine.recompute_harvest_date(utc(2024, 1, 1), growth_time) is None

    def test_recompute_all_sets_harvest_and_watering(self, engine):
        plant = make_plant(
            planted_date=utc(2024, 1, 1),
            care_schedule=CareSchedule(watering_frequency=2, last_watered=utc(2024, 1, 1)),
            plant_info=PlantInfo(growth_time=90),
        )
        engine.recompute_all(plant)
        assert plant.care_schedule.next_watering_due == utc(2024, 1, 3)
        assert plant.plant_info.estimated_harvest_date == utc(2024, 3, 31)

    def test_zero_growth_time_keeps_previous_harvest_date(self, engine):
        plant = make_plant(plant_info=PlantInfo(growth_time=0, estimated_harvest_date=utc(2024, 6, 1)))
        engine.apply_harvest_projection(plant)
        assert plant.plant_info.estimated_harvest_date == utc(2024, 6, 1)


class TestActivityLogged:
    def test_watering_moves_schedule(self, engine):
        plant = make_plant(care_schedule=CareSchedule(watering_frequency=2, last_watered=utc(2024, 1, 1)))
        engine.on_activity_logged(plant, ActivityType.WATERING, utc(2024, 1, 5, 8))
        assert plant.care_schedule.last_watered == utc(2024, 1, 5, 8)
        assert plant.care_schedule.next_watering_due == utc(2024, 1, 7, 8)

    def test_fertilizing_starts_schedule(self, engine):
        plant = make_plant(care_schedule=CareSchedule(fertilizing_frequency=14))
        engine.on_activity_logged(plant, "fertilizing", utc(2024, 3, 1))
        assert plant.care_schedule.next_fertilizing_due == utc(2024, 3, 15)

    @pytest.mark.parametrize("activity", [
        ActivityType.REPOTTING,
        ActivityType.INSPECTION,
        ActivityType.HARVESTING,
        ActivityType.OTHER,
    ])
    def test_other_activities_leave_schedule_unchanged(self, engine, activity):
        schedule = CareSchedule(watering_frequency=2, last_watered=utc(2024, 1, 1))
        plant = make_plant(care_schedule=schedule)
        engine.recompute_all(plant)
        before = plant.care_schedule.model_dump()

        engine.on_activity_logged(plant, activity, utc(2024, 1, 10))
        assert plant.care_schedule.model_dump() == before

    def test_unknown_activity_is_rejected(self, engine):
        with pytest.raises(ValueError):
            engine.on_activity_logged(make_plant(), "dancing", utc(2024, 1, 1))


class TestNeedsCare:
    def test_due_later_today_counts(self, engine):
        as_of = utc(2024, 1, 3, 8)
        assert engine.is_due_today(utc(2024, 1, 3, 23, 59, 59), as_of)

    def test_midnight_today_counts(self, engine):
        assert engine.is_due_today(utc(2024, 1, 3, 0, 0), utc(2024, 1, 3, 15))

    def test_last_microsecond_of_today_counts(self, engine):
        assert engine.is_due_today(utc(2024, 1, 3, 23, 59, 59, 999999), utc(2024, 1, 3))

    def test_overdue_counts(self, engine):
        assert engine.is_due_today(utc(2023, 12, 1), utc(2024, 1, 3))

    def test_tomorrow_does_not_count(self, engine):
        assert not engine.is_due_today(utc(2024, 1, 4), utc(2024, 1, 3, 23))

    def test_missing_due_date_does_not_count(self, engine):
        assert not engine.is_due_today(None, utc(2024, 1, 3))

    def test_needs_care_uses_watering_or_fertilizing(self, engine):
        plant = make_plant(care_schedule=CareSchedule(
            watering_frequency=7,
            last_watered=utc(2024, 1, 1),
            fertilizing_frequency=2,
            last_fertilized=utc(2024, 1, 1),
        ))
        engine.recompute_all(plant)
        assert engine.needs_care(plant, utc(2024, 1, 3, 6))
        assert not engine.needs_care(plant, utc(2024, 1, 2, 6))

    def test_pruning_never_makes_a_plant_due(self, engine):
        plant = make_plant(care_schedule=CareSchedule(pruning_frequency=1, last_pruned=utc(2020, 1, 1)))
        engine.recompute_all(plant)
        assert not engine.needs_care(plant, utc(2024, 1, 1) + timedelta(days=365))
