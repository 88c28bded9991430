# 📄 File: app/modules/plant_care/domain/services/care_schedule_engine.py
# 🧭 Purpose (Layman Explanation):
# Works out when each plant next needs watering or feeding, when it should be ready to harvest,
# and whether any of that is due today, every time the user adds a plant or logs some care.
# 🧪 Purpose (Technical Summary):
# Pure, deterministic date arithmetic over a plant's CareSchedule and PlantInfo: next-watering and
# next-fertilizing projection, harvest-date projection, activity-driven schedule updates and the
# due-today predicate. Watering frequency defaults come from an explicit WateringPolicy table.
# 🔗 Dependencies:
# datetime, dataclasses, typing, plant/care_log domain models, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# Plant command handlers (create/update), LogCareActivityCommandHandler,
# PlantsNeedingCareQueryHandler

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Mapping, Optional, Union

from app.modules.plant_care.domain.models.care_log import ActivityType
from app.modules.plant_care.domain.models.plant import CareSchedule, Plant
from app.shared.config.settings import Settings
from app.shared.utils.helpers import end_of_day
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class WateringPolicy:
    """
    Watering frequency (days) keyed by watering need.

    Needs outside the table (including "moderate" and unknown values)
    fall back to ``default``.
    """
    bands: Mapping[str, int] = field(default_factory=lambda: {"high": 1, "low": 7})
    default: int = 2

    def frequency_for(self, watering_needs: Optional[str]) -> int:
        key = (watering_needs or "").strip().lower()
        return self.bands.get(key, self.default)

    @classmethod
    def from_settings(cls, settings: Settings) -> "WateringPolicy":
        return cls(bands=settings.get_watering_policy(), default=settings.DEFAULT_WATERING_FREQUENCY)


class CareScheduleEngine:
    """
    Derives due dates from a plant's care schedule.

    Every operation is idempotent. Frequencies are assumed to be >= 1
    (enforced by the CareSchedule model); the engine does not repair
    invalid input.
    """

    def __init__(self, watering_policy: Optional[WateringPolicy] = None):
        self.watering_policy = watering_policy or WateringPolicy()

    @classmethod
    def from_settings(cls, settings: Settings) -> "CareScheduleEngine":
        return cls(WateringPolicy.from_settings(settings))

    def watering_frequency_for(self, watering_needs: Optional[str]) -> int:
        return self.watering_policy.frequency_for(watering_needs)

    def recompute_next_watering(self, schedule: CareSchedule) -> CareSchedule:
        """next_watering_due = last_watered + watering_frequency days."""
        if schedule.last_watered is None:
            # Callers seed last_watered at plant creation
            return schedule
        schedule.next_watering_due = schedule.last_watered + timedelta(days=schedule.watering_frequency)
        return schedule

    def recompute_next_fertilizing(self, schedule: CareSchedule) -> CareSchedule:
        """No fertilizing schedule exists until the first fertilizing is recorded."""
        if schedule.last_fertilized is None:
            return schedule
        schedule.next_fertilizing_due = schedule.last_fertilized + timedelta(days=schedule.fertilizing_frequency)
        return schedule

    def recompute_next_pruning(self, schedule: CareSchedule) -> CareSchedule:
        """
        Intentionally does nothing.

        Pruning keeps a frequency and a last-pruned date but next_pruning_due
        is never projected, so pruning never appears in "needs care today".
        Whether it should is an open product decision.
        """
        return schedule

    @staticmethod
    def recompute_harvest_date(planted_date: datetime, growth_time_days: int) -> Optional[datetime]:
        """planted_date + growth_time_days, or None when the growth time is not positive."""
        if growth_time_days <= 0:
            return None
        return planted_date + timedelta(days=growth_time_days)

    def apply_harvest_projection(self, plant: Plant) -> Plant:
        harvest_date = self.recompute_harvest_date(plant.planted_date, plant.plant_info.growth_time)
        if harvest_date is not None:
            plant.plant_info.estimated_harvest_date = harvest_date
        return plant

    def recompute_all(self, plant: Plant) -> Plant:
        """Re-derive every due date of a plant."""
        self.recompute_next_watering(plant.care_schedule)
        self.recompute_next_fertilizing(plant.care_schedule)
        self.recompute_next_pruning(plant.care_schedule)
        self.apply_harvest_projection(plant)
        return plant

    def on_activity_logged(
        self,
        plant: Plant,
        activity_type: Union[ActivityType, str],
        activity_date: datetime
    ) -> Plant:
        """Fold a recorded care activity into the plant's schedule."""
        activity = ActivityType(activity_type)
        schedule = plant.care_schedule

        if activity is ActivityType.WATERING:
            schedule.last_watered = activity_date
            self.recompute_next_watering(schedule)
        elif activity is ActivityType.FERTILIZING:
            schedule.last_fertilized = activity_date
            self.recompute_next_fertilizing(schedule)
        elif activity is ActivityType.PRUNING:
            schedule.last_pruned = activity_date
            self.recompute_next_pruning(schedule)
        else:
            logger.debug(
                "Activity does not affect the care schedule",
                extra={"plant_id": plant.plant_id, "activity_type": activity.value}
            )

        return plant

    @staticmethod
    def is_due_today(due_date: Optional[datetime], as_of: datetime) -> bool:
        """True when due_date falls on or before the last instant of as_of's day."""
        if due_date is None:
            return False
        return due_date <= end_of_day(as_of)

    def needs_care(self, plant: Plant, as_of: datetime) -> bool:
        schedule = plant.care_schedule
        return any(
            self.is_due_today(due, as_of)
            for due in (
                schedule.next_watering_due,
                schedule.next_fertilizing_due,
                schedule.next_pruning_due,
            )
        )
