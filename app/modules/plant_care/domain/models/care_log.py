# 📄 File: app/modules/plant_care/domain/models/care_log.py
# 🧭 Purpose (Layman Explanation):
# A care log is a diary entry for one plant: "watered today", "pruned the lower leaves",
# optionally with how tall the plant is and how healthy it looked.
# 🧪 Purpose (Technical Summary):
# Immutable CareLog domain entity with activity type enum and optional measurements
# (height, health score, observed issues). Logs are created and deleted, never edited.
# 🔗 Dependencies:
# pydantic, datetime, typing, uuid, enum
# 🔄 Connected Modules / Calls From:
# care_schedule_engine.py (on_activity_logged), care log repositories, care command/query handlers

import uuid
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.plant_care.domain.models.plant import UtcDatetime
from app.shared.utils.helpers import utc_now


class ActivityType(str, Enum):
    """Kinds of care a user can record"""
    WATERING = "watering"
    FERTILIZING = "fertilizing"
    PRUNING = "pruning"
    REPOTTING = "repotting"
    INSPECTION = "inspection"
    HARVESTING = "harvesting"
    OTHER = "other"


class CareMeasurements(BaseModel):
    """Optional observations recorded alongside an activity"""
    height: float = Field(default=0, ge=0)                   # cm
    health_score: Optional[int] = Field(default=None, ge=0, le=100)
    observed_issues: str = ""


class CareLog(BaseModel):
    """CareLog domain model"""
    model_config = ConfigDict(frozen=True)

    care_log_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    user_id: str
    plant_id: str
    activity_type: ActivityType
    activity_date: UtcDatetime = Field(default_factory=utc_now)
    notes: str = ""
    measurements: Optional[CareMeasurements] = None
    created_at: UtcDatetime = Field(default_factory=utc_now)

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id
