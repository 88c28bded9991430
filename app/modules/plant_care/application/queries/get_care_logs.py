# 📄 File: app/modules/plant_care/application/queries/get_care_logs.py
# 🧭 Purpose (Layman Explanation):
# The "show me my care diary" requests, either for a single plant or for the whole garden.
#
# 🧪 Purpose (Technical Summary):
# CQRS read queries over CareLog entries with activity type, date range and limit filters.
#
# 🔗 Dependencies:
# - pydantic
# - app.modules.plant_care.domain.models.care_log (ActivityType)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.application.handlers.query_handlers
# - app.modules.plant_care.presentation.api.v1.care

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.modules.plant_care.domain.models.care_log import ActivityType


class ListPlantCareLogsQuery(BaseModel):
    """Care logs of one plant the user owns"""
    model_config = ConfigDict(frozen=True)

    plant_id: str
    user_id: str
    activity_type: Optional[ActivityType] = None
    limit: int = Field(default=50, ge=1, le=500)


class ListUserCareLogsQuery(BaseModel):
    """Care logs across all of the user's plants"""
    model_config = ConfigDict(frozen=True)

    user_id: str
    activity_type: Optional[ActivityType] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    limit: int = Field(default=100, ge=1, le=500)

    @model_validator(mode="after")
    def validate_date_range(self) -> "ListUserCareLogsQuery":
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self
