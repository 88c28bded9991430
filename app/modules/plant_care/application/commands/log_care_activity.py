# 📄 File: app/modules/plant_care/application/commands/log_care_activity.py
# 🧭 Purpose (Layman Explanation):
# The "I just watered / fed / pruned my plant" request, and the request to remove such a diary entry.
#
# 🧪 Purpose (Technical Summary):
# CQRS commands for care log creation (which also advances the plant's care schedule and may
# update its health) and care log deletion.
#
# 🔗 Dependencies:
# - pydantic
# - app.modules.plant_care.domain.models.care_log (ActivityType, CareMeasurements)
#
# 🔄 Connected Modules / Calls From:
# - LogCareActivityCommandHandler, DeleteCareLogCommandHandler
# - app.modules.plant_care.presentation.api.v1.care (POST /care, DELETE /care/{care_log_id})

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.modules.plant_care.domain.models.care_log import ActivityType, CareMeasurements


class LogCareActivityCommand(BaseModel):
    """Command for recording a care activity on a plant"""
    user_id: str
    plant_id: str
    activity_type: ActivityType
    activity_date: Optional[datetime] = Field(default=None, description="Defaults to now")
    notes: str = Field(default="", max_length=1000)
    measurements: Optional[CareMeasurements] = None


class DeleteCareLogCommand(BaseModel):
    """Command for deleting a care log, owner only"""
    care_log_id: str
    user_id: str
