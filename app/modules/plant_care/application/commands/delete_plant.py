# 📄 File: app/modules/plant_care/application/commands/delete_plant.py
# 🧭 Purpose (Layman Explanation):
# The "remove this plant" request. The plant is hidden, not erased, so its care history survives.
#
# 🧪 Purpose (Technical Summary):
# CQRS command for plant soft deletion (is_active = False), owner only.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - DeletePlantCommandHandler
# - app.modules.plant_care.presentation.api.v1.plants (DELETE /plants/{plant_id})

from pydantic import BaseModel


class DeletePlantCommand(BaseModel):
    """Command for soft-deleting a plant"""
    plant_id: str
    user_id: str
