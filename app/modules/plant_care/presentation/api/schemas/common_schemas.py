# 📄 File: app/modules/plant_care/presentation/api/schemas/common_schemas.py
# 🧭 Purpose (Layman Explanation):
# The standard "wrapper" every successful answer from our API comes in.
#
# 🧪 Purpose (Technical Summary):
# Generic success envelope {"success": true, "message", "data", "count"} shared by all plant care
# endpoints. Error envelopes are produced by the application exception handlers.
#
# 🔗 Dependencies:
# - pydantic generics
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.api.v1 routers (response_model)

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Success envelope"""
    success: bool = True
    message: Optional[str] = None
    data: DataT
    count: Optional[int] = None
