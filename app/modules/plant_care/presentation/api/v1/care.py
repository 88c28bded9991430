# 📄 File: app/modules/plant_care/presentation/api/v1/care.py
# 🧭 Purpose (Layman Explanation):
# The web addresses for the plant care diary: record watering or feeding, read past entries
# and delete mistakes.
#
# 🧪 Purpose (Technical Summary):
# FastAPI care log endpoints backed by the care command/query handlers. Logging care also
# advances the plant's schedule, so the response includes the updated schedule summary.
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters
# - app.modules.plant_care.application (commands, queries, handlers)
# - app.modules.plant_care.presentation (schemas, dependency providers)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/care)

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.modules.plant_care.application.commands.log_care_activity import (
    DeleteCareLogCommand,
    LogCareActivityCommand,
)
from app.modules.plant_care.application.handlers.command_handlers import (
    DeleteCareLogCommandHandler,
    LogCareActivityCommandHandler,
)
from app.modules.plant_care.application.handlers.query_handlers import (
    ListPlantCareLogsQueryHandler,
    ListUserCareLogsQueryHandler,
)
from app.modules.plant_care.application.queries.get_care_logs import (
    ListPlantCareLogsQuery,
    ListUserCareLogsQuery,
)
from app.modules.plant_care.domain.models.care_log import ActivityType
from app.modules.plant_care.presentation.api.schemas.care_schemas import (
    CareLogCreateRequest,
    CareLogCreatedResponse,
    CareLogResponse,
    PlantScheduleSummary,
)
from app.modules.plant_care.presentation.api.schemas.common_schemas import ApiResponse
from app.modules.plant_care.presentation.dependencies import (
    get_delete_care_log_handler,
    get_log_care_handler,
    get_plant_care_logs_handler,
    get_user_care_logs_handler,
)
from app.shared.core.dependencies import CurrentUser, get_current_user
from app.shared.core.exceptions import ValidationError

care_router = APIRouter()


@care_router.post(
    "",
    response_model=ApiResponse[CareLogCreatedResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Log a care activity",
    responses={
        403: {"description": "Plant belongs to another user"},
        404: {"description": "Plant not found"},
    }
)
async def log_care_activity(
    request: CareLogCreateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: LogCareActivityCommandHandler = Depends(get_log_care_handler),
) -> ApiResponse[CareLogCreatedResponse]:
    result = await handler.handle(
        LogCareActivityCommand(user_id=current_user.user_id, **request.model_dump())
    )
    plant = result.plant
    schedule = plant.care_schedule
    return ApiResponse(
        message="Care activity logged successfully",
        data=CareLogCreatedResponse(
            care_log=CareLogResponse.from_domain(result.care_log),
            plant=PlantScheduleSummary(
                plant_id=plant.plant_id,
                status=plant.status.value,
                health_score=plant.health_score,
                last_watered=schedule.last_watered,
                next_watering_due=schedule.next_watering_due,
                last_fertilized=schedule.last_fertilized,
                next_fertilizing_due=schedule.next_fertilizing_due,
                last_pruned=schedule.last_pruned,
            ),
        ),
    )


@care_router.get("", response_model=ApiResponse[List[CareLogResponse]], summary="All care logs of the user")
async def list_user_care_logs(
    activity_type: Optional[ActivityType] = Query(default=None),
    start_date: Optional[datetime] = Query(default=None),
    end_date: Optional[datetime] = Query(default=None),
    limit: int = Query(default=100, ge=1, le=500),
    current_user: CurrentUser = Depends(get_current_user),
    handler: ListUserCareLogsQueryHandler = Depends(get_user_care_logs_handler),
) -> ApiResponse[List[CareLogResponse]]:
    if start_date and end_date and start_date > end_date:
        raise ValidationError("start_date must not be after end_date", field="start_date")

    care_logs = await handler.handle(
        ListUserCareLogsQuery(
            user_id=current_user.user_id,
            activity_type=activity_type,
            start_date=start_date,
            end_date=end_date,
            limit=limit,
        )
    )
    return ApiResponse(data=[CareLogResponse.from_domain(log) for log in care_logs], count=len(care_logs))


@care_router.get(
    "/plant/{plant_id}",
    response_model=ApiResponse[List[CareLogResponse]],
    summary="Care logs of one plant",
)
async def list_plant_care_logs(
    plant_id: str,
    activity_type: Optional[ActivityType] = Query(default=None),
    limit: int = Query(default=50, ge=1, le=500),
    current_user: CurrentUser = Depends(get_current_user),
    handler: ListPlantCareLogsQueryHandler = Depends(get_plant_care_logs_handler),
) -> ApiResponse[List[CareLogResponse]]:
    care_logs = await handler.handle(
        ListPlantCareLogsQuery(
            plant_id=plant_id,
            user_id=current_user.user_id,
            activity_type=activity_type,
            limit=limit,
        )
    )
    return ApiResponse(data=[CareLogResponse.from_domain(log) for log in care_logs], count=len(care_logs))


@care_router.delete("/{care_log_id}", response_model=ApiResponse[dict], summary="Delete a care log")
async def delete_care_log(
    care_log_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    handler: DeleteCareLogCommandHandler = Depends(get_delete_care_log_handler),
) -> ApiResponse[dict]:
    await handler.handle(DeleteCareLogCommand(care_log_id=care_log_id, user_id=current_user.user_id))
    return ApiResponse(message="Care log deleted successfully", data={})
