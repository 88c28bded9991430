# 📄 File: app/modules/plant_care/presentation/api/v1/plants.py
# 🧭 Purpose (Layman Explanation):
# The web addresses the app calls to manage a user's plants: add, list, view, edit and remove plants,
# see which ones need care today, get seasonal tips and browse plant photos.
#
# 🧪 Purpose (Technical Summary):
# FastAPI plant endpoints. Each route converts the request into a CQRS command or query, runs the
# injected handler and wraps the result in the success envelope. Domain exceptions propagate to
# the application exception handlers.
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters, status codes
# - app.modules.plant_care.application (commands, queries, handlers)
# - app.modules.plant_care.presentation (schemas, dependency providers)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/plants)

"""
Plants API Endpoints

Endpoints:
- POST /: Add a plant with an AI care schedule
- GET /: List plants (category, status, is_active filters)
- GET /care/today: Plants with care due by the end of today
- GET /{plant_id}: Plant with its recent care logs
- PUT /{plant_id}: Update a plant
- DELETE /{plant_id}: Soft delete a plant
- GET /{plant_id}/seasonal-tips: AI tips for the current season
- GET /{plant_id}/images: Plant image gallery
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.modules.plant_care.application.commands.create_plant import CreatePlantCommand
from app.modules.plant_care.application.commands.delete_plant import DeletePlantCommand
from app.modules.plant_care.application.commands.update_plant import UpdatePlantCommand
from app.modules.plant_care.application.handlers.command_handlers import (
    CreatePlantCommandHandler,
    DeletePlantCommandHandler,
    UpdatePlantCommandHandler,
)
from app.modules.plant_care.application.handlers.query_handlers import (
    GetPlantQueryHandler,
    ListPlantsQueryHandler,
    PlantImagesQueryHandler,
    PlantsNeedingCareQueryHandler,
    SeasonalTipsQueryHandler,
)
from app.modules.plant_care.application.queries.get_advice import SeasonalTipsQuery
from app.modules.plant_care.application.queries.get_plants import (
    GetPlantQuery,
    ListPlantsQuery,
    PlantImagesQuery,
    PlantsNeedingCareQuery,
)
from app.modules.plant_care.domain.models.advice import AdviceResult, GrowingConditions
from app.modules.plant_care.domain.models.plant import PlantCategory, PlantStatus
from app.modules.plant_care.presentation.api.schemas.care_schemas import CareLogResponse
from app.modules.plant_care.presentation.api.schemas.common_schemas import ApiResponse
from app.modules.plant_care.presentation.api.schemas.plant_schemas import (
    PlantCreateRequest,
    PlantDetailResponse,
    PlantImageResponse,
    PlantResponse,
    PlantUpdateRequest,
)
from app.modules.plant_care.presentation.dependencies import (
    get_create_plant_handler,
    get_delete_plant_handler,
    get_growing_conditions,
    get_list_plants_handler,
    get_plant_handler,
    get_plant_images_handler,
    get_plants_needing_care_handler,
    get_seasonal_tips_handler,
    get_update_plant_handler,
)
from app.shared.config.settings import Settings, get_settings
from app.shared.core.dependencies import CurrentUser, get_current_user

plants_router = APIRouter()


@plants_router.post(
    "",
    response_model=ApiResponse[PlantResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Add a plant",
    responses={
        401: {"description": "Authentication required"},
        422: {"description": "Nickname and species are required"},
    }
)
async def create_plant(
    request: PlantCreateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    conditions: GrowingConditions = Depends(get_growing_conditions),
    handler: CreatePlantCommandHandler = Depends(get_create_plant_handler),
) -> ApiResponse[PlantResponse]:
    """
    Add a plant to the current user's garden.

    The care schedule comes from the AI advisor, tuned to the user's city,
    climate and balcony. If the AI is unavailable sensible defaults are used.
    """
    command = CreatePlantCommand(
        user_id=current_user.user_id,
        conditions=conditions,
        **request.model_dump(),
    )
    plant = await handler.handle(command)
    return ApiResponse(
        message="Plant added successfully with AI-generated care schedule",
        data=PlantResponse.from_domain(plant),
    )


@plants_router.get("", response_model=ApiResponse[List[PlantResponse]], summary="List plants")
async def list_plants(
    category: Optional[PlantCategory] = Query(default=None),
    plant_status: Optional[PlantStatus] = Query(default=None, alias="status"),
    is_active: Optional[bool] = Query(default=True, description="Omit deleted plants by default"),
    current_user: CurrentUser = Depends(get_current_user),
    handler: ListPlantsQueryHandler = Depends(get_list_plants_handler),
) -> ApiResponse[List[PlantResponse]]:
    plants = await handler.handle(
        ListPlantsQuery(
            user_id=current_user.user_id,
            category=category,
            status=plant_status,
            is_active=is_active,
        )
    )
    return ApiResponse(data=[PlantResponse.from_domain(plant) for plant in plants], count=len(plants))


@plants_router.get(
    "/care/today",
    response_model=ApiResponse[List[PlantResponse]],
    summary="Plants needing care today",
)
async def plants_needing_care(
    current_user: CurrentUser = Depends(get_current_user),
    handler: PlantsNeedingCareQueryHandler = Depends(get_plants_needing_care_handler),
) -> ApiResponse[List[PlantResponse]]:
    """Active plants with watering, fertilizing or pruning due by the end of today."""
    plants = await handler.handle(PlantsNeedingCareQuery(user_id=current_user.user_id))
    return ApiResponse(data=[PlantResponse.from_domain(plant) for plant in plants], count=len(plants))


@plants_router.get(
    "/{plant_id}",
    response_model=ApiResponse[PlantDetailResponse],
    summary="Get a plant",
    responses={
        403: {"description": "Plant belongs to another user"},
        404: {"description": "Plant not found"},
    }
)
async def get_plant(
    plant_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    handler: GetPlantQueryHandler = Depends(get_plant_handler),
    settings: Settings = Depends(get_settings),
) -> ApiResponse[PlantDetailResponse]:
    result = await handler.handle(
        GetPlantQuery(
            plant_id=plant_id,
            user_id=current_user.user_id,
            recent_care_limit=settings.RECENT_CARE_LOGS_LIMIT,
        )
    )
    return ApiResponse(
        data=PlantDetailResponse(
            plant=PlantResponse.from_domain(result.plant),
            recent_care_logs=[CareLogResponse.from_domain(log) for log in result.recent_care_logs],
        )
    )


@plants_router.put(
    "/{plant_id}",
    response_model=ApiResponse[PlantResponse],
    summary="Update a plant",
    responses={
        403: {"description": "Plant belongs to another user"},
        404: {"description": "Plant not found"},
    }
)
async def update_plant(
    plant_id: str,
    request: PlantUpdateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: UpdatePlantCommandHandler = Depends(get_update_plant_handler),
) -> ApiResponse[PlantResponse]:
    command = UpdatePlantCommand(
        plant_id=plant_id,
        user_id=current_user.user_id,
        **request.model_dump(exclude_unset=True),
    )
    plant = await handler.handle(command)
    return ApiResponse(message="Plant updated successfully", data=PlantResponse.from_domain(plant))


@plants_router.delete(
    "/{plant_id}",
    response_model=ApiResponse[dict],
    summary="Delete a plant",
    responses={
        403: {"description": "Plant belongs to another user"},
        404: {"description": "Plant not found"},
    }
)
async def delete_plant(
    plant_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    handler: DeletePlantCommandHandler = Depends(get_delete_plant_handler),
) -> ApiResponse[dict]:
    """Soft delete: the plant disappears from lists but its care history is kept."""
    await handler.handle(DeletePlantCommand(plant_id=plant_id, user_id=current_user.user_id))
    return ApiResponse(message="Plant deleted successfully", data={})


@plants_router.get(
    "/{plant_id}/seasonal-tips",
    response_model=ApiResponse[AdviceResult],
    summary="Seasonal care tips",
)
async def seasonal_tips(
    plant_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    conditions: GrowingConditions = Depends(get_growing_conditions),
    handler: SeasonalTipsQueryHandler = Depends(get_seasonal_tips_handler),
) -> ApiResponse[AdviceResult]:
    result = await handler.handle(
        SeasonalTipsQuery(plant_id=plant_id, user_id=current_user.user_id, conditions=conditions)
    )
    return ApiResponse(data=result)


@plants_router.get(
    "/{plant_id}/images",
    response_model=ApiResponse[List[PlantImageResponse]],
    summary="Plant images",
)
async def plant_images(
    plant_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    handler: PlantImagesQueryHandler = Depends(get_plant_images_handler),
) -> ApiResponse[List[PlantImageResponse]]:
    images = await handler.handle(PlantImagesQuery(plant_id=plant_id, user_id=current_user.user_id))
    return ApiResponse(data=[PlantImageResponse.from_domain(image) for image in images], count=len(images))
