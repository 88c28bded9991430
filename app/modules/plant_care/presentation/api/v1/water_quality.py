# 📄 File: app/modules/plant_care/presentation/api/v1/water_quality.py
# 🧭 Purpose (Layman Explanation):
# The web address that answers "is my tap / RO / rain / borewell / filtered water okay for this plant?"
#
# 🧪 Purpose (Technical Summary):
# FastAPI endpoint for AI water-quality advice. The water source path segment is matched
# case-insensitively against the supported sources; anything else is a 422.
#
# 🔗 Dependencies:
# - FastAPI router
# - WaterQualityQuery / WaterQualityQueryHandler
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/water-quality)

from fastapi import APIRouter, Depends

from app.modules.plant_care.application.handlers.query_handlers import WaterQualityQueryHandler
from app.modules.plant_care.application.queries.get_advice import WaterQualityQuery
from app.modules.plant_care.domain.models.advice import AdviceResult, WaterSource
from app.modules.plant_care.presentation.api.schemas.common_schemas import ApiResponse
from app.modules.plant_care.presentation.dependencies import get_water_quality_handler
from app.shared.core.dependencies import CurrentUser, get_current_user
from app.shared.core.exceptions import ValidationError

water_quality_router = APIRouter()

VALID_WATER_SOURCES = ", ".join(source.value for source in WaterSource)


@water_quality_router.get(
    "/{plant_id}/{water_source}",
    response_model=ApiResponse[AdviceResult],
    summary="Water quality advice",
    responses={
        403: {"description": "Plant belongs to another user"},
        404: {"description": "Plant not found"},
        422: {"description": "Unsupported water source"},
    }
)
async def water_quality_advice(
    plant_id: str,
    water_source: str,
    current_user: CurrentUser = Depends(get_current_user),
    handler: WaterQualityQueryHandler = Depends(get_water_quality_handler),
) -> ApiResponse[AdviceResult]:
    try:
        source = WaterSource(water_source.strip().lower())
    except ValueError:
        raise ValidationError(
            f"Invalid water source. Must be one of: {VALID_WATER_SOURCES}",
            field="water_source",
            value=water_source,
        )

    result = await handler.handle(
        WaterQualityQuery(plant_id=plant_id, user_id=current_user.user_id, water_source=source)
    )
    return ApiResponse(data=result)
