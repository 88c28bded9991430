# 📄 File: app/modules/plant_care/presentation/api/v1/disease.py
# 🧭 Purpose (Layman Explanation):
# The web address for "what's wrong with my plant?": send a photo link or describe the symptoms
# and get a diagnosis, a treatment plan and a trust rating.
#
# 🧪 Purpose (Technical Summary):
# FastAPI endpoint for AI disease analysis with accuracy scoring. AI provider failures surface
# through the exception handlers as 429/502/503/500 with retry_after when known.
#
# 🔗 Dependencies:
# - FastAPI router
# - AnalyzeDiseaseCommand / AnalyzeDiseaseCommandHandler
# - disease schemas, dependency providers
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/disease)

from fastapi import APIRouter, Depends

from app.modules.plant_care.application.commands.analyze_disease import AnalyzeDiseaseCommand
from app.modules.plant_care.application.handlers.command_handlers import AnalyzeDiseaseCommandHandler
from app.modules.plant_care.presentation.api.schemas.common_schemas import ApiResponse
from app.modules.plant_care.presentation.api.schemas.disease_schemas import (
    DiseaseAnalysisResponse,
    DiseaseAnalyzeRequest,
)
from app.modules.plant_care.presentation.dependencies import get_analyze_disease_handler
from app.shared.core.dependencies import CurrentUser, get_current_user

disease_router = APIRouter()


@disease_router.post(
    "/analyze",
    response_model=ApiResponse[DiseaseAnalysisResponse],
    summary="Analyze plant health",
    responses={
        422: {"description": "Neither image URL nor description provided"},
        429: {"description": "AI service rate limited"},
        502: {"description": "AI service authentication or response failure"},
        503: {"description": "AI model loading"},
    }
)
async def analyze_disease(
    request: DiseaseAnalyzeRequest,
    current_user: CurrentUser = Depends(get_current_user),
    handler: AnalyzeDiseaseCommandHandler = Depends(get_analyze_disease_handler),
) -> ApiResponse[DiseaseAnalysisResponse]:
    """
    Diagnose a plant from an image URL and/or a symptom description.

    When ``plantId`` names one of the user's plants, its status and health
    score are updated from the diagnosis and the image is added to its gallery.
    """
    result = await handler.handle(
        AnalyzeDiseaseCommand(
            user_id=current_user.user_id,
            plant_id=request.plant_id,
            image_url=request.image_url,
            description=request.description,
            user_city=current_user.city,
            user_climate_zone=current_user.climate_zone,
            context_override=request.plant_context,
        )
    )
    return ApiResponse(
        data=DiseaseAnalysisResponse(
            image_url=request.image_url,
            analysis=result.analysis,
            accuracy=result.accuracy,
            context=result.context,
            plant_id=result.plant.plant_id if result.plant else None,
            plant_updated=result.plant_updated,
        )
    )
