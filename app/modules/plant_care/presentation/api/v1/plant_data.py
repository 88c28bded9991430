# 📄 File: app/modules/plant_care/presentation/api/v1/plant_data.py
# 🧭 Purpose (Layman Explanation):
# The web addresses for browsing the plant encyclopedia and for asking the AI gardener which
# plants would grow well on your balcony.
#
# 🧪 Purpose (Technical Summary):
# FastAPI endpoints over the plant species database (search and details, both public) and the
# authenticated AI plant suggestions. Catalog failures propagate as ExternalServiceError /
# RateLimitError / NotFoundError to the application exception handlers.
#
# 🔗 Dependencies:
# - FastAPI router, Query parameters
# - app.modules.plant_care.application (plant data queries and handlers)
# - app.modules.plant_care.presentation (dependency providers)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /api/v1/plant-data)

"""
Plant Data API Endpoints

Endpoints:
- GET /search: Search the plant species database (q, page)
- GET /suggestions/ai: AI picks for the caller's growing conditions
- GET /{species_id}: Species fact sheet
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.modules.plant_care.application.handlers.query_handlers import (
    GetPlantSpeciesQueryHandler,
    PlantSuggestionsQueryHandler,
    SearchPlantSpeciesQueryHandler,
)
from app.modules.plant_care.application.queries.get_plant_data import (
    GetPlantSpeciesQuery,
    PlantSuggestionsQuery,
    SearchPlantSpeciesQuery,
)
from app.modules.plant_care.domain.models.advice import GrowingConditions, PlantSuggestionsResult
from app.modules.plant_care.domain.models.plant_data import PlantSearchPage, PlantSpeciesDetails
from app.modules.plant_care.presentation.api.schemas.common_schemas import ApiResponse
from app.modules.plant_care.presentation.dependencies import (
    get_growing_conditions,
    get_plant_species_handler,
    get_plant_suggestions_handler,
    get_search_plant_species_handler,
)
from app.shared.core.exceptions import ValidationError

plant_data_router = APIRouter()


@plant_data_router.get(
    "/search",
    response_model=ApiResponse[PlantSearchPage],
    summary="Search plant species",
    responses={
        422: {"description": "Search query is required"},
        429: {"description": "Plant database rate limit reached"},
        502: {"description": "Plant database unavailable"},
    }
)
async def search_plant_species(
    q: str = Query(..., max_length=100, description="Plant name to search for"),
    page: int = Query(1, ge=1),
    handler: SearchPlantSpeciesQueryHandler = Depends(get_search_plant_species_handler),
) -> ApiResponse[PlantSearchPage]:
    if not q.strip():
        raise ValidationError("Search query is required", field="q")

    result = await handler.handle(SearchPlantSpeciesQuery(query=q.strip(), page=page))
    return ApiResponse(data=result, count=len(result.results))


# Registered before /{species_id} so "suggestions" is never read as an id
@plant_data_router.get(
    "/suggestions/ai",
    response_model=ApiResponse[PlantSuggestionsResult],
    summary="AI plant suggestions",
    responses={
        401: {"description": "Authentication required"},
        404: {"description": "No candidate plants found"},
    }
)
async def plant_suggestions(
    search: Optional[str] = Query(None, max_length=100, description="Search term for candidate plants"),
    conditions: GrowingConditions = Depends(get_growing_conditions),
    handler: PlantSuggestionsQueryHandler = Depends(get_plant_suggestions_handler),
) -> ApiResponse[PlantSuggestionsResult]:
    result = await handler.handle(PlantSuggestionsQuery(conditions=conditions, search_term=search))
    return ApiResponse(data=result)


@plant_data_router.get(
    "/{species_id}",
    response_model=ApiResponse[PlantSpeciesDetails],
    summary="Plant species details",
    responses={
        404: {"description": "Species not found"},
        502: {"description": "Plant database unavailable"},
    }
)
async def plant_species_details(
    species_id: int,
    handler: GetPlantSpeciesQueryHandler = Depends(get_plant_species_handler),
) -> ApiResponse[PlantSpeciesDetails]:
    if species_id < 1:
        raise ValidationError("Species id must be a positive integer", field="species_id", value=species_id)

    result = await handler.handle(GetPlantSpeciesQuery(species_id=species_id))
    return ApiResponse(data=result)
