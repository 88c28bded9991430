# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# This file acts like a traffic director for all API version 1 requests, sending plant requests to
# the plant handlers, care diary requests to the care handlers, and so on.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation that combines the plant care module routers under their route
# prefixes and exposes the API info endpoint.
# 🔗 Dependencies:
# FastAPI, app.api.v1.health, app.modules.plant_care.presentation.api.v1.*
# 🔄 Connected Modules / Calls From:
# app.main.py

from fastapi import APIRouter

from app.modules.plant_care.presentation.api.v1.care import care_router
from app.modules.plant_care.presentation.api.v1.disease import disease_router
from app.modules.plant_care.presentation.api.v1.plant_data import plant_data_router
from app.modules.plant_care.presentation.api.v1.plants import plants_router
from app.modules.plant_care.presentation.api.v1.water_quality import water_quality_router

from . import ROUTE_PREFIXES, get_api_info
from .health import health_router

# Create main API v1 router
api_v1_router = APIRouter()

# Include health check router (no prefix - direct access)
api_v1_router.include_router(health_router, tags=["Health Check"])

api_v1_router.include_router(plants_router, prefix=ROUTE_PREFIXES["plants"], tags=["Plants"])
api_v1_router.include_router(care_router, prefix=ROUTE_PREFIXES["care"], tags=["Care"])
api_v1_router.include_router(disease_router, prefix=ROUTE_PREFIXES["disease"], tags=["Disease Detection"])
api_v1_router.include_router(
    water_quality_router,
    prefix=ROUTE_PREFIXES["water_quality"],
    tags=["Water Quality"]
)
api_v1_router.include_router(plant_data_router, prefix=ROUTE_PREFIXES["plant_data"], tags=["Plant Data"])


@api_v1_router.get(
    "/",
    summary="API v1 Information",
    description="Get API v1 version information and available routes",
    tags=["API Info"]
)
async def api_v1_info() -> dict:
    return get_api_info()
