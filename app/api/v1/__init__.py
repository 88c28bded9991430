# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes version 1 of our API, so new versions can be added later without breaking
# existing apps.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1: version metadata, route prefixes and OpenAPI tags
# shared by the v1 router.
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main.py

"""
Plant Care Application API Version 1

Core Features:
- Plant management with AI-generated care schedules
- Care logging and "needs care today" reminders
- AI disease detection with accuracy scoring
- Seasonal tips and water quality advice
- Plant species search and AI plant suggestions

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoints
"""

from typing import Any, Dict

__version__ = "1.0.0"
__api_version__ = "v1"

# API v1 route prefixes
ROUTE_PREFIXES = {
    "plants": "/plants",
    "care": "/care",
    "disease": "/disease",
    "water_quality": "/water-quality",
    "plant_data": "/plant-data",
}

# API v1 tags for OpenAPI documentation
API_TAGS = [
    {"name": "Health Check", "description": "Service and database health"},
    {"name": "Plants", "description": "Plant management, schedules, seasonal tips and images"},
    {"name": "Care", "description": "Care logging and history"},
    {"name": "Disease Detection", "description": "AI plant health diagnosis with accuracy scoring"},
    {"name": "Water Quality", "description": "AI water source advice"},
    {"name": "Plant Data", "description": "Plant species database search and AI plant suggestions"},
]


def get_api_info() -> Dict[str, Any]:
    """API v1 metadata for the info endpoint."""
    return {
        "version": __version__,
        "api_version": __api_version__,
        "routes": ROUTE_PREFIXES,
        "tags": [tag["name"] for tag in API_TAGS],
    }
