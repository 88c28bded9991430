# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a package: the front door where web and mobile requests arrive.
# 🧪 Purpose (Technical Summary):
# Package initialization for the HTTP layer: versioned routers under v1 and the request logging
# middleware.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main.py

"""
Plant Care Application API Package

Structure:
    api/
    ├── __init__.py          # This file
    ├── middleware/
    │   └── logging.py       # Request ID and access logging
    └── v1/
        ├── __init__.py      # Route prefixes and OpenAPI tags
        ├── router.py        # Main v1 router
        └── health.py        # Health check endpoint
"""

API_PREFIX = "/api"
CURRENT_VERSION = "v1"
SUPPORTED_VERSIONS = ["v1"]

__all__ = [
    "API_PREFIX",
    "CURRENT_VERSION",
    "SUPPORTED_VERSIONS",
]
