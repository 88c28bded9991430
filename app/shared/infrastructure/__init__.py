"""
Infrastructure layer package for Plant Care Application.
Provides the async database engine and sessions and the external AI API client.
"""

__all__ = [
    "database",
    "external_apis",
]
