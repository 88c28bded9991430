# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains all the settings and configuration files that tell our Plant Care app
# how to connect to databases, external services, and adjust its behavior.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the pydantic-settings Settings object.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - All modules requiring configuration
# - Infrastructure components

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Database connection URL and pool sizing
- AI provider credentials, models and retries
- Care schedule and diagnosis scoring defaults
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings", 
    "Settings",
]