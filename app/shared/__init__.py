# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The toolbox every part of the Plant Care app borrows from: settings, security, database and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, exceptions, auth dependencies, database and HTTP
# infrastructure and structured logging used by the feature modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care
# - app.main, app.api

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management (pydantic-settings)
- Exception hierarchy and bearer token authentication
- Async SQLAlchemy engine and sessions
- Retrying HTTP client for AI providers
- JSON structured logging
"""

__all__ = []
