# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'app' folder holds the Plant Care backend and records its version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version and package metadata for the plant care
# scheduling and diagnosis API.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - pyproject.toml (package discovery)

"""
Plant Care Application - Care Scheduling and Disease Diagnosis API

Backend API that keeps watering, fertilizing and pruning schedules for a user's
plants, logs care activities and scores AI disease diagnoses for reliability.
"""

__version__ = "1.0.0"
__title__ = "Plant Care Backend API"
__description__ = "Plant care scheduling and AI diagnosis API"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
