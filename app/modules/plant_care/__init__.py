# 📄 File: app/modules/plant_care/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes everything about looking after plants: the user's garden, care schedules, the care diary, disease checks and AI gardening advice.
# 🧪 Purpose (Technical Summary):
# Package initialization for the plant care module implementing domain-driven design with CQRS for plant lifecycle, care scheduling, care logging and AI diagnosis.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, aiohttp, app.shared
# 🔄 Connected Modules / Calls From:
# app.main.py, app.api.v1.router

"""
Plant Care Module

This module handles:
- Plant management (add, edit, soft delete) with AI-generated care profiles
- Care scheduling: next watering / fertilizing dates and harvest projection
- Care logging and "needs care today" reminders
- AI disease detection with a diagnosis accuracy score
- Seasonal tips and water quality advice

Architecture follows Domain-Driven Design:
- Domain: Entities, schedule engine, accuracy scorer, repository interfaces
- Application: Commands, queries and their handlers
- Infrastructure: SQLAlchemy persistence and the Groq AI advisor
- Presentation: API endpoints, schemas and dependency providers
"""

__version__ = "1.0.0"
