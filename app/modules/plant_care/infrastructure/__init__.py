# 📄 File: app/modules/plant_care/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# How plant care talks to the outside world: the database and the AI service.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer with SQLAlchemy repositories and the Groq advisor.
# 🔗 Dependencies:
# SQLAlchemy, aiohttp
# 🔄 Connected Modules / Calls From:
# presentation.dependencies
