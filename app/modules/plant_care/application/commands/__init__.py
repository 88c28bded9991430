# 📄 File: app/modules/plant_care/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# The "do something" requests: add or edit plants, log care, check for disease.
# 🧪 Purpose (Technical Summary):
# CQRS command definitions (pydantic).
# 🔗 Dependencies:
# pydantic, domain models
# 🔄 Connected Modules / Calls From:
# Command handlers, API endpoints
