# 📄 File: app/modules/plant_care/application/queries/__init__.py
# 🧭 Purpose (Layman Explanation):
# The "show me something" requests: plants, care history and advice.
# 🧪 Purpose (Technical Summary):
# CQRS query definitions (pydantic).
# 🔗 Dependencies:
# pydantic, domain models
# 🔄 Connected Modules / Calls From:
# Query handlers, API endpoints
