# 📄 File: app/modules/plant_care/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Plant care web endpoints grouped by API version.
# 🧪 Purpose (Technical Summary):
# API package for routers and schemas.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
