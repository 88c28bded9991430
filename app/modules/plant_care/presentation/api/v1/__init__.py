# 📄 File: app/modules/plant_care/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the plant care endpoints.
# 🧪 Purpose (Technical Summary):
# FastAPI routers for plants, care logs, disease detection, water quality and plant data.
# 🔗 Dependencies:
# FastAPI, application handlers
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
