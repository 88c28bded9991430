# 📄 File: app/modules/plant_care/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The doors into plant care from the web: endpoints and request/response shapes.
# 🧪 Purpose (Technical Summary):
# Presentation layer with FastAPI routers, schemas and dependency providers.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
