# 📄 File: app/modules/plant_care/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# What the plant care endpoints accept and return.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas and the success envelope.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# presentation.api.v1 routers
