# 📄 File: app/modules/plant_care/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of plant care data: plants, care diary entries, diagnoses and AI advice.
# 🧪 Purpose (Technical Summary):
# Pydantic domain entities and value objects for the plant care module.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, handlers
