# 📄 File: app/modules/plant_care/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# The workers that carry out each plant care request.
# 🧪 Purpose (Technical Summary):
# CQRS command and query handlers orchestrating repositories and domain services.
# 🔗 Dependencies:
# Domain services and repository interfaces
# 🔄 Connected Modules / Calls From:
# presentation.dependencies, API endpoints
