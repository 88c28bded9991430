# 📄 File: app/modules/plant_care/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where plants and care logs are stored.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations.
# 🔗 Dependencies:
# SQLAlchemy, app.shared.infrastructure.database
# 🔄 Connected Modules / Calls From:
# presentation.dependencies, DatabaseConnectionManager.create_schema
