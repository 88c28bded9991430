# 📄 File: app/modules/plant_care/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The contracts for saving and loading plants and care logs.
# 🧪 Purpose (Technical Summary):
# Abstract repository interfaces implemented in the infrastructure layer.
# 🔗 Dependencies:
# abc, domain models
# 🔄 Connected Modules / Calls From:
# Handlers, SQLAlchemy implementations, test fakes
