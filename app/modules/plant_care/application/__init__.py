# 📄 File: app/modules/plant_care/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# The app's plant care use cases: the things a user can ask for or do.
# 🧪 Purpose (Technical Summary):
# Application layer with CQRS commands, queries and handlers.
# 🔗 Dependencies:
# Domain layer
# 🔄 Connected Modules / Calls From:
# Presentation layer
