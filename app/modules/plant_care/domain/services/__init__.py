# 📄 File: app/modules/plant_care/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The plant care rules engine: schedules, health status, seasons and diagnosis trust.
# 🧪 Purpose (Technical Summary):
# Pure domain services (CareScheduleEngine, DiagnosisAccuracyScorer, health and season helpers), the AI
# advisor interface and the plant catalog interface.
# 🔗 Dependencies:
# Domain models, app.shared.utils
# 🔄 Connected Modules / Calls From:
# Command and query handlers
