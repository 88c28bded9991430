# 📄 File: app/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# Home of the app's feature modules; each one owns a slice of the plant care experience.
# 🧪 Purpose (Technical Summary):
# Namespace package for domain-driven modules (modular monolith).
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main
