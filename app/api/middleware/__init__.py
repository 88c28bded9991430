# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# The checkpoint every request passes through before reaching the plant care endpoints.
# 🧪 Purpose (Technical Summary):
# Middleware package exports. Authentication is handled per route by the bearer-token dependency;
# errors by the application exception handlers in app.main.
# 🔗 Dependencies:
# starlette middleware
# 🔄 Connected Modules / Calls From:
# app.main.py

from .logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
