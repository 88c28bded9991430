# 📄 File: app/shared/infrastructure/external_apis/__init__.py

# 🧭 Purpose (Layman Explanation):
# The phone line to outside services, used to ask the AI gardener for advice and diagnoses and to
# look species up in the plant database.

# 🧪 Purpose (Technical Summary):
# External API infrastructure: a retrying aiohttp client that maps provider HTTP statuses to
# typed AIProviderError subclasses (or a subclass-chosen error family).

# 🔗 Dependencies:
# - api_client: Generic HTTP client with retry logic

# 🔄 Connected Modules / Calls From:
# Used by: app.modules.plant_care.infrastructure.external.groq_advisor, perenual_catalog

from .api_client import APIClient, parse_retry_after, provider_error_for_status

__all__ = [
    'APIClient',
    'parse_retry_after',
    'provider_error_for_status',
]
