# 📄 File: app/modules/plant_care/infrastructure/external/perenual_catalog.py
# 🧭 Purpose (Layman Explanation):
# Our plant encyclopedia. It looks species up in the Perenual plant database so gardeners can
# search for a plant by name and read its fact sheet before adding it.
#
# 🧪 Purpose (Technical Summary):
# PlantCatalog implementation over the Perenual REST API (species-list and species/details).
# Reuses APIClient for sessions, retries and call timing; Perenual authenticates with a ``key``
# query parameter and its failures map onto ExternalServiceError / RateLimitError / NotFoundError
# instead of the AI provider family.
#
# 🔗 Dependencies:
# - app.shared.infrastructure.external_apis.api_client (aiohttp + tenacity client)
# - app.modules.plant_care.domain (catalog interface, plant data models)
# - app.shared.config.settings (Perenual configuration)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_care.presentation.dependencies (catalog provider)
# - app.main (client shutdown on application exit)

from typing import Any, Dict, Mapping, Optional

from app.modules.plant_care.domain.models.plant_data import PlantSearchPage, PlantSpeciesDetails
from app.modules.plant_care.domain.services.plant_catalog import PlantCatalog
from app.shared.config.settings import Settings
from app.shared.core.exceptions import ExternalServiceError, NotFoundError, RateLimitError
from app.shared.infrastructure.external_apis.api_client import APIClient, parse_retry_after
from app.shared.utils.helpers import safe_int
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

SERVICE_NAME = "Perenual"


def catalog_error_for_status(
    service: str,
    status_code: int,
    body: str = "",
    headers: Optional[Mapping[str, str]] = None,
) -> Exception:
    """
    Map a failed plant database response onto application errors.

    429 -> rate limited, 404 -> not found, anything else -> external service error.
    """
    headers = headers or {}
    snippet = (body or "")[:300]

    if status_code == 429:
        retry_after = parse_retry_after(headers.get("Retry-After") or headers.get("retry-after"))
        return RateLimitError(service=service, service_status=status_code, retry_after=retry_after)
    if status_code == 404:
        return NotFoundError("Plant species not found", resource_type="plant_species")
    return ExternalServiceError(
        message=f"{service} request failed with status {status_code}",
        service=service,
        service_status=status_code,
        details={"service_response": snippet} if snippet else None,
    )


class PerenualAPIClient(APIClient):
    """APIClient variant that sends the API key as a query parameter."""

    def _get_default_headers(self) -> Dict[str, str]:
        headers = super()._get_default_headers()
        headers.pop('Authorization', None)
        return headers

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await super().get(endpoint, {**(params or {}), "key": self.api_key})

    def _status_error(self, status_code: int, body: str, headers: Mapping[str, str]) -> Exception:
        return catalog_error_for_status(self.api_name, status_code, body, headers)

    def _transport_error(self, message: str, details: Optional[Dict[str, Any]] = None) -> Exception:
        return ExternalServiceError(message=message, service=self.api_name, details=details)


class PerenualPlantCatalog(PlantCatalog):
    """
    Perenual-backed plant catalog.

    The client only needs ``get`` and ``close``; tests pass a stub.
    """

    def __init__(self, client: APIClient):
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "PerenualPlantCatalog":
        config = settings.get_plant_data_api_config()
        client = PerenualAPIClient(
            base_url=config["api_url"],
            api_key=config["api_key"],
            api_name=SERVICE_NAME,
            timeout=config["timeout"],
            max_retries=config["max_retries"],
        )
        return cls(client)

    async def close(self):
        await self.client.close()

    async def search(self, query: str, page: int = 1) -> PlantSearchPage:
        payload = await self.client.get("/species-list", {"q": query, "page": page})
        if not isinstance(payload.get("data"), list):
            logger.warning("Plant search reply had no result list", extra={"query": query, "page": page})
            raise ExternalServiceError(
                message=f"{SERVICE_NAME} returned an unreadable search response",
                service=SERVICE_NAME,
            )
        return PlantSearchPage.from_catalog_payload(query, page, payload)

    async def get_details(self, species_id: int) -> PlantSpeciesDetails:
        try:
            payload = await self.client.get(f"/species/details/{species_id}")
        except NotFoundError:
            raise NotFoundError("Plant species not found", resource_type="plant_species", resource_id=str(species_id))

        # Unknown ids can come back as 200 with an empty body
        if safe_int(payload.get("id"), 0) <= 0:
            raise NotFoundError("Plant species not found", resource_type="plant_species", resource_id=str(species_id))
        return PlantSpeciesDetails.from_catalog_payload(payload)
