import pytest

from app.modules.plant_care.domain.models.plant_data import PlantSearchPage, PlantSpeciesDetails
from app.modules.plant_care.infrastructure.external.perenual_catalog import (
    PerenualAPIClient,
    PerenualPlantCatalog,
    catalog_error_for_status,
)
from app.shared.core.exceptions import ExternalServiceError, NotFoundError, RateLimitError

SEARCH_REPLY = {
    "data": [
        {
            "id": 2961,
            "common_name": "Tulsi",
            "scientific_name": ["Ocimum tenuiflorum", "Ocimum sanctum"],
            "other_name": ["Holy Basil"],
            "cycle": "Perennial",
            "watering": "Average",
            "sunlight": "full sun",
            "default_image": {"regular_url": None, "thumbnail": "https://img.example/tulsi-thumb.jpg"},
        },
        {"id": 7, "common_name": None, "scientific_name": "Rosa indica", "default_image": None},
        {"common_name": "No id, skipped"},
    ],
    "total": 41,
    "current_page": 2,
    "last_page": 5,
}

DETAILS_REPLY = {
    "id": 2961,
    "common_name": "Tulsi",
    "scientific_name": ["Ocimum tenuiflorum"],
    "family": "Lamiaceae",
    "origin": ["India"],
    "type": "herb",
    "watering_period": None,
    "pruning_month": ["March", "April"],
    "soil": "loam",
    "propagation": ["Seed", "Cutting"],
    "indoor": False,
    "medicinal": True,
    "edible_fruit": None,
    "default_image": {"regular_url": "https://img.example/tulsi.jpg"},
}


class StubClient:
    def __init__(self, reply=None, error=None):
        self.reply = reply if reply is not None else {}
        self.error = error
        self.requests = []

    async def get(self, endpoint, params=None):
        self.requests.append((endpoint, params))
        if self.error is not None:
            raise self.error
        return self.reply

    async def close(self):
        pass


class TestPayloadMapping:
    def test_search_page(self):
        page = PlantSearchPage.from_catalog_payload("tulsi", 2, SEARCH_REPLY)
        assert [species.species_id for species in page.results] == [2961, 7]
        assert (page.total, page.current_page, page.last_page) == (41, 2, 5)

        tulsi = page.results[0]
        assert tulsi.scientific_name == "Ocimum tenuiflorum"
        assert tulsi.other_names == ["Holy Basil"]
        assert tulsi.sunlight == ["full sun"]
        assert tulsi.image_url == "https://img.example/tulsi-thumb.jpg"

    def test_search_defaults(self):
        rose = PlantSearchPage.from_catalog_payload("rose", 1, SEARCH_REPLY).results[1]
        assert rose.name == "Rosa indica"
        assert rose.cycle == "perennial"
        assert rose.watering == "moderate"
        assert rose.sunlight == ["full sun"]
        assert rose.image_url is None

    def test_details(self):
        details = PlantSpeciesDetails.from_catalog_payload(DETAILS_REPLY)
        assert details.family == "Lamiaceae"
        assert details.plant_type == "herb"
        assert details.watering_period == "weekly"
        assert details.pruning_month == ["March", "April"]
        # Only list-shaped soil is kept
        assert details.soil_type == []
        assert details.propagation == ["Seed", "Cutting"]
        assert details.medicinal is True
        assert details.edible is False
        assert details.image_url == "https://img.example/tulsi.jpg"


class TestPerenualPlantCatalog:
    async def test_search_sends_query_and_page(self):
        catalog = PerenualPlantCatalog(StubClient(SEARCH_REPLY))
        page = await catalog.search("tulsi", 2)
        assert catalog.client.requests == [("/species-list", {"q": "tulsi", "page": 2})]
        assert page.query == "tulsi"
        assert len(page.results) == 2

    async def test_search_without_result_list(self):
        catalog = PerenualPlantCatalog(StubClient({"message": "Surpassed API Rate Limit"}))
        with pytest.raises(ExternalServiceError):
            await catalog.search("tulsi")

    async def test_details(self):
        catalog = PerenualPlantCatalog(StubClient(DETAILS_REPLY))
        details = await catalog.get_details(2961)
        assert catalog.client.requests == [("/species/details/2961", None)]
        assert details.name == "Tulsi"

    async def test_details_empty_reply_is_not_found(self):
        catalog = PerenualPlantCatalog(StubClient({}))
        with pytest.raises(NotFoundError) as exc_info:
            await catalog.get_details(42)
        assert exc_info.value.details["resource_id"] == "42"

    async def test_details_404_keeps_species_id(self):
        catalog = PerenualPlantCatalog(StubClient(error=NotFoundError("Plant species not found")))
        with pytest.raises(NotFoundError) as exc_info:
            await catalog.get_details(42)
        assert exc_info.value.details == {"resource_type": "plant_species", "resource_id": "42"}


class TestPerenualAPIClient:
    def test_no_bearer_header(self):
        client = PerenualAPIClient("https://perenual.com/api", "secret", "Perenual")
        assert "Authorization" not in client._get_default_headers()

    async def test_key_sent_as_query_parameter(self, monkeypatch):
        client = PerenualAPIClient("https://perenual.com/api", "secret", "Perenual")
        calls = []

        async def fake_request(method, endpoint, payload=None, params=None):
            calls.append((method, endpoint, params))
            return {}

        monkeypatch.setattr(client, "request", fake_request)
        await client.get("/species-list", {"q": "rose"})
        assert calls == [("GET", "/species-list", {"q": "rose", "key": "secret"})]

    def test_transport_failures_are_external_service_errors(self):
        client = PerenualAPIClient("https://perenual.com/api", "secret", "Perenual")
        error = client._transport_error("Perenual request timed out")
        assert isinstance(error, ExternalServiceError)
        assert error.status_code == 502


class TestCatalogErrorForStatus:
    def test_rate_limited(self):
        error = catalog_error_for_status("Perenual", 429, headers={"Retry-After": "60"})
        assert isinstance(error, RateLimitError)
        assert error.status_code == 429
        assert error.retry_after == 60

    def test_not_found(self):
        assert isinstance(catalog_error_for_status("Perenual", 404), NotFoundError)

    @pytest.mark.parametrize("status_code", [401, 500, 503])
    def test_other_statuses(self, status_code):
        error = catalog_error_for_status("Perenual", status_code, body="upstream broke")
        assert type(error) is ExternalServiceError
        assert error.status_code == 502
        assert error.details["service_status"] == status_code
        assert error.details["service_response"] == "upstream broke"
