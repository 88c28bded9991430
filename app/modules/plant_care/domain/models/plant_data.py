# 📄 File: app/modules/plant_care/domain/models/plant_data.py
# 🧭 Purpose (Layman Explanation):
# What we learn about a species from the public plant database: its names, how much water and sun
# it likes, and a picture, plus the fuller fact sheet shown when someone opens one species.
# 🧪 Purpose (Technical Summary):
# Pydantic value objects for plant database lookups (PlantSpecies, PlantSpeciesDetails,
# PlantSearchPage). Each parses the provider's raw JSON, fills documented defaults and
# normalises fields that arrive either as a scalar or as a list.
# 🔗 Dependencies:
# pydantic, typing, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# plant_catalog.py (interface), perenual_catalog.py (parsing), plant data query handlers

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from app.shared.utils.helpers import safe_int


def _as_list(value: Any) -> List[str]:
    """Scalar -> one-item list, list -> its non-empty strings, anything else -> empty."""
    if isinstance(value, list):
        return [str(item).strip() for item in value if item is not None and str(item).strip()]
    if isinstance(value, str) and value.strip():
        return [value.strip()]
    return []


def _list_only(value: Any) -> List[str]:
    return _as_list(value) if isinstance(value, list) else []


def _first(value: Any) -> str:
    items = _as_list(value)
    return items[0] if items else ""


def _text(value: Any, default: str = "") -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _image_url(payload: Dict[str, Any], *keys: str) -> Optional[str]:
    image = payload.get("default_image")
    if not isinstance(image, dict):
        return None
    for key in keys:
        url = image.get(key)
        if isinstance(url, str) and url.strip():
            return url.strip()
    return None


class PlantSpecies(BaseModel):
    """One species as listed by a plant database search"""
    species_id: int
    name: str
    scientific_name: str = ""
    other_names: List[str] = Field(default_factory=list)
    cycle: str = "perennial"
    watering: str = "moderate"
    sunlight: List[str] = Field(default_factory=lambda: ["full sun"])
    image_url: Optional[str] = None

    @classmethod
    def from_catalog_payload(cls, payload: Dict[str, Any]) -> "PlantSpecies":
        return cls(**_species_fields(payload), image_url=_image_url(payload, "regular_url", "thumbnail"))


class PlantSpeciesDetails(PlantSpecies):
    """Full fact sheet for one species"""
    family: str = ""
    origin: List[str] = Field(default_factory=list)
    plant_type: str = "other"
    watering_period: str = "weekly"
    pruning_month: List[str] = Field(default_factory=list)
    growth_rate: str = "moderate"
    maintenance: str = "moderate"
    care_level: str = "moderate"
    flower_color: str = ""
    soil_type: List[str] = Field(default_factory=list)
    propagation: List[str] = Field(default_factory=list)
    harvest_season: str = ""
    description: str = ""
    indoor: bool = False
    medicinal: bool = False
    edible: bool = False

    @classmethod
    def from_catalog_payload(cls, payload: Dict[str, Any]) -> "PlantSpeciesDetails":
        return cls(
            **_species_fields(payload),
            image_url=_image_url(payload, "regular_url", "original_url"),
            family=_text(payload.get("family")),
            origin=_list_only(payload.get("origin")),
            plant_type=_text(payload.get("type"), "other"),
            watering_period=_text(payload.get("watering_period"), "weekly"),
            pruning_month=_list_only(payload.get("pruning_month")),
            growth_rate=_text(payload.get("growth_rate"), "moderate"),
            maintenance=_text(payload.get("maintenance"), "moderate"),
            care_level=_text(payload.get("care_level"), "moderate"),
            flower_color=_text(payload.get("flower_color")),
            soil_type=_list_only(payload.get("soil")),
            propagation=_list_only(payload.get("propagation")),
            harvest_season=_text(payload.get("harvest_season")),
            description=_text(payload.get("description")),
            indoor=payload.get("indoor") is True,
            medicinal=payload.get("medicinal") is True,
            edible=payload.get("edible_fruit") is True,
        )


class PlantSearchPage(BaseModel):
    """One page of plant database search results"""
    query: str
    results: List[PlantSpecies] = Field(default_factory=list)
    total: int = 0
    current_page: int = 1
    last_page: int = 1

    @classmethod
    def from_catalog_payload(cls, query: str, page: int, payload: Dict[str, Any]) -> "PlantSearchPage":
        raw = payload.get("data")
        results = [
            PlantSpecies.from_catalog_payload(item)
            for item in (raw if isinstance(raw, list) else [])
            if isinstance(item, dict) and safe_int(item.get("id"), 0) > 0
        ]
        current_page = safe_int(payload.get("current_page"), page)
        return cls(
            query=query,
            results=results,
            total=safe_int(payload.get("total"), len(results)),
            current_page=current_page,
            last_page=max(safe_int(payload.get("last_page"), current_page), current_page),
        )

    @property
    def names(self) -> List[str]:
        return [species.name for species in self.results]


def _species_fields(payload: Dict[str, Any]) -> Dict[str, Any]:
    scientific_name = _first(payload.get("scientific_name"))
    return {
        "species_id": safe_int(payload.get("id"), 0),
        "name": _text(payload.get("common_name")) or scientific_name or "Unknown plant",
        "scientific_name": scientific_name,
        "other_names": _as_list(payload.get("other_name")),
        "cycle": _text(payload.get("cycle"), "perennial"),
        "watering": _text(payload.get("watering"), "moderate"),
        "sunlight": _as_list(payload.get("sunlight")) or ["full sun"],
    }
