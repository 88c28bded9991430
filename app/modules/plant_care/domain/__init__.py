# 📄 File: app/modules/plant_care/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core rules of plant care - what a plant is, when it needs water, and how much to trust a diagnosis.
# 🧪 Purpose (Technical Summary):
# Domain layer initialization re-exporting the plant care entities and value objects.
# 🔗 Dependencies:
# Domain models, services and repository interfaces from subpackages
# 🔄 Connected Modules / Calls From:
# Application, infrastructure and presentation layers

"""
Plant Care Domain Layer

Domain Models:
- Plant (CareSchedule, PlantInfo, PlantImage): the plant aggregate
- CareLog (CareMeasurements): diary entries
- DiseaseAnalysis, PlantContext, AccuracyAssessment: diagnosis value objects
- CareProfile, SeasonalTips, WaterQualityAdvice, PlantSuggestions: AI advice value objects
- PlantSpecies, PlantSpeciesDetails, PlantSearchPage: plant database lookups

Domain Services:
- CareScheduleEngine: due-date derivation
- DiagnosisAccuracyScorer: diagnosis trust score
- plant_health / season helpers
- PlantCareAdvisor: AI advisor interface
- PlantCatalog: plant species database interface
"""

from .models.care_log import ActivityType, CareLog, CareMeasurements
from .models.plant import CareSchedule, Plant, PlantCategory, PlantInfo, PlantLocation, PlantStatus

__all__ = [
    "ActivityType",
    "CareLog",
    "CareMeasurements",
    "CareSchedule",
    "Plant",
    "PlantCategory",
    "PlantInfo",
    "PlantLocation",
    "PlantStatus",
]
