# 📄 File: app/modules/plant_care/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how plants and their care diaries are stored in the database tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the plant care module. The Plant aggregate is flattened into one
# "plants" table (care schedule and plant info as columns, images as JSON); care logs live in
# "care_logs" with measurements flattened. Portable column types keep SQLite and PostgreSQL working.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (declarative Base)
#
# 🔄 Connected Modules / Calls From:
# - plant_repository_impl.py and care_log_repository_impl.py (CRUD operations)
# - DatabaseConnectionManager.create_schema (table creation on startup)

"""
SQLAlchemy Models for Plant Care

Models:
- PlantModel: Plant with flattened care schedule, plant info and image gallery
- CareLogModel: One recorded care activity with optional measurements

IDs are stored as 36-character UUID strings and all timestamps are UTC.
"""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)

from app.shared.infrastructure.database.connection import Base


# =============================================================================
# PLANT MODEL
# =============================================================================

class PlantModel(Base):
    """SQLAlchemy model for a user's plant"""
    __tablename__ = "plants"

    plant_id = Column(String(36), primary_key=True, nullable=False)
    user_id = Column(String(64), nullable=False, index=True, comment="Owner (JWT subject)")

    nickname = Column(String(100), nullable=False)
    species = Column(String(150), nullable=False)
    scientific_name = Column(String(200), nullable=False, default="")
    category = Column(String(20), nullable=False, default="other")
    location = Column(String(20), nullable=False, default="balcony")
    sunlight_received = Column(Float, nullable=False, default=6)
    planted_date = Column(DateTime(timezone=True), nullable=False)
    notes = Column(Text, nullable=False, default="")
    images = Column(JSON, nullable=False, default=list, comment="[{url, note, uploaded_at}]")

    # Care schedule
    watering_frequency = Column(Integer, nullable=False, default=2)
    last_watered = Column(DateTime(timezone=True), nullable=True)
    next_watering_due = Column(DateTime(timezone=True), nullable=True, index=True)
    fertilizing_frequency = Column(Integer, nullable=False, default=30)
    last_fertilized = Column(DateTime(timezone=True), nullable=True)
    next_fertilizing_due = Column(DateTime(timezone=True), nullable=True)
    pruning_frequency = Column(Integer, nullable=False, default=60)
    last_pruned = Column(DateTime(timezone=True), nullable=True)
    next_pruning_due = Column(DateTime(timezone=True), nullable=True)

    # Plant info
    watering_needs = Column(String(50), nullable=False, default="moderate")
    sunlight_needs = Column(String(100), nullable=False, default="4-6 hours")
    soil_type = Column(String(150), nullable=False, default="well-drained")
    ideal_temperature = Column(String(50), nullable=False, default="20-30°C")
    growth_time = Column(Integer, nullable=False, default=90, comment="Days to maturity")
    estimated_harvest_date = Column(DateTime(timezone=True), nullable=True)

    status = Column(String(20), nullable=False, default="healthy")
    health_score = Column(Integer, nullable=False, default=100)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index("ix_plants_user_active", "user_id", "is_active"),
    )

    def __repr__(self):
        return f"<PlantModel(plant_id={self.plant_id}, nickname={self.nickname})>"


# =============================================================================
# CARE LOG MODEL
# =============================================================================

class CareLogModel(Base):
    """SQLAlchemy model for a care diary entry"""
    __tablename__ = "care_logs"

    care_log_id = Column(String(36), primary_key=True, nullable=False)
    user_id = Column(String(64), nullable=False, index=True)
    plant_id = Column(String(36), ForeignKey("plants.plant_id"), nullable=False)
    activity_type = Column(String(20), nullable=False)
    activity_date = Column(DateTime(timezone=True), nullable=False)
    notes = Column(Text, nullable=False, default="")

    # Measurements; has_measurements distinguishes "none recorded" from all-default values
    has_measurements = Column(Boolean, nullable=False, default=False)
    height = Column(Float, nullable=True)
    measured_health_score = Column(Integer, nullable=True)
    observed_issues = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index("ix_care_logs_plant_date", "plant_id", "activity_date"),
        Index("ix_care_logs_user_date", "user_id", "activity_date"),
    )

    def __repr__(self):
        return f"<CareLogModel(care_log_id={self.care_log_id}, activity_type={self.activity_type})>"
