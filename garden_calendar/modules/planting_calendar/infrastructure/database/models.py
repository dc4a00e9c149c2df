# 📄 File: garden_calendar/modules/planting_calendar/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how plants and calendar entries are laid out in database tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the global plant catalog and per-user calendar entries.
# Entry dates are stored as the raw VARCHAR literal and plant snapshots as JSON, so a
# malformed legacy row still loads and is skipped at aggregation time.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - garden_calendar.shared.infrastructure.database.connection (Base)
#
# 🔄 Connected Modules / Calls From:
# - calendar_entry_repository_impl.py, plant_repository_impl.py
# - migrations/versions (schema)

"""
SQLAlchemy Models for the Planting Calendar

Models:
- PlantModel: catalog plants, unique by id, prefix-searchable by normalized_name
- CalendarEntryModel: one row per (user_id, entry_id); entry_id is the plant id
"""

from sqlalchemy import JSON, Column, DateTime, Index, String, Text, func

from garden_calendar.shared.infrastructure.database.connection import Base


class PlantModel(Base):
    """Catalog plant."""

    __tablename__ = "plants"

    id = Column(String(200), primary_key=True)
    display_name = Column(String(200), nullable=False)
    normalized_name = Column(String(200), nullable=False, index=True)
    sun_preference = Column(String(50), nullable=False)
    watering_preference = Column(String(50), nullable=False)
    general_information = Column(Text, nullable=False, default="")
    image_url = Column(Text, nullable=False, default="")
    user_query = Column(String(200), nullable=True)
    created_by = Column(String(128), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self):
        return f"<PlantModel(id={self.id}, display_name={self.display_name})>"


class CalendarEntryModel(Base):
    """A user's planting event, keyed by plant id within the user's calendar."""

    __tablename__ = "calendar_entries"

    user_id = Column(String(128), primary_key=True)
    entry_id = Column(String(200), primary_key=True)
    date = Column(String(10), nullable=False)
    plant = Column(JSON, nullable=False)
    title = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index("ix_calendar_entries_user_date", "user_id", "date"),
    )

    def __repr__(self):
        return f"<CalendarEntryModel(user_id={self.user_id}, entry_id={self.entry_id}, date={self.date})>"
