# Trailhead model: static autocomplete reference data

from sqlalchemy import Column, Float, Integer, String

from app.models.base import Base


class Trailhead(Base):
    """Trailheads table. Seeded once at startup, read-only afterwards."""

    __tablename__ = "trailheads"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False, unique=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
