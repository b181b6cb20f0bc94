# User model: leaders and participants share one table

from sqlalchemy import Column, String

from app.models.base import Base


class User(Base):
    """Users table. uuid is supplied by the client and never verified."""

    __tablename__ = "users"

    uuid = Column(String(64), primary_key=True)
    name = Column(String(100), nullable=False)
    phone = Column(String(40), nullable=True)
    license_plate = Column(String(20), nullable=True)
    emergency_contact = Column(String(200), nullable=True)
