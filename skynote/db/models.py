"""SQLAlchemy models for the key-value preference store."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, String, Text, func

from .session import Base


class Preference(Base):
    """One text value per key (reminder snapshot, client preferences)."""

    __tablename__ = "preferences"

    key = Column(String(128), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
