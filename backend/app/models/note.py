from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func
from app.db import Base


class Note(Base):
    """Free-text note pinned to a month (camps, comps, focus areas)."""

    __tablename__ = "notes"

    id = Column(Integer, primary_key=True, index=True)
    year = Column(Integer, nullable=False, index=True)
    month = Column(Integer, nullable=False)  # 1-12
    kind = Column(String(10), nullable=False, server_default="info")
    text = Column(String, nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
