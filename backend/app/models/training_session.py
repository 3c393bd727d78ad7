from sqlalchemy import Column, Integer, String, DateTime, Numeric
from sqlalchemy.sql import func
from app.db import Base

class TrainingSession(Base):
    """A logged class or solo drilling session."""

    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)

    # Local date/time of the session
    date = Column(DateTime(timezone=True), nullable=False, index=True)

    # Comma-joined labels, e.g. "Fundamentals, Open Mat" or "Drilling"
    class_type = Column(String, nullable=False, server_default="Class")
    instructor = Column(String, nullable=False, server_default="")
    # Comma-joined technique tags, e.g. "Guard, Passing"
    technique = Column(String, nullable=False, server_default="")
    description = Column(String, nullable=False, server_default="")

    hours = Column(Numeric(5, 2), nullable=True)  # e.g. 1.50

    style = Column(String(20), nullable=False, server_default="unknown")  # gi, nogi
    url = Column(String, nullable=True)

    # Self-assessment: NONE, POOR, AVERAGE, EXCELLENT
    performance = Column(String(10), nullable=False, server_default="NONE")
    performance_notes = Column(String, nullable=True)

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
