from sqlalchemy import Column, DateTime, Integer, Numeric, String
from sqlalchemy.sql import func
from app.db import Base


class Goal(Base):
    __tablename__ = "goals"

    # One goal per (year, metric); saves overwrite the whole row
    year = Column(Integer, primary_key=True, nullable=False)
    metric = Column(String(10), primary_key=True, nullable=False)  # classes, hours

    target = Column(Numeric(7, 2), nullable=False)
    cadence = Column(String(10), nullable=False, server_default="weekly")

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
