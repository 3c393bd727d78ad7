import logging
from datetime import date, datetime, time, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.normalize import build_update
from app.db import get_db
from app.models.training_session import TrainingSession
from app.schemas.session import SessionCreate, SessionRead, SessionUpdate

router = APIRouter(prefix="/classes", tags=["classes"])
logger = logging.getLogger(__name__)


def _get_or_404(db: Session, session_id: int) -> TrainingSession:
    row = db.query(TrainingSession).filter(TrainingSession.id == session_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Class not found")
    return row


@router.get("/", response_model=list[SessionRead])
def list_sessions(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    """
    List classes and drilling sessions, newest first.

    Optional bounds are inclusive calendar days:
      GET /classes?start_date=2025-01-01&end_date=2025-01-31
    """
    query = db.query(TrainingSession)

    if start_date is not None:
        query = query.filter(TrainingSession.date >= datetime.combine(start_date, time()))
    if end_date is not None:
        next_day = datetime.combine(end_date + timedelta(days=1), time())
        query = query.filter(TrainingSession.date < next_day)

    return query.order_by(TrainingSession.date.desc()).all()


@router.get("/{session_id}", response_model=SessionRead)
def get_session(session_id: int, db: Session = Depends(get_db)):
    return _get_or_404(db, session_id)


@router.post("/", response_model=SessionRead, status_code=201)
def create_session(payload: SessionCreate, db: Session = Depends(get_db)):
    row = TrainingSession(
        date=payload.date,
        class_type=payload.class_type,
        instructor=payload.instructor,
        technique=payload.technique,
        description=payload.description,
        hours=payload.hours,
        style=payload.style,
        url=payload.url,
        performance=payload.performance.value,
        performance_notes=payload.performance_notes,
    )

    db.add(row)
    db.commit()
    db.refresh(row)

    logger.info("Logged %s on %s (id=%s)", row.class_type, row.date, row.id)
    return row


@router.put("/{session_id}", response_model=SessionRead)
def update_session(session_id: int, payload: SessionUpdate, db: Session = Depends(get_db)):
    row = _get_or_404(db, session_id)

    update_data = payload.model_dump(exclude_unset=True)
    update_data.pop("id", None)

    data = build_update(update_data)
    if not data:
        raise HTTPException(status_code=400, detail="No valid fields provided")

    for key, value in data.items():
        setattr(row, key, value)

    db.commit()
    db.refresh(row)

    logger.info("Updated class id=%s fields=%s", session_id, sorted(data))
    return row


@router.patch("/{session_id}", response_model=SessionRead)
def patch_session(session_id: int, payload: SessionUpdate, db: Session = Depends(get_db)):
    return update_session(session_id, payload, db)


@router.delete("/{session_id}", response_model=SessionRead)
def delete_session(session_id: int, db: Session = Depends(get_db)):
    row = _get_or_404(db, session_id)
    deleted = SessionRead.model_validate(row)

    db.delete(row)
    db.commit()

    logger.info("Deleted class id=%s", session_id)
    return deleted
