import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.time_utils import now_local
from app.db import get_db
from app.models.note import Note
from app.schemas.note import (
    NoteCreate,
    NoteList,
    NoteRead,
    parse_kind,
    parse_nonzero_int,
)

router = APIRouter(prefix="/notes", tags=["notes"])
logger = logging.getLogger(__name__)


@router.get("", response_model=NoteList, response_model_exclude_none=True)
def list_notes(
    year: Optional[str] = Query(None),
    month: Optional[str] = Query(None),
    kind: Optional[str] = Query(None),
    debug: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    # Blank or 0 filters are treated as unset, unknown kinds are ignored
    y = parse_nonzero_int(year)
    m = parse_nonzero_int(month)
    k = parse_kind(kind)

    query = db.query(Note)
    if y is not None:
        query = query.filter(Note.year == y)
    if m is not None:
        query = query.filter(Note.month == m)
    if k is not None:
        query = query.filter(Note.kind == k)

    rows = query.order_by(Note.year.desc(), Note.month.desc(), Note.created_at.desc()).all()
    notes = [NoteRead.model_validate(r) for r in rows]

    if debug == "1":
        return NoteList(
            notes=notes,
            filters={"year": y, "month": m, "kind": k},
            total_rows=db.query(Note).count(),
            returned=len(notes),
        )
    return NoteList(notes=notes)


@router.post("", response_model=NoteRead, status_code=201)
def create_note(payload: NoteCreate, db: Session = Depends(get_db)):
    now = now_local(settings.timezone)
    y = parse_nonzero_int(payload.year) or now.year
    m = parse_nonzero_int(payload.month) or now.month
    text = str(payload.text if payload.text is not None else "").strip()
    kind = parse_kind(payload.kind) or "info"

    if not text:
        raise HTTPException(status_code=422, detail="text is required")
    if m < 1 or m > 12:
        raise HTTPException(status_code=422, detail="month must be 1-12")

    note = Note(year=y, month=m, kind=kind, text=text)
    db.add(note)
    db.commit()
    db.refresh(note)

    logger.info("Added %s note for %s-%02d", kind, y, m)
    return note
