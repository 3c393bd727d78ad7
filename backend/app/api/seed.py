import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.seed_data import demo_sessions
from app.core.time_utils import now_local
from app.db import get_db
from app.models.training_session import TrainingSession

router = APIRouter(prefix="/seed", tags=["seed"])
logger = logging.getLogger(__name__)


@router.post("")
def seed(db: Session = Depends(get_db)):
    """Replace all sessions with demo data for the current year."""
    if not settings.allow_seed:
        raise HTTPException(status_code=403, detail="Seeding is disabled")

    deleted = db.query(TrainingSession).delete()
    rows = [TrainingSession(**data) for data in demo_sessions(now_local(settings.timezone).year)]
    db.add_all(rows)
    db.commit()

    logger.warning("Seed replaced %s sessions with %s demo sessions", deleted, len(rows))
    return {
        "success": True,
        "count": len(rows),
        "message": f"Seeded {len(rows)} test classes",
    }
