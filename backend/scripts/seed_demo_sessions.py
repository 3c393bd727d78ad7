import logging
from datetime import date

from app.db import SessionLocal
from app.core.seed_data import demo_sessions
from app.models.training_session import TrainingSession

logger = logging.getLogger(__name__)


def clear_sessions(db) -> int:
    """Delete every logged session so we can reseed cleanly."""
    deleted = db.query(TrainingSession).delete()
    db.commit()
    return deleted


def seed_demo_sessions(db, year: int) -> int:
    """Insert the demo classes and drilling sessions for `year`."""
    rows = [TrainingSession(**data) for data in demo_sessions(year)]
    db.add_all(rows)
    db.commit()
    return len(rows)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    db = SessionLocal()
    try:
        deleted = clear_sessions(db)
        added = seed_demo_sessions(db, date.today().year)
        logger.info("Deleted %s sessions, seeded %s demo sessions", deleted, added)
    finally:
        db.close()


if __name__ == "__main__":
    main()
