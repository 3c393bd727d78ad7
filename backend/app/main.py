import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.sessions import router as sessions_router
from app.api.goals import router as goals_router
from app.api.notes import router as notes_router
from app.api.dashboard import router as dashboard_router
from app.api.seed import router as seed_router
from app.api.options import router as options_router
from app.db import Base, engine
from app.models.training_session import TrainingSession  # noqa: F401  (import ensures table is registered)
from app.models.goal import Goal  # noqa: F401
from app.models.note import Note  # noqa: F401
from app.core.config import settings


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="BJJ training log")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables (classes, goals, notes) on startup
Base.metadata.create_all(bind=engine)

app.include_router(sessions_router)
app.include_router(goals_router)
app.include_router(notes_router)
app.include_router(dashboard_router)
app.include_router(seed_router)
app.include_router(options_router)


@app.get("/")
def root():
    return {"message": "BJJ log backend is running"}
