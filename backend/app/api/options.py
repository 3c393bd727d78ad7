from fastapi import APIRouter

from app.core.constants import CLASS_TYPE_OPTIONS, NOTE_KINDS, TECHNIQUE_OPTIONS
from app.schemas.goal import GoalCadence, GoalMetric
from app.schemas.session import Performance

router = APIRouter(prefix="/options", tags=["options"])


@router.get("")
def get_options():
    """Choices offered by the class, goal and note forms."""
    return {
        "class_types": CLASS_TYPE_OPTIONS,
        "techniques": TECHNIQUE_OPTIONS,
        "performance": [p.value for p in Performance],
        "metrics": [m.value for m in GoalMetric],
        "cadences": [c.value for c in GoalCadence],
        "note_kinds": NOTE_KINDS,
    }
