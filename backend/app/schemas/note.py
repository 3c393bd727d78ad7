import math
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from app.core.constants import NOTE_KINDS


def parse_kind(value) -> Optional[str]:
    return value if isinstance(value, str) and value in NOTE_KINDS else None


def parse_nonzero_int(value) -> Optional[int]:
    """Numeric query/body value; blank, non-numeric and 0 mean "unset"."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and value.strip() == "":
        return None
    try:
        n = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(n) or n == 0:
        return None
    return int(n)


class NoteCreate(BaseModel):
    year: Any = None
    month: Any = None
    kind: Any = None
    text: Any = None

    model_config = ConfigDict(extra="ignore")


class NoteRead(BaseModel):
    id: int
    year: int
    month: int
    kind: str
    text: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class NoteList(BaseModel):
    notes: list[NoteRead]

    # Only filled for ?debug=1
    filters: Optional[dict[str, Any]] = None
    total_rows: Optional[int] = None
    returned: Optional[int] = None
