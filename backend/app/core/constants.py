"""Shared application constants.

Centralizes values used by the progress engine, the normalizers and the
dashboard so we can document and adjust them in one place.
"""

# Cadence multipliers used to annualize a goal target. Deliberately flat:
# 52 weeks and 12 months, not calendar-accurate counts.
WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12

# Smallest fraction of the year treated as elapsed when projecting pace,
# keeps Jan 1st projections finite.
MIN_ELAPSED_FRACTION = 1 / 365

# +/- band around the annual target inside which progress is "On track"
PACE_TOLERANCE = 0.05

MONTH_LABELS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

# Tolerant performance input -> stored enum value
PERFORMANCE_ALIASES = {
    "n/a": "NONE",
    "na": "NONE",
    "not added": "NONE",
    "notadded": "NONE",
    "bad": "POOR",
    "rough": "POOR",
    "😕": "POOR",
    "ok": "AVERAGE",
    "okay": "AVERAGE",
    "mediocre": "AVERAGE",
    "avg": "AVERAGE",
    "🙂": "AVERAGE",
    "great": "EXCELLENT",
    "good": "EXCELLENT",
    "strong": "EXCELLENT",
    "awesome": "EXCELLENT",
    "💪": "EXCELLENT",
}

CLASS_TYPE_OPTIONS = [
    "Fundamentals",
    "Advanced",
    "Open Mat",
    "Seminar",
    "Workshop",
    "Drilling",
]

TECHNIQUE_OPTIONS = [
    "Passing",
    "Submissions",
    "Position",
    "Guard",
    "Wrestling",
    "Escapes",
    "Leg Locks",
]

NOTE_KINDS = ["info", "minor", "major", "camp", "comp", "focus"]

# Instructor spellings folded onto a canonical name by the maintenance script
INSTRUCTOR_ALIASES = {
    "kieran": "Kieran Davern",
}
