"""Demo sessions used by POST /seed and scripts/seed_demo_sessions.py."""

from datetime import datetime

# (month, day, class_type, instructor, technique, description, hours, style)
_DEMO_ROWS = [
    (1, 5, "Fundamentals", "Coach A", "Guard", "", 1, "gi"),
    (2, 10, "Advanced", "Coach B", "Mount", "", 1.5, "nogi"),
    (3, 15, "Fundamentals", "Coach A", "Escapes", "", 1, "gi"),
    (4, 20, "Competition", "Coach C", "Takedown", "", 2, "gi"),
    (5, 25, "Fundamentals", "Coach A", "Guard", "", 1, "gi"),
    (6, 30, "Advanced", "Coach B", "Transitions", "", 1.5, "nogi"),
    # Drilling sessions
    (1, 8, "Drilling", "Home", "", "Guard drill", 0.5, "unknown"),
    (2, 12, "Drilling", "Gym", "", "Mount escape drill", 1, "unknown"),
    (3, 18, "Drilling", "Home", "", "Leg drag drill", 0.75, "unknown"),
    (4, 22, "Drilling", "Gym", "", "Armbar drill", 1.25, "unknown"),
    (5, 28, "Drilling", "Home", "", "Footlock drill", 0.5, "unknown"),
    (6, 5, "Drilling", "Gym", "", "Guard drill", 1, "unknown"),
]


def demo_sessions(year: int) -> list[dict]:
    """Six classes and six drilling sessions in the first half of `year`."""
    return [
        {
            "date": datetime(year, month, day),
            "class_type": class_type,
            "instructor": instructor,
            "technique": technique,
            "description": description,
            "hours": hours,
            "style": style,
        }
        for month, day, class_type, instructor, technique, description, hours, style in _DEMO_ROWS
    ]
