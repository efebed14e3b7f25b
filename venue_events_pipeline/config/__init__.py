"""Configuration module for venue events pipeline."""

from .settings import Settings
from .venue_config import (
    ROOM_PAIRS,
    RoomPair,
    PLACEHOLDER_EVENT_NAMES,
    KEC_PROGRAM_NAMES,
    CMC_DEPARTMENT_NAME,
    ACADEMIC_SESSION_LABELS,
)

__all__ = [
    "Settings",
    "ROOM_PAIRS",
    "RoomPair",
    "PLACEHOLDER_EVENT_NAMES",
    "KEC_PROGRAM_NAMES",
    "CMC_DEPARTMENT_NAME",
    "ACADEMIC_SESSION_LABELS",
]
