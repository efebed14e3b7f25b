"""Consolidators module for venue events pipeline."""

from .room_merger import merge_adjacent_room_events
from .session_consolidator import consolidate_kec_sessions

__all__ = [
    "merge_adjacent_room_events",
    "consolidate_kec_sessions",
]
