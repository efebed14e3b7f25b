"""Normalizers module for venue events pipeline."""

from .identity import generate_deterministic_id
from .panel_extractor import (
    get_event_type,
    get_organization,
    get_instructor_names,
    get_lecture_title,
    is_academic_session,
)
from .time_normalizer import to_time_strings, extract_date, resolve_event_date
from .resource_extractor import parse_event_resources
from .record_filter import is_processable, filter_records
from .events_normalizer import EventsNormalizer, parse_room_name

__all__ = [
    "generate_deterministic_id",
    "get_event_type",
    "get_organization",
    "get_instructor_names",
    "get_lecture_title",
    "is_academic_session",
    "to_time_strings",
    "extract_date",
    "resolve_event_date",
    "parse_event_resources",
    "is_processable",
    "filter_records",
    "EventsNormalizer",
    "parse_room_name",
]
