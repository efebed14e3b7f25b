"""Tasks module for venue events pipeline."""

from .recording_tasks import (
    create_recording_tasks,
    derive_recording_tasks,
    derive_tasks_for_events,
)

__all__ = [
    "create_recording_tasks",
    "derive_recording_tasks",
    "derive_tasks_for_events",
]
