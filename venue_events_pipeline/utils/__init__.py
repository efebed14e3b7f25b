"""Utils module for venue events pipeline."""

from .validators import MissingIdentityError, validate_data, validate_event_identity
from .monitoring import JobStatus, PipelineMonitor
from .grouping import group_by

__all__ = [
    "MissingIdentityError",
    "validate_data",
    "validate_event_identity",
    "JobStatus",
    "PipelineMonitor",
    "group_by",
]
