"""Jobs module for venue events pipeline."""

from .process_events import transform_raw_events, process_raw_events, PipelineResult

__all__ = [
    "transform_raw_events",
    "process_raw_events",
    "PipelineResult",
]
