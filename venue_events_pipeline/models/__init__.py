"""Models module for venue events pipeline."""

from .resource import Resource
from .raw_item import (
    PanelNode,
    Panel,
    ClassificationPanel,
    InstructorPanel,
    InstructorGroupPanel,
    Reservation,
    ItemDetails,
    RawEventItem,
    parse_panel,
)
from .event import Event, RecordingTask

__all__ = [
    "Resource",
    "PanelNode",
    "Panel",
    "ClassificationPanel",
    "InstructorPanel",
    "InstructorGroupPanel",
    "Reservation",
    "ItemDetails",
    "RawEventItem",
    "parse_panel",
    "Event",
    "RecordingTask",
]
