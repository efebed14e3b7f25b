"""
Fixtures partagées pour les tests.
"""

import pytest
from typing import Any, Dict, List, Optional

from venue_events_pipeline.config.settings import Settings
from venue_events_pipeline.models.event import Event
from venue_events_pipeline.models.raw_item import RawEventItem
from venue_events_pipeline.models.resource import Resource


def classification_panel(
    lecture_title: Optional[str] = "Strategy 101",
    category: Optional[str] = "Class",
    organization: Optional[str] = "Kellogg School of Management",
    department: Optional[str] = None,
) -> Dict[str, Any]:
    """Panneau typeId 11 avec les positions lues par les extracteurs."""
    items: List[Dict[str, Any]] = [{"itemName": f"filler {i}"} for i in range(9)]
    items[1] = {"itemName": lecture_title}
    items[2] = {"itemName": category}
    items[6] = {"itemName": "Organization", "item": [{"itemName": organization}]}
    items[8] = {"itemName": "Department", "item": [{"itemName": department}]}
    return {"typeId": 11, "item": items}


def session_panel(label: str = "<p>Academic Session</p>") -> Dict[str, Any]:
    """Deuxième panneau portant le libellé de session."""
    return {"typeId": 2, "item": [{"itemName": label}]}


@pytest.fixture
def settings():
    """Settings par défaut (indépendants de l'environnement)."""
    return Settings()


@pytest.fixture
def make_raw_record():
    """Fabrique de dicts bruts au format du collecteur 25Live."""
    def _make(
        item_id: Optional[int] = 1234567,
        item_id2: Optional[int] = 7654321,
        subject_item_id: Optional[int] = 101,
        room: str = "KGH1110 (70)",
        date: Optional[str] = "2025-07-15T00:00:00",
        start: Any = 9.0,
        end: Any = 10.5,
        name: str = "Strategy 101",
        panels: Optional[List[Dict[str, Any]]] = None,
        reservations: Optional[List[Dict[str, Any]]] = None,
        with_details: bool = True,
    ) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "itemId": item_id,
            "itemId2": item_id2,
            "subject_itemId": subject_item_id,
            "subject_itemName": room,
            "subject_item_date": date,
            "start": start,
            "end": end,
            "itemName": name,
        }
        if with_details:
            record["itemDetails"] = {
                "defn": {"panel": panels if panels is not None else [classification_panel(), session_panel()]},
                "occur": {"prof": [{"rsv": reservations or []}]},
            }
        return record
    return _make


@pytest.fixture
def make_raw_item(make_raw_record):
    """Fabrique de RawEventItem."""
    def _make(**kwargs) -> RawEventItem:
        return RawEventItem.from_dict(make_raw_record(**kwargs))
    return _make


@pytest.fixture
def make_event():
    """Fabrique d'événements normalisés."""
    def _make(
        id: int = 1,
        room_name: Optional[str] = "GH 1110",
        date: str = "2025-07-15",
        start_time: str = "09:00:00",
        end_time: str = "10:00:00",
        event_name: str = "Strategy 101",
        event_type: Optional[str] = "Class",
        resources: Optional[List[Resource]] = None,
        instructor_names: Optional[List[str]] = None,
        raw: Optional[RawEventItem] = None,
    ) -> Event:
        return Event(
            id=id,
            item_id=id,
            item_id2=id + 1000,
            date=date,
            start_time=start_time,
            end_time=end_time,
            event_name=event_name,
            event_type=event_type,
            room_name=room_name,
            resources=resources or [],
            instructor_names=instructor_names,
            raw=raw,
        )
    return _make


@pytest.fixture
def recording_resource():
    return Resource(item_name="KSM-KGH-VIDEO-RECORDING-A", quantity=1, instruction=None)


@pytest.fixture
def make_classification_panel():
    return classification_panel


@pytest.fixture
def make_session_panel():
    return session_panel
