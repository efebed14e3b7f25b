"""
Entités canoniques produites par le pipeline.

`Event` est immuable et hachable : les passes de consolidation créent de nouvelles
instances (`dataclasses.replace`) au lieu de modifier les existantes.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from ..utils.validators import validate_event_identity
from .raw_item import RawEventItem
from .resource import Resource


@dataclass(frozen=True)
class Event:
    """
    Événement normalisé (une réservation de salle pour une date).
    
    `id` est déterministe à partir de (itemId, itemId2, subject_itemId) ;
    il sert de clé d'upsert au stockage.
    """
    id: Optional[int]
    item_id: Optional[int]
    item_id2: Optional[int]
    date: str
    start_time: str
    end_time: str
    event_name: Optional[str]
    event_type: Optional[str] = None
    organization: Optional[str] = None
    instructor_names: Optional[Tuple[str, ...]] = None
    lecture_title: Optional[str] = None
    room_name: Optional[str] = None
    resources: Tuple[Resource, ...] = ()
    raw: Optional[RawEventItem] = field(default=None, compare=False, repr=False)
    
    def __post_init__(self):
        # Collections figées : un Event reste hachable
        if self.instructor_names is not None:
            object.__setattr__(self, "instructor_names", tuple(self.instructor_names))
        object.__setattr__(self, "resources", tuple(self.resources))
    
    def to_record(self, updated_at: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Sérialise l'événement pour le collaborateur de persistance.
        
        Args:
            updated_at: Horodatage de mise à jour (maintenant par défaut)
        
        Returns:
            Ligne prête pour un upsert sur `id`
        
        Raises:
            MissingIdentityError: Si id, item_id, item_id2 ou date manque
        """
        record = {
            "id": self.id,
            "item_id": self.item_id,
            "item_id2": self.item_id2,
            "date": self.date,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "event_name": self.event_name,
            "event_type": self.event_type,
            "organization": self.organization,
            "instructor_names": list(self.instructor_names) if self.instructor_names is not None else None,
            "lecture_title": self.lecture_title,
            "room_name": self.room_name,
            "resources": [r.to_dict() for r in self.resources],
            "raw": self.raw.payload if self.raw is not None else None,
            "updated_at": (updated_at or datetime.now()).isoformat(),
        }
        validate_event_identity(record)
        return record


@dataclass(frozen=True)
class RecordingTask:
    """Vérification ponctuelle d'un enregistrement vidéo en cours."""
    event_id: Optional[int]
    task_type: str
    resource_item_name: str
    date: str
    time: str
    created_at: str
    updated_at: str
    
    def to_record(self) -> Dict[str, Any]:
        return {
            "event_id": self.event_id,
            "taskType": self.task_type,
            "resource_item_name": self.resource_item_name,
            "date": self.date,
            "time": self.time,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
