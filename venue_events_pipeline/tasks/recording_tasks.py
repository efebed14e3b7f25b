"""
Tâches de vérification des enregistrements vidéo (Panopto).

Pour chaque événement réservant une ressource d'enregistrement, une tâche
est émise toutes les 30 minutes pendant l'événement afin qu'un opérateur
vérifie que l'enregistrement tourne.
"""

import logging
from datetime import datetime
from typing import Iterable, List, Optional

from ..config.venue_config import (
    DEFAULT_RECORDING_RESOURCE_PREFIX,
    RECORDING_CHECK_INTERVAL_SECONDS,
    RECORDING_TASK_TYPE,
)
from ..models.event import Event, RecordingTask
from ..models.resource import Resource
from ..normalizers.time_normalizer import format_seconds_to_time, parse_time_to_seconds

logger = logging.getLogger(__name__)


def is_recording_resource(resource: Resource, prefix: str = DEFAULT_RECORDING_RESOURCE_PREFIX) -> bool:
    return (resource.item_name or "").upper().startswith(prefix.upper())


def create_recording_tasks(
    event: Event,
    resource: Resource,
    prefix: str = DEFAULT_RECORDING_RESOURCE_PREFIX,
    now: Optional[datetime] = None,
) -> List[RecordingTask]:
    """
    Crée les vérifications d'un événement pour une ressource.
    
    Une tâche par intervalle complet de 30 minutes, à partir de l'heure de
    début. Aucune tâche si la ressource n'est pas un enregistrement, si les
    horaires sont invalides ou si la durée n'est pas positive.
    
    Args:
        event: Événement finalisé
        resource: Ressource de l'événement
        prefix: Préfixe des ressources d'enregistrement
        now: Horodatage de création (maintenant par défaut)
    """
    if not is_recording_resource(resource, prefix):
        return []
    
    start_seconds = parse_time_to_seconds(event.start_time)
    end_seconds = parse_time_to_seconds(event.end_time)
    if start_seconds is None or end_seconds is None:
        return []
    
    duration = end_seconds - start_seconds
    if duration <= 0:
        return []
    
    timestamp = (now or datetime.now()).isoformat()
    total_checks = duration // RECORDING_CHECK_INTERVAL_SECONDS
    
    return [
        RecordingTask(
            event_id=event.id,
            task_type=RECORDING_TASK_TYPE,
            resource_item_name=resource.item_name,
            date=event.date,
            time=format_seconds_to_time(start_seconds + index * RECORDING_CHECK_INTERVAL_SECONDS),
            created_at=timestamp,
            updated_at=timestamp,
        )
        for index in range(total_checks)
    ]


def derive_recording_tasks(
    event: Event,
    prefix: str = DEFAULT_RECORDING_RESOURCE_PREFIX,
    now: Optional[datetime] = None,
) -> List[RecordingTask]:
    """Toutes les vérifications d'un événement, ressource par ressource."""
    tasks: List[RecordingTask] = []
    for resource in event.resources:
        tasks.extend(create_recording_tasks(event, resource, prefix=prefix, now=now))
    return tasks


def derive_tasks_for_events(
    events: Iterable[Event],
    prefix: str = DEFAULT_RECORDING_RESOURCE_PREFIX,
    now: Optional[datetime] = None,
) -> List[RecordingTask]:
    now = now or datetime.now()
    tasks: List[RecordingTask] = []
    for event in events:
        tasks.extend(derive_recording_tasks(event, prefix=prefix, now=now))
    
    logger.info(f"Derived {len(tasks)} recording check tasks")
    return tasks
