"""
Consolidation des sessions KEC d'une même salle sur une même journée.

Les programmes exécutifs réservent souvent une salle en plusieurs créneaux
consécutifs. Ces créneaux sont regroupés en un seul événement couvrant la
journée, puis seuls les événements KEC correspondant à une session de cours
sont conservés.
"""

import logging
from dataclasses import replace
from typing import List, Sequence

from ..config.venue_config import DEFAULT_KEC_CATEGORY_TAG
from ..models.event import Event
from ..normalizers.panel_extractor import is_academic_session
from ..utils.grouping import group_by

logger = logging.getLogger(__name__)


def _combine(group: List[Event]) -> Event:
    """
    Fusionne un groupe en un événement couvrant tous les créneaux.
    
    Instructeurs et ressources sont vidés : ils ne sont plus attribuables
    à un créneau précis.
    """
    # "HH:MM:SS" à deux chiffres : l'ordre lexicographique est l'ordre horaire
    earliest_start = min(e.start_time for e in group)
    latest_end = max(e.end_time for e in group)
    
    return replace(
        group[0],
        start_time=earliest_start,
        end_time=latest_end,
        instructor_names=None,
        resources=(),
    )


def consolidate_kec_sessions(
    events: Sequence[Event],
    kec_tag: str = DEFAULT_KEC_CATEGORY_TAG,
) -> List[Event]:
    """
    Consolide les événements KEC par (date, salle) et écarte les non-sessions.
    
    Les événements non KEC sont conservés sans modification. Chaque
    événement KEC consolidé prend la position du premier membre de son
    groupe.
    
    Args:
        events: Événements après fusion des salles adjacentes
        kec_tag: Catégorie concernée
    
    Returns:
        Événements finalisés
    """
    kec_groups = group_by(
        (e for e in events if e.event_type == kec_tag),
        lambda e: (e.date, e.room_name),
    )
    
    if not kec_groups:
        logger.info("No KEC events found to combine")
        return list(events)
    
    logger.info(
        f"Found {sum(len(g) for g in kec_groups.values())} KEC events "
        f"in {len(kec_groups)} day/room groups"
    )
    
    result: List[Event] = []
    emitted = set()
    combined_count = 0
    discarded_count = 0
    
    for event in events:
        if event.event_type != kec_tag:
            result.append(event)
            continue
        
        key = (event.date, event.room_name)
        if key in emitted:
            continue
        emitted.add(key)
        
        group = kec_groups[key]
        if len(group) == 1:
            candidate = group[0]
        else:
            candidate = _combine(group)
            combined_count += 1
            logger.info(
                f"Combined {len(group)} KEC events: {candidate.event_name} in "
                f"{candidate.room_name} from {candidate.start_time} to {candidate.end_time}"
            )
        
        if is_academic_session(candidate.raw):
            result.append(candidate)
        else:
            discarded_count += 1
    
    logger.info(
        f"Combined {combined_count} groups of KEC events, "
        f"discarded {discarded_count} non-academic KEC events"
    )
    return result
