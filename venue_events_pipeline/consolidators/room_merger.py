"""
Fusion des événements répartis sur deux salles adjacentes.

Une même session peut être réservée dans deux salles communicantes
(ex: GH 1420 et GH 1430). Quand les deux réservations partagent la date,
le nom et l'heure de début, elles sont remplacées par un seul événement
dont la salle porte le libellé fusionné (ex: "GH 1420&30").
"""

import logging
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

from ..config.venue_config import ROOM_PAIRS, RoomPair
from ..models.event import Event
from ..utils.grouping import group_by

logger = logging.getLogger(__name__)


def _find_room(group: List[Event], room_name: str) -> Optional[Event]:
    return next((e for e in group if e.room_name == room_name), None)


def merge_adjacent_room_events(
    events: Sequence[Event],
    room_pairs: Sequence[RoomPair] = ROOM_PAIRS,
) -> List[Event]:
    """
    Fusionne les paires de salles adjacentes.
    
    Les événements sont regroupés par (date, event_name, start_time). Dans
    chaque groupe, chaque paire déclarée est fusionnée au plus une fois, en
    prenant l'événement de la première salle comme modèle. Les autres
    membres du groupe sont conservés tels quels.
    
    Args:
        events: Événements assemblés
        room_pairs: Paires de salles (par défaut ROOM_PAIRS)
    
    Returns:
        Événements après fusion, groupe par groupe
    """
    logger.info(
        "Merging adjacent room events ("
        + ", ".join(f"{p.first} & {p.second}" for p in room_pairs)
        + ")..."
    )
    
    groups = group_by(events, lambda e: (e.date, e.event_name, e.start_time))
    merge_counts: Dict[str, int] = {p.merged_label: 0 for p in room_pairs}
    merged_events: List[Event] = []
    
    for group in groups.values():
        if len(group) == 1:
            merged_events.append(group[0])
            continue
        
        # Identité d'objet : deux événements peuvent être égaux en valeur
        consumed = set()
        
        for pair in room_pairs:
            first = _find_room(group, pair.first)
            second = _find_room(group, pair.second)
            
            if first is not None and second is not None:
                merged_events.append(replace(first, room_name=pair.merged_label))
                merge_counts[pair.merged_label] += 1
                consumed.add(id(first))
                consumed.add(id(second))
            elif first is not None or second is not None:
                single = first if first is not None else second
                logger.debug(
                    f"Single room event (not merged): {single.event_name} "
                    f"{single.event_type} {single.room_name}"
                )
        
        merged_events.extend(e for e in group if id(e) not in consumed)
    
    logger.info(
        "Merged "
        + ", ".join(f"{count} pairs of {label}" for label, count in merge_counts.items())
    )
    return merged_events
