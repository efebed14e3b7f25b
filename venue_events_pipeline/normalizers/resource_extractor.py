"""
Extraction des ressources de la réservation correspondant à la date.
"""

from typing import List, Optional

from ..models.raw_item import RawEventItem
from ..models.resource import Resource
from .time_normalizer import extract_date


def parse_event_resources(item: RawEventItem, event_date: Optional[str]) -> List[Resource]:
    """
    Retourne les ressources de la première réservation du jour de l'événement.
    
    Les réservations de tous les `prof` sont parcourues dans l'ordre source ;
    seule la première dont `startDt` tombe le jour `event_date` est retenue.
    
    Args:
        item: Enregistrement brut
        event_date: Date de l'événement ("YYYY-MM-DD" ou date-heure ISO)
    
    Returns:
        Liste de ressources (vide si aucun détail, réservation ou correspondance)
    """
    if item.details is None:
        return []
    
    target = extract_date(event_date)
    if not target:
        return []
    
    for reservation in item.details.reservations:
        if not reservation.start_dt:
            continue
        if extract_date(reservation.start_dt) == target:
            return list(reservation.resources or [])
    
    return []
