"""
Filtrage des enregistrements bruts inexploitables.

Sont écartés :
- les réservations privées / fermetures (itemId == 0 et libellé réservé),
- les occurrences sans itemId2,
- les salles déjà fusionnées par 25Live (libellé contenant "&").
"""

import logging
from typing import Iterable, List

from ..config.venue_config import PLACEHOLDER_EVENT_NAMES
from ..models.raw_item import RawEventItem

logger = logging.getLogger(__name__)


def is_processable(item: RawEventItem) -> bool:
    is_placeholder = item.item_id == 0 and item.item_name in PLACEHOLDER_EVENT_NAMES
    if is_placeholder:
        return False
    
    if item.item_id2 == 0:
        return False
    
    if item.subject_item_name and "&" in item.subject_item_name:
        return False
    
    return True


def filter_records(items: Iterable[RawEventItem]) -> List[RawEventItem]:
    """Garde les enregistrements exploitables, dans l'ordre d'origine."""
    items = list(items)
    kept = [item for item in items if is_processable(item)]
    
    logger.info(
        f"Filtered out {len(items) - len(kept)} events with placeholder names, "
        f"itemId2 equal to 0 or ampersand in room name"
    )
    return kept
