"""
Normaliseur des enregistrements 25Live vers les événements canoniques.

Assemble, pour chaque enregistrement brut retenu par le filtre, un `Event`
à partir des extracteurs (identité, panneaux, horaires, ressources, salle).
"""

import logging
import re
from typing import Any, Dict, List, Optional

from ..config.settings import Settings
from ..models.event import Event
from ..models.raw_item import RawEventItem
from ..utils.validators import is_record_sequence
from .identity import generate_deterministic_id
from .panel_extractor import (
    get_event_type,
    get_instructor_names,
    get_lecture_title,
    get_organization,
)
from .record_filter import filter_records
from .resource_extractor import parse_event_resources
from .time_normalizer import resolve_event_date, to_time_strings

logger = logging.getLogger(__name__)

# Salles du Global Hub : "KGH1110 (70)" -> "GH 1110", "KGHL110" -> "GH L110"
_LOWER_LEVEL_ROOM = re.compile(r"KGHL(\d+)")
_ROOM = re.compile(r"KGH(\d+[AB]?)")


def parse_room_name(subject_item_name: Optional[str]) -> Optional[str]:
    """
    Extrait le code de salle normalisé depuis le libellé 25Live.
    
    Args:
        subject_item_name: Libellé de la salle (ex: "KGH1110 (70)")
    
    Returns:
        Code normalisé ("GH 1110", "GH 2410A", "GH L110") ou None
    """
    if not subject_item_name:
        return None
    
    match = _LOWER_LEVEL_ROOM.search(subject_item_name)
    if match:
        return f"GH L{match.group(1)}"
    
    match = _ROOM.search(subject_item_name)
    if match:
        return f"GH {match.group(1)}"
    
    return None


class EventsNormalizer:
    """
    Normalise les enregistrements bruts 25Live vers le schéma `events`.
    
    Le normaliseur ne fait que des projections : toute donnée absente
    donne un champ `None` plutôt qu'une erreur.
    """
    
    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialise le normaliseur.
        
        Args:
            settings: Configuration (si None, charge depuis env)
        """
        self.settings = settings or Settings.from_env()
        logger.debug(f"Initialized EventsNormalizer (KEC tag: {self.settings.kec_category_tag})")
    
    def normalize_all(self, raw_data: Any) -> List[Event]:
        """
        Filtre puis normalise une séquence d'enregistrements bruts.
        
        Args:
            raw_data: Séquence de dicts du collecteur ou de RawEventItem
                (None ou non-séquence = aucun événement)
        
        Returns:
            Événements dans l'ordre des enregistrements d'origine
        """
        if not is_record_sequence(raw_data) or not raw_data:
            logger.info("No events to process")
            return []
        
        logger.info(f"Processing {len(raw_data)} events to extract additional properties...")
        
        items = []
        for index, record in enumerate(raw_data):
            if isinstance(record, RawEventItem):
                items.append(record)
            elif isinstance(record, dict):
                items.append(RawEventItem.from_dict(record))
            else:
                logger.warning(
                    f"Skipping record #{index}: expected dict or RawEventItem, got {type(record).__name__}"
                )
        
        return [self.normalize(item) for item in filter_records(items)]
    
    def normalize(self, item: RawEventItem) -> Event:
        """
        Construit l'événement canonique d'un enregistrement brut.
        
        Raises:
            ValueError: Si start/end ne sont pas des heures décimales
        """
        start_time, end_time = to_time_strings(item.start, item.end)
        event_date = resolve_event_date(item.subject_item_date)
        
        event_type = get_event_type(item, self.settings.kec_category_tag)
        if not event_type:
            logger.warning(f"No event type found for event {item.item_id} - {item.item_name}")
        
        return Event(
            id=self._generate_id(item),
            item_id=item.item_id,
            item_id2=item.item_id2,
            date=event_date,
            start_time=start_time,
            end_time=end_time,
            event_name=item.item_name,
            event_type=event_type,
            organization=get_organization(item),
            instructor_names=get_instructor_names(item),
            lecture_title=get_lecture_title(item),
            room_name=parse_room_name(item.subject_item_name),
            resources=parse_event_resources(item, event_date),
            raw=item,
        )
    
    def _generate_id(self, item: RawEventItem) -> Optional[int]:
        """Identifiant déterministe, None si un identifiant source manque."""
        source_ids: Dict[str, Any] = {
            'itemId': item.item_id,
            'itemId2': item.item_id2,
            'subject_itemId': item.subject_item_id,
        }
        missing = [name for name, value in source_ids.items() if value is None]
        if missing:
            logger.warning(
                f"Cannot generate id for event {item.item_name!r}: missing {', '.join(missing)}"
            )
            return None
        
        generated_id = generate_deterministic_id(item.item_id, item.item_id2, item.subject_item_id)
        logger.debug(
            f"ID Generation for event: itemId={item.item_id}, itemId2={item.item_id2}, "
            f"subject_itemId={item.subject_item_id} => id={generated_id}"
        )
        return generated_id
