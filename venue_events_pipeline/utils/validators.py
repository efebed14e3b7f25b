"""
Validateurs de données.
"""

import logging
from collections.abc import Sequence
from typing import Dict, Any

logger = logging.getLogger(__name__)

# Champs sans lesquels un upsert sur `id` n'est pas fiable
EVENT_IDENTITY_FIELDS = ("id", "item_id", "item_id2", "date")


class MissingIdentityError(ValueError):
    """Un événement finalisé n'a pas tous ses champs d'identité."""


def is_record_sequence(data: Any) -> bool:
    """Vrai pour une séquence d'enregistrements (liste, tuple...), faux pour str/bytes."""
    return isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray))


def validate_data(data: Dict[str, Any], schema: Dict[str, type]) -> bool:
    """
    Valide des données selon un schéma.
    
    Args:
        data: Données à valider
        schema: Schéma avec {field: type}
        
    Returns:
        True si valides
    """
    for field, expected_type in schema.items():
        if field not in data:
            logger.warning(f"Missing field: {field}")
            return False
        
        if data[field] is not None and not isinstance(data[field], expected_type):
            logger.warning(
                f"Invalid type for {field}: expected {expected_type}, "
                f"got {type(data[field])}"
            )
            return False
    
    return True


def validate_event_identity(record: Dict[str, Any]) -> None:
    """
    Vérifie qu'un enregistrement d'événement possède son identité complète.
    
    Args:
        record: Enregistrement sérialisé (voir Event.to_record)
    
    Raises:
        MissingIdentityError: Si un des champs d'identité est absent
    """
    missing = [f for f in EVENT_IDENTITY_FIELDS if record.get(f) is None]
    if missing:
        logger.error(
            f"Invalid event detected (missing {', '.join(missing)}): "
            f"item_id={record.get('item_id')}, event_name={record.get('event_name')}"
        )
        raise MissingIdentityError(
            f"Event missing required fields: {', '.join(missing)}"
        )
    
    if not validate_data(record, {"id": int, "item_id": int, "item_id2": int, "date": str}):
        raise MissingIdentityError(
            f"Event identity fields have invalid types: "
            f"id={record.get('id')!r}, date={record.get('date')!r}"
        )
