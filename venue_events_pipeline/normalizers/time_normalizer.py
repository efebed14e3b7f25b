"""
Conversion des heures décimales et des dates 25Live.

25Live exprime les horaires en heures décimales depuis minuit
(13.5 = 13:30) et les dates en chaînes ISO ("2025-07-15T00:00:00").
"""

import logging
import math
import re
from datetime import date
from typing import Any, Optional, Tuple

logger = logging.getLogger(__name__)

_TIME_SEPARATOR = re.compile(r"[T ]")


def decimal_hours_to_time(value: Any) -> str:
    """
    Convertit une heure décimale en "HH:MM:SS".
    
    Les minutes sont arrondies à l'entier le plus proche (demi vers le haut),
    les secondes valent toujours 00. 60 minutes arrondies passent à l'heure
    suivante.
    
    Raises:
        ValueError: Si la valeur n'est pas numérique
    """
    try:
        hours = float(value)
        hour = math.floor(hours)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"Invalid decimal hour value: {value!r}")
    
    minute = math.floor((hours - hour) * 60 + 0.5)
    if minute == 60:
        hour += 1
        minute = 0
    
    return f"{hour:02d}:{minute:02d}:00"


def to_time_strings(start: Any, end: Any) -> Tuple[str, str]:
    """Convertit le début et la fin (heures décimales) en "HH:MM:SS"."""
    return decimal_hours_to_time(start), decimal_hours_to_time(end)


def extract_date(value: Optional[str]) -> Optional[str]:
    """Partie date ("YYYY-MM-DD") d'une date-heure, ou None si absente."""
    if not value:
        return None
    return _TIME_SEPARATOR.split(value, 1)[0]


def resolve_event_date(value: Optional[str], today: Optional[date] = None) -> str:
    """
    Date de l'événement, avec repli sur aujourd'hui si 25Live n'en fournit pas.
    
    Args:
        value: `subject_item_date` brut
        today: Date de repli (date du jour par défaut)
    """
    event_date = extract_date(value)
    if event_date:
        return event_date
    
    fallback = (today or date.today()).isoformat()
    logger.warning(f"No subject_item_date on record, falling back to {fallback}")
    return fallback


def parse_time_to_seconds(value: Any) -> Optional[int]:
    """Convertit "HH:MM[:SS]" en secondes depuis minuit, None si invalide."""
    if not isinstance(value, str):
        return None
    
    parts = value.split(":")
    if len(parts) > 3:
        return None
    
    try:
        numbers = [float(p) for p in parts]
    except ValueError:
        return None
    
    if any(math.isnan(n) or math.isinf(n) for n in numbers):
        return None
    
    hours, minutes, seconds = (numbers + [0.0, 0.0])[:3]
    return int(hours) * 3600 + int(minutes) * 60 + math.floor(seconds)


def format_seconds_to_time(total_seconds: int) -> str:
    hours, remainder = divmod(int(total_seconds), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
