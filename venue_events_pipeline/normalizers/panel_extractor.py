"""
Extraction des champs typés depuis les panneaux de détail.

Chaque fonction parcourt les panneaux dans l'ordre et retourne la première
valeur trouvée, ou `None` si aucun panneau ne la fournit.
"""

import logging
import re
from typing import List, Optional

from ..config.venue_config import (
    ACADEMIC_SESSION_LABELS,
    CMC_CATEGORY_TAG,
    CMC_DEPARTMENT_NAME,
    DEFAULT_KEC_CATEGORY_TAG,
    KEC_PROGRAM_NAMES,
)
from ..models.raw_item import (
    ClassificationPanel,
    InstructorGroupPanel,
    InstructorPanel,
    RawEventItem,
)

logger = logging.getLogger(__name__)

_INSTRUCTORS_PREFIX = re.compile(r"^Instructors:\s*")
INSTRUCTOR_SEPARATOR = "; "


def get_event_type(item: RawEventItem, kec_tag: str = DEFAULT_KEC_CATEGORY_TAG) -> Optional[str]:
    """
    Détermine la catégorie de l'événement (panneau typeId 11).
    
    Les programmes exécutifs donnent `kec_tag` et le département CMC donne
    "CMC" ; sinon le libellé de catégorie du panneau est utilisé.
    """
    for panel in item.panels:
        if not isinstance(panel, ClassificationPanel):
            continue
        
        if panel.organization in KEC_PROGRAM_NAMES:
            return kec_tag
        
        if panel.department == CMC_DEPARTMENT_NAME:
            return CMC_CATEGORY_TAG
        
        if panel.category_name:
            return panel.category_name
    
    return None


def get_organization(item: RawEventItem) -> Optional[str]:
    for panel in item.panels:
        if isinstance(panel, ClassificationPanel) and panel.organization:
            return panel.organization
    return None


def get_lecture_title(item: RawEventItem) -> Optional[str]:
    for panel in item.panels:
        if isinstance(panel, ClassificationPanel) and panel.lecture_title:
            return panel.lecture_title
    return None


def _clean_instructor_text(text: str) -> Optional[str]:
    """Retire le préfixe 'Instructors:' et rejette les textes inexploitables."""
    cleaned = _INSTRUCTORS_PREFIX.sub("", text).strip()
    if not cleaned or cleaned.startswith("<"):
        return None
    if not 2 < len(cleaned) < 100:
        return None
    if "{" in cleaned or "}" in cleaned:
        return None
    return cleaned


def get_instructor_names(item: RawEventItem) -> Optional[List[str]]:
    """
    Extrait la liste des instructeurs (panneaux typeId 12 et 13).
    
    Le premier texte exploitable est découpé sur "; ". Un texte qui ne
    donne aucun nom termine la recherche avec `None`.
    """
    for panel in item.panels:
        if not isinstance(panel, (InstructorPanel, InstructorGroupPanel)):
            continue
        
        text = panel.instructor_text
        if not text:
            continue
        
        cleaned = _clean_instructor_text(text)
        if cleaned is None:
            continue
        
        names = [n.strip() for n in cleaned.split(INSTRUCTOR_SEPARATOR)]
        names = [n for n in names if n]
        return names or None
    
    return None


def is_academic_session(item: Optional[RawEventItem]) -> bool:
    """
    Indique si la réservation est une session de cours.
    
    Le libellé est lu dans le deuxième panneau, premier noeud, quel que
    soit son typeId.
    """
    if item is None or item.details is None:
        return False
    
    panel = item.details.panel_at(1)
    if panel is None:
        return False
    
    label = panel.name_at(0)
    logger.debug(f"Session label for item {item.item_id}: {label}")
    return label in ACADEMIC_SESSION_LABELS
