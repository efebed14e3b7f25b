"""
Tables fixes du domaine : salles, libellés et catégories.

Ces valeurs proviennent du service 25Live et des conventions du bâtiment
Global Hub (GH). Elles ne changent qu'avec la configuration physique des
salles ou la nomenclature des programmes.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class RoomPair:
    """Deux salles adjacentes qui peuvent accueillir une même session."""
    first: str
    second: str
    merged_label: str


# Salles adjacentes (l'événement de `first` sert de modèle lors de la fusion)
ROOM_PAIRS: Tuple[RoomPair, ...] = (
    RoomPair(first="GH 1420", second="GH 1430", merged_label="GH 1420&30"),
    RoomPair(first="GH 2410A", second="GH 2410B", merged_label="GH 2410A&B"),
    RoomPair(first="GH 2420A", second="GH 2420B", merged_label="GH 2420A&B"),
    RoomPair(first="GH 2430A", second="GH 2430B", merged_label="GH 2430A&B"),
)

# Réservations privées / fermetures (seulement quand itemId == 0)
PLACEHOLDER_EVENT_NAMES: Tuple[str, ...] = ("(Private)", "Closed")

# Panneaux de détail (typeId)
PANEL_TYPE_CLASSIFICATION = 11
PANEL_TYPE_INSTRUCTOR = 12
PANEL_TYPE_INSTRUCTOR_GROUP = 13

# Classification des événements
DEFAULT_KEC_CATEGORY_TAG = "KEC"
CMC_CATEGORY_TAG = "CMC"
KEC_PROGRAM_NAMES: Tuple[str, ...] = (
    "Kellogg Executive Education Programs",
    "Kellogg Executive MBA Program",
)
CMC_DEPARTMENT_NAME = "RES CMC, KSM"

# Un événement KEC n'est conservé que s'il s'agit d'une session de cours
ACADEMIC_SESSION_LABELS: Tuple[str, ...] = (
    "<p>Academic Session</p>",
    "<p>Class Session</p>",
)

# Tâches de vérification d'enregistrement
DEFAULT_RECORDING_RESOURCE_PREFIX = "KSM-KGH-VIDEO-RECORDING"
RECORDING_TASK_TYPE = "RECORDING CHECK"
RECORDING_CHECK_INTERVAL_SECONDS = 30 * 60
