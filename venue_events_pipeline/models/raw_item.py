"""
Enregistrements bruts produits par le collecteur 25Live.

Un enregistrement correspond à une réservation de salle pour une date.
Le détail (`itemDetails`) est une arborescence de panneaux dont
l'interprétation dépend de `typeId` :

- 11 : classification de l'événement (titre, catégorie, organisation...)
- 12 : bloc instructeur simple
- 13 : bloc instructeurs imbriqué

Chaque type connu est représenté par une sous-classe de `Panel` qui expose
ses champs sous forme de propriétés. Toutes les lectures sont totales :
une structure absente donne `None`, jamais une exception.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config.venue_config import (
    PANEL_TYPE_CLASSIFICATION,
    PANEL_TYPE_INSTRUCTOR,
    PANEL_TYPE_INSTRUCTOR_GROUP,
)
from .resource import Resource


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


@dataclass
class PanelNode:
    """Noeud d'un panneau : un libellé et des noeuds enfants ordonnés."""
    item_name: Optional[str] = None
    items: List["PanelNode"] = field(default_factory=list)
    
    @classmethod
    def from_dict(cls, data: Any) -> "PanelNode":
        if not isinstance(data, dict):
            return cls()
        return cls(
            item_name=_as_str(data.get("itemName")),
            items=[cls.from_dict(child) for child in _as_list(data.get("item"))],
        )
    
    def name_at(self, *path: int) -> Optional[str]:
        """
        Libellé du descendant désigné par une suite de positions.
        
        Sans position, retourne le libellé du noeud lui-même.
        """
        node: Optional[PanelNode] = self
        for index in path:
            if node is None or not 0 <= index < len(node.items):
                return None
            node = node.items[index]
        return node.item_name if node is not None else None


@dataclass
class Panel:
    """Panneau générique (typeId sans interprétation connue)."""
    type_id: Optional[int] = None
    items: List[PanelNode] = field(default_factory=list)
    
    def name_at(self, *path: int) -> Optional[str]:
        return PanelNode(items=self.items).name_at(*path)


class ClassificationPanel(Panel):
    """Panneau typeId 11 : titre, catégorie, organisation, département."""
    
    @property
    def lecture_title(self) -> Optional[str]:
        return self.name_at(1)
    
    @property
    def category_name(self) -> Optional[str]:
        return self.name_at(2)
    
    @property
    def organization(self) -> Optional[str]:
        return self.name_at(6, 0)
    
    @property
    def department(self) -> Optional[str]:
        return self.name_at(8, 0)


class InstructorPanel(Panel):
    """Panneau typeId 12 : texte instructeurs au premier niveau."""
    
    @property
    def instructor_text(self) -> Optional[str]:
        return self.name_at(0)


class InstructorGroupPanel(Panel):
    """Panneau typeId 13 : texte instructeurs imbriqué dans un groupe."""
    
    @property
    def instructor_text(self) -> Optional[str]:
        return self.name_at(0, 0)


PANEL_CLASSES = {
    PANEL_TYPE_CLASSIFICATION: ClassificationPanel,
    PANEL_TYPE_INSTRUCTOR: InstructorPanel,
    PANEL_TYPE_INSTRUCTOR_GROUP: InstructorGroupPanel,
}


def parse_panel(data: Any) -> Panel:
    """
    Construit la variante de panneau correspondant à `typeId`.
    
    Args:
        data: Panneau brut (dict) tel que fourni par 25Live
    
    Returns:
        Instance de la sous-classe adaptée, ou `Panel` si le type est inconnu
    """
    if not isinstance(data, dict):
        return Panel()
    
    type_id = data.get("typeId")
    panel_class = PANEL_CLASSES.get(type_id, Panel)
    return panel_class(
        type_id=type_id,
        items=[PanelNode.from_dict(child) for child in _as_list(data.get("item"))],
    )


@dataclass
class Reservation:
    """Réservation (`occur.prof[*].rsv[*]`) : date de début et ressources."""
    start_dt: Optional[str] = None
    resources: Optional[List[Resource]] = None
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Reservation":
        res = data.get("res")
        resources = None
        if isinstance(res, list):
            resources = [Resource.from_dict(r) for r in res if isinstance(r, dict)]
        return cls(start_dt=_as_str(data.get("startDt")), resources=resources)


@dataclass
class ItemDetails:
    """Détail d'un enregistrement : panneaux et réservations aplaties."""
    panels: List[Panel] = field(default_factory=list)
    reservations: List[Reservation] = field(default_factory=list)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ItemDetails":
        defn = data.get("defn") if isinstance(data.get("defn"), dict) else {}
        occur = data.get("occur") if isinstance(data.get("occur"), dict) else {}
        
        panels = [parse_panel(p) for p in _as_list(defn.get("panel"))]
        
        # L'ordre des réservations (prof puis rsv) est significatif
        reservations = []
        for prof in _as_list(occur.get("prof")):
            if not isinstance(prof, dict):
                continue
            for rsv in _as_list(prof.get("rsv")):
                if isinstance(rsv, dict):
                    reservations.append(Reservation.from_dict(rsv))
        
        return cls(panels=panels, reservations=reservations)
    
    def panel_at(self, index: int) -> Optional[Panel]:
        if 0 <= index < len(self.panels):
            return self.panels[index]
        return None


def _first_key(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


@dataclass(frozen=True)
class RawEventItem:
    """
    Réservation d'une salle pour une date, avant normalisation.
    
    Le collecteur utilise `subject_itemId`, `subject_itemName` et
    `subject_item_date` ; les variantes camelCase sont aussi acceptées.
    `payload` conserve le dict d'origine pour l'audit.
    """
    item_id: Optional[int]
    item_id2: Optional[int]
    subject_item_id: Optional[int]
    subject_item_name: Optional[str]
    subject_item_date: Optional[str]
    start: Any
    end: Any
    item_name: Optional[str]
    details: Optional[ItemDetails] = None
    payload: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawEventItem":
        details_data = data.get("itemDetails")
        details = ItemDetails.from_dict(details_data) if isinstance(details_data, dict) else None
        
        return cls(
            item_id=data.get("itemId"),
            item_id2=data.get("itemId2"),
            subject_item_id=_first_key(data, "subject_itemId", "subjectItemId"),
            subject_item_name=_as_str(_first_key(data, "subject_itemName", "subjectItemName")),
            subject_item_date=_as_str(_first_key(data, "subject_item_date", "subjectItemDate")),
            start=data.get("start"),
            end=data.get("end"),
            item_name=data.get("itemName"),
            details=details,
            payload=data,
        )
    
    @property
    def panels(self) -> List[Panel]:
        return self.details.panels if self.details else []
