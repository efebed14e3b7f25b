"""
Ressource réservée avec une salle (vidéo, traiteur, mobilier...).
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Resource:
    """
    Ressource d'une réservation.
    
    Aucune identité propre : deux ressources sont égales si leurs valeurs
    le sont.
    """
    item_name: Optional[str]
    quantity: Optional[Any] = None
    instruction: Optional[str] = None
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Resource":
        return cls(
            item_name=data.get("itemName"),
            quantity=data.get("quantity"),
            instruction=data.get("instruction"),
        )
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "itemName": self.item_name,
            "quantity": self.quantity,
            "instruction": self.instruction,
        }
