"""
Regroupement ordonné par clé.
"""

from typing import Callable, Dict, Hashable, Iterable, List, TypeVar

T = TypeVar("T")


def group_by(items: Iterable[T], key: Callable[[T], Hashable]) -> Dict[Hashable, List[T]]:
    """
    Regroupe les éléments par clé.
    
    Les groupes apparaissent dans l'ordre de première occurrence de leur clé,
    et les éléments gardent leur ordre d'origine dans chaque groupe.
    """
    groups: Dict[Hashable, List[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups
