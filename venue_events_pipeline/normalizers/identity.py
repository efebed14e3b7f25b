"""
Identifiant déterministe des événements.

L'identifiant doit rester stable d'un scraping à l'autre pour que le
stockage puisse faire des upserts sur `id`. Seuls les chiffres de poids
faible de chaque source sont conservés afin de tenir dans un int8
PostgreSQL : deux triplets qui ne diffèrent que par les chiffres écartés
produisent le même identifiant (le dernier écrit l'emporte au stockage).
"""

# (largeur de padding, nombre de chiffres conservés)
ITEM_ID_DIGITS = (10, 6)
ITEM_ID2_DIGITS = (10, 6)
SUBJECT_ITEM_ID_DIGITS = (5, 5)


def _low_digits(value: int, width: int, keep: int) -> int:
    return int(str(value).zfill(width)[-keep:])


def generate_deterministic_id(item_id: int, item_id2: int, subject_item_id: int) -> int:
    """
    Calcule l'identifiant d'un événement depuis ses trois identifiants source.
    
    Args:
        item_id: Identifiant de l'événement 25Live
        item_id2: Identifiant de l'occurrence
        subject_item_id: Identifiant de la salle
    
    Returns:
        Entier positif tenant sur 64 bits signés
    
    Raises:
        ValueError: Si un identifiant est négatif ou non entier
    """
    values = []
    for name, value in (
        ("itemId", item_id),
        ("itemId2", item_id2),
        ("subject_itemId", subject_item_id),
    ):
        # bool est un int : True ne doit pas devenir l'identifiant 1
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {type(value).__name__} {value!r}")
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value!r}")
        values.append(value)
    
    item_part = _low_digits(values[0], *ITEM_ID_DIGITS)
    item2_part = _low_digits(values[1], *ITEM_ID2_DIGITS)
    subject_part = _low_digits(values[2], *SUBJECT_ITEM_ID_DIGITS)
    
    return item_part * 1_000_000_000 + item2_part * 10_000 + subject_part
