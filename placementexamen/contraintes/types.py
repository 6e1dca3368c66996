from __future__ import annotations

from enum import Enum


class TypeContrainte(str, Enum):
    """Enum centralisant les types logiques de contraintes.

    Hérite de `str` pour une sérialisation JSON directe (valeur = nom stable).
    """

    MEME_BANC = "same_bench"
    ADJACENTS = "adjacent_same_class"
