from __future__ import annotations

from math import ceil
from typing import List

from .modele.place import Place

PLACES_PAR_BANC_VALIDES = (1, 2, 3)


def valider_places_par_banc(places_par_banc: int) -> int:
    """Retourne `places_par_banc` s'il vaut 1, 2 ou 3 ; lève `ValueError` sinon."""
    if isinstance(places_par_banc, bool) or places_par_banc not in PLACES_PAR_BANC_VALIDES:
        raise ValueError(
            f"places_par_banc doit valoir 1, 2 ou 3, reçu {places_par_banc!r}"
        )
    return places_par_banc


def indice_banc(colonne: int, places_par_banc: int) -> int:
    """Rang du banc dans sa rangée : floor(colonne / places_par_banc)."""
    return colonne // places_par_banc


def cle_banc(ligne: int, colonne: int, colonnes: int, places_par_banc: int) -> int:
    """
    Identifiant du banc dans la salle. Deux sièges partagent un banc ssi leurs
    clés sont égales ; un banc ne déborde jamais sur la rangée suivante.
    """
    bancs_par_rangee: int = ceil(colonnes / places_par_banc)
    return ligne * bancs_par_rangee + indice_banc(colonne, places_par_banc)


def voisins(ligne: int, colonne: int, lignes: int, colonnes: int) -> List[Place]:
    """
    Sièges adjacents (haut/bas/gauche/droite) présents dans la grille.
    Les diagonales ne comptent pas.
    """
    candidats = (
        (ligne, colonne - 1),
        (ligne, colonne + 1),
        (ligne - 1, colonne),
        (ligne + 1, colonne),
    )
    return [Place(r, c) for r, c in candidats if 0 <= r < lignes and 0 <= c < colonnes]


def sont_adjacents(a: Place, b: Place) -> bool:
    """Retourne `True` si `a` et `b` sont à distance de Manhattan 1."""
    return abs(a.ligne - b.ligne) + abs(a.colonne - b.colonne) == 1
