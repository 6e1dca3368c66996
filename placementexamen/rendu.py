from __future__ import annotations

from typing import List, Optional, Sequence

from .modele.affectation import AffectationSiege
from .modele.salle import SalleExamen

Grille = List[List[Optional[AffectationSiege]]]


def grille_salle(salle: SalleExamen, affectations: Sequence[AffectationSiege]) -> Grille:
    """
    Reconstruit le tableau `lignes` x `colonnes` d'une salle : chaque affectation
    est posée dans sa case, les autres cases restent à `None`.
    """
    grille: Grille = [[None] * salle.colonnes for _ in range(salle.lignes)]
    for a in affectations:
        grille[a.place.ligne][a.place.colonne] = a
    return grille


def texte_salle(salle: SalleExamen, affectations: Sequence[AffectationSiege], largeur: int = 12) -> str:
    """
    Rendu texte d'une salle, une rangée par ligne, « — » pour un siège vide.
    Utile en console et pour le debug.
    """
    lignes: List[str] = []
    for rangee in grille_salle(salle, affectations):
        cellules: List[str] = []
        for a in rangee:
            if a is None:
                cellules.append("—".center(largeur))
            else:
                cellules.append(f"{a.candidat.affichage_nom()}/{a.candidat.classe()}"[:largeur].ljust(largeur))
        lignes.append(" | ".join(cellules))
    return "\n".join(lignes)
