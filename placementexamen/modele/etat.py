from __future__ import annotations

from typing import Dict, List, Optional, Set

from ..banc import cle_banc
from .place import Place


class EtatSalle:
    """État de travail d'une salle pendant *un* appel au moteur.

    - grille : `lignes` x `colonnes`, chaque case vaut `None` (libre) ou la
      classe du candidat assis ;
    - classes par banc : clé de banc -> ensemble des classes déjà assises.

    Un état n'est jamais partagé entre salles ni entre appels.
    """

    def __init__(self, lignes: int, colonnes: int, places_par_banc: int) -> None:
        self.lignes: int = lignes
        self.colonnes: int = colonnes
        self.places_par_banc: int = places_par_banc
        self._grille: List[List[Optional[str]]] = [[None] * colonnes for _ in range(lignes)]
        self._classes_par_banc: Dict[int, Set[str]] = {}

    def cle_banc(self, place: Place) -> int:
        return cle_banc(place.ligne, place.colonne, self.colonnes, self.places_par_banc)

    def est_libre(self, place: Place) -> bool:
        return self._grille[place.ligne][place.colonne] is None

    def classe_en(self, place: Place) -> Optional[str]:
        """Classe assise en `place`, ou `None` si le siège est libre."""
        return self._grille[place.ligne][place.colonne]

    def classes_du_banc(self, cle: int) -> Set[str]:
        return self._classes_par_banc.get(cle, set())

    def occuper(self, place: Place, classe: str) -> None:
        """Assoit un candidat de `classe` en `place` et met à jour son banc."""
        if not self.est_libre(place):
            raise ValueError(f"Siège ({place.ligne}, {place.colonne}) déjà occupé")
        self._grille[place.ligne][place.colonne] = classe
        self._classes_par_banc.setdefault(self.cle_banc(place), set()).add(classe)
