from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, Tuple

from ..modele.affectation import AffectationSiege
from ..modele.etat import EtatSalle
from ..modele.place import Place
from .types import TypeContrainte

Conflit = Tuple[AffectationSiege, AffectationSiege]


class Contrainte(ABC):
    """Classe de base des règles de placement d'une salle.

    Méthodes à implémenter
    ----------------------
    - `type_contrainte()` : retourne un membre de `TypeContrainte`.
    - `autorise(etat, place, classe)` : test incrémental utilisé par le moteur
      avant d'assoir un candidat de `classe` en `place` (siège supposé libre).
    - `conflits(affectations, colonnes, places_par_banc)` : paires en violation
      dans une affectation terminée.
    - `texte_humain()` : texte lisible pour l'interface.
    - `code_machine()` : représentation stable et sérialisable (dict JSON-friendly).
    """

    @abstractmethod
    def type_contrainte(self) -> TypeContrainte:
        """Retourne le type logique de la contrainte."""
        raise NotImplementedError

    @abstractmethod
    def autorise(self, etat: EtatSalle, place: Place, classe: str) -> bool:
        """Indique si `classe` peut s'asseoir en `place` vu l'état courant."""
        raise NotImplementedError

    @abstractmethod
    def conflits(
        self,
        affectations: Sequence[AffectationSiege],
        colonnes: int,
        places_par_banc: int,
    ) -> List[Conflit]:
        """Retourne les paires d'affectations qui violent la contrainte."""
        raise NotImplementedError

    def est_satisfaite(self, affectations: Sequence[AffectationSiege], colonnes: int, places_par_banc: int) -> bool:
        """Indique si la contrainte est satisfaite par une affectation de salle."""
        return not self.conflits(affectations, colonnes, places_par_banc)

    @abstractmethod
    def texte_humain(self) -> str:
        """Texte concis, lisible par un humain."""
        raise NotImplementedError

    def code_machine(self) -> Dict[str, Any]:
        """Représentation sérialisable, stable et exploitable par des outils."""
        return {"type": self.type_contrainte().value}


def paires_meme_classe(affectations: Sequence[AffectationSiege]) -> List[Conflit]:
    """Énumère les paires (a, b), a avant b, de candidats de même classe."""
    par_classe: Dict[str, List[AffectationSiege]] = {}
    for a in affectations:
        par_classe.setdefault(a.candidat.classe(), []).append(a)
    paires: List[Conflit] = []
    for groupe in par_classe.values():
        for i, a in enumerate(groupe):
            for b in groupe[i + 1:]:
                paires.append((a, b))
    return paires
