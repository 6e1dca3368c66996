from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..contraintes.base import Contrainte
from ..modele.affectation import AffectationSiege
from ..modele.candidat import Candidat
from ..modele.salle import SalleExamen


class ResultatPlacement:
    """Résultat du placement d'une salle.

    Attributs
    ---------
    affectations : List[AffectationSiege]
        Candidats assis, triés ligne par ligne.
    bloques : List[Candidat]
        Candidats de la tranche restés sans siège, dans leur ordre d'arrivée.
    essais : int
        Nombre de couples (candidat, siège libre) examinés.
    verifications : int
        Nombre d'appels aux contraintes.
    """

    def __init__(
        self,
        affectations: List[AffectationSiege],
        bloques: List[Candidat],
        essais: int,
        verifications: int,
    ) -> None:
        self.affectations: List[AffectationSiege] = affectations
        self.bloques: List[Candidat] = bloques
        self.essais: int = essais
        self.verifications: int = verifications


class Solveur(ABC):
    """Interface abstraite des moteurs de placement d'une salle."""

    @abstractmethod
    def resoudre(
        self,
        salle: SalleExamen,
        candidats: Sequence[Candidat],
        places_par_banc: int,
        *,
        contraintes: Optional[Sequence[Contrainte]] = None,
    ) -> ResultatPlacement:
        """Assoit autant de candidats que la politique du moteur le permet."""
        raise NotImplementedError
