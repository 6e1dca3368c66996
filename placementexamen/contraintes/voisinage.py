from __future__ import annotations

from typing import List, Sequence

from ..banc import cle_banc, sont_adjacents, voisins
from ..modele.affectation import AffectationSiege
from ..modele.etat import EtatSalle
from ..modele.place import Place
from .base import Conflit, Contrainte, paires_meme_classe
from .types import TypeContrainte


class PasMemeClasseSurBanc(Contrainte):
    """Interdit que deux candidats de même classe partagent un banc."""

    def type_contrainte(self) -> TypeContrainte:
        return TypeContrainte.MEME_BANC

    def autorise(self, etat: EtatSalle, place: Place, classe: str) -> bool:
        return classe not in etat.classes_du_banc(etat.cle_banc(place))

    def conflits(
        self,
        affectations: Sequence[AffectationSiege],
        colonnes: int,
        places_par_banc: int,
    ) -> List[Conflit]:
        def cle(a: AffectationSiege) -> int:
            return cle_banc(a.place.ligne, a.place.colonne, colonnes, places_par_banc)

        return [(a, b) for a, b in paires_meme_classe(affectations) if cle(a) == cle(b)]

    def texte_humain(self) -> str:
        return "Deux candidats d'une même classe ne partagent jamais un banc"


class PasMemeClasseAdjacente(Contrainte):
    """Interdit deux candidats de même classe sur des sièges voisins (haut/bas/gauche/droite)."""

    def type_contrainte(self) -> TypeContrainte:
        return TypeContrainte.ADJACENTS

    def autorise(self, etat: EtatSalle, place: Place, classe: str) -> bool:
        for v in voisins(place.ligne, place.colonne, etat.lignes, etat.colonnes):
            if etat.classe_en(v) == classe:
                return False
        return True

    def conflits(
        self,
        affectations: Sequence[AffectationSiege],
        colonnes: int,
        places_par_banc: int,
    ) -> List[Conflit]:
        return [(a, b) for a, b in paires_meme_classe(affectations) if sont_adjacents(a.place, b.place)]

    def texte_humain(self) -> str:
        return "Deux candidats d'une même classe ne sont jamais assis côte à côte ni l'un derrière l'autre"


def contraintes_par_defaut() -> List[Contrainte]:
    """Les deux règles appliquées à chaque salle, dans l'ordre où le moteur les teste."""
    return [PasMemeClasseSurBanc(), PasMemeClasseAdjacente()]
