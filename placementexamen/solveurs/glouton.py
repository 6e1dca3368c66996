from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Set

from ..banc import indice_banc
from ..contraintes.base import Contrainte
from ..contraintes.voisinage import contraintes_par_defaut
from ..modele.affectation import AffectationSiege
from ..modele.candidat import Candidat
from ..modele.etat import EtatSalle
from ..modele.place import Place
from ..modele.salle import SalleExamen
from .base import ResultatPlacement, Solveur

logger = logging.getLogger(__name__)


class SolveurGlouton(Solveur):
    """Placement glouton, sans retour arrière, pour une salle.

    Politique (l'ordre de départage fait partie du comportement observable) :
      1. parcourir les candidats restants dans leur ordre d'arrivée ;
      2. pour chacun, chercher le premier siège en ordre ligne par ligne qui est
         libre et accepté par toutes les contraintes ;
      3. au premier candidat qui trouve un siège : l'assoir, le retirer, et
         reprendre le parcours depuis le début des restants ;
      4. si un passage complet n'assoit personne, s'arrêter : les restants sont bloqués.

    Chaque passage assoit un candidat ou termine, donc au plus `len(candidats)`
    passages. Le résultat ne dépend que des entrées (aucun aléa).
    """

    def resoudre(
        self,
        salle: SalleExamen,
        candidats: Sequence[Candidat],
        places_par_banc: int,
        *,
        contraintes: Optional[Sequence[Contrainte]] = None,
    ) -> ResultatPlacement:
        regles: Sequence[Contrainte] = contraintes_par_defaut() if contraintes is None else contraintes
        places: List[Place] = salle.toutes_les_places()
        etat = EtatSalle(salle.lignes, salle.colonnes, places_par_banc)

        essais: int = 0
        verifications: int = 0
        assis: Dict[Place, Candidat] = {}
        restants: List[Candidat] = list(candidats)

        def premiere_place(classe: str) -> Optional[Place]:
            nonlocal essais, verifications
            for place in places:
                if not etat.est_libre(place):
                    continue
                essais += 1
                ok = True
                for regle in regles:
                    verifications += 1
                    if not regle.autorise(etat, place, classe):
                        ok = False
                        break
                if ok:
                    return place
            return None

        while restants:
            progres: bool = False
            # l'état ne change pas pendant un passage : une classe refusée le reste
            classes_refusees: Set[str] = set()
            for i, candidat in enumerate(restants):
                classe: str = candidat.classe()
                if classe in classes_refusees:
                    continue
                place = premiere_place(classe)
                if place is None:
                    classes_refusees.add(classe)
                    continue
                etat.occuper(place, classe)
                assis[place] = candidat
                del restants[i]
                progres = True
                break
            if not progres:
                break

        affectations: List[AffectationSiege] = [
            AffectationSiege(
                candidat=assis[p],
                place=p,
                cle_banc=etat.cle_banc(p),
                indice_banc=indice_banc(p.colonne, places_par_banc),
            )
            for p in places
            if p in assis
        ]

        logger.debug(
            "salle %s : %d/%d candidats assis (%d bloqués, essais=%d, vérifications=%d)",
            salle.identifiant(),
            len(affectations),
            len(candidats),
            len(restants),
            essais,
            verifications,
        )
        return ResultatPlacement(affectations, bloques=restants, essais=essais, verifications=verifications)
