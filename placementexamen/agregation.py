from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Set

from .banc import valider_places_par_banc
from .contraintes.voisinage import contraintes_par_defaut
from .decoupage import Decoupage, decouper
from .entrelacement import GroupeClasse, entrelacer
from .modele.affectation import AffectationSiege, ResultatSession
from .modele.candidat import Candidat
from .modele.place import Place
from .modele.salle import SalleExamen
from .solveurs.base import Solveur
from .solveurs.glouton import SolveurGlouton

logger = logging.getLogger(__name__)


def _verifier_unicite(salles: Sequence[SalleExamen], groupes: Sequence[GroupeClasse]) -> None:
    """Lève `ValueError` si un identifiant de salle ou de candidat apparaît deux fois."""
    vus_salles: Set[str] = set()
    for s in salles:
        if s.identifiant() in vus_salles:
            raise ValueError(f"Salle {s.identifiant()!r} sélectionnée deux fois")
        vus_salles.add(s.identifiant())

    vus_candidats: Set[str] = set()
    for _, membres in groupes:
        for c in membres:
            if c.identifiant() in vus_candidats:
                raise ValueError(f"Candidat {c.identifiant()!r} présent deux fois dans la cohorte")
            vus_candidats.add(c.identifiant())


def generer_session(
    salles: Sequence[SalleExamen],
    groupes: Sequence[GroupeClasse],
    places_par_banc: int,
    *,
    solveur: Optional[Solveur] = None,
) -> ResultatSession:
    """
    Chaîne complète : entrelacement -> découpage par salle -> placement par salle.

    Args:
        salles: salles sélectionnées, dans l'ordre de remplissage.
        groupes: cohorte par classe, `[(classe, [Candidat, ...]), ...]`.
        places_par_banc: 1, 2 ou 3 pour toute la session.
        solveur: moteur de placement (glouton par défaut).

    Retour:
        `ResultatSession` ; les candidats non placés (débordement ou blocage)
        y sont listés, ce n'est jamais une erreur.

    Lève `ValueError` sur une entrée invalide (places_par_banc, doublons).
    """
    valider_places_par_banc(places_par_banc)
    _verifier_unicite(salles, groupes)
    moteur: Solveur = solveur or SolveurGlouton()

    sequence: List[Candidat] = entrelacer(groupes)
    decoupage: Decoupage = decouper(sequence, salles)

    resultat = ResultatSession(
        total_places=sum(s.capacite() for s in salles),
        non_places_debordement=list(decoupage.debordement),
    )
    for tranche in decoupage.tranches:
        res = moteur.resoudre(tranche.salle, tranche.candidats, places_par_banc)
        resultat.par_salle[tranche.salle.identifiant()] = res.affectations
        resultat.non_places_bloques.extend(res.bloques)

    logger.info(
        "session générée : %d salles, %d candidats, %d assis, %d places",
        len(salles),
        len(sequence),
        resultat.nb_places(),
        resultat.total_places,
    )
    if resultat.non_places:
        logger.warning(
            "%d candidats non placés (%d par débordement, %d bloqués)",
            len(resultat.non_places),
            len(resultat.non_places_debordement),
            len(resultat.non_places_bloques),
        )
    return resultat


def verifier_session(
    resultat: ResultatSession,
    salles: Sequence[SalleExamen],
    places_par_banc: int,
) -> List[str]:
    """
    Revérifie un résultat : sièges dans la grille et distincts, aucune règle de
    voisinage violée. Retourne la liste des anomalies (vide si tout est correct).
    """
    index: Dict[str, SalleExamen] = {s.identifiant(): s for s in salles}
    contraintes = contraintes_par_defaut()
    anomalies: List[str] = []

    for salle_id, affectations in resultat.par_salle.items():
        salle: Optional[SalleExamen] = index.get(salle_id)
        if salle is None:
            anomalies.append(f"salle {salle_id!r} inconnue")
            continue

        occupees: Dict[Place, AffectationSiege] = {}
        for a in affectations:
            if not a.place.dans_grille(salle.lignes, salle.colonnes):
                anomalies.append(
                    f"salle {salle_id} : ({a.place.ligne}, {a.place.colonne}) hors grille "
                    f"pour {a.candidat.identifiant()}"
                )
            autre = occupees.get(a.place)
            if autre is not None:
                anomalies.append(
                    f"salle {salle_id} : ({a.place.ligne}, {a.place.colonne}) occupé par "
                    f"{autre.candidat.identifiant()} et {a.candidat.identifiant()}"
                )
            occupees[a.place] = a

        for c in contraintes:
            for a, b in c.conflits(affectations, salle.colonnes, places_par_banc):
                anomalies.append(
                    f"salle {salle_id} : {c.texte_humain()} "
                    f"({a.candidat.identifiant()} et {b.candidat.identifiant()})"
                )
    return anomalies
