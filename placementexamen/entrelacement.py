from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from .modele.candidat import Candidat

CLASSE_INCONNUE = "Inconnue"

GroupeClasse = Tuple[str, List[Candidat]]


def grouper_par_classe(candidats: Iterable[Candidat]) -> List[GroupeClasse]:
    """
    Regroupe une liste à plat par classe.

    Les groupes apparaissent dans l'ordre de première apparition de leur classe,
    et l'ordre d'origine est conservé dans chaque groupe. Une classe vide est
    rangée sous `CLASSE_INCONNUE`.
    """
    groupes: Dict[str, List[Candidat]] = {}
    for c in candidats:
        groupes.setdefault(c.classe() or CLASSE_INCONNUE, []).append(c)
    return list(groupes.items())


def entrelacer(groupes: Sequence[GroupeClasse]) -> List[Candidat]:
    """
    Tourniquet sur les classes : le 1er de chaque groupe (dans l'ordre des
    groupes), puis le 2e de chaque groupe qui en a un, etc.

    Exemple : A=[a1, a2, a3], B=[b1], C=[c1, c2] -> a1 b1 c1 a2 c2 a3
    """
    sequence: List[Candidat] = []
    taille_max: int = max((len(membres) for _, membres in groupes), default=0)
    for j in range(taille_max):
        for _, membres in groupes:
            if j < len(membres):
                sequence.append(membres[j])
    return sequence
