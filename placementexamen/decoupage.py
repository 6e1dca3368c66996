from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from .modele.candidat import Candidat
from .modele.salle import SalleExamen


@dataclass(frozen=True)
class Tranche:
    """Portion de la séquence entrelacée confiée à une salle.

    `debut` est la position du premier candidat de la tranche dans la séquence.
    """

    salle: SalleExamen
    debut: int
    candidats: List[Candidat] = field(default_factory=list)


@dataclass(frozen=True)
class Decoupage:
    tranches: List[Tranche]
    debordement: List[Candidat]


def decouper(sequence: Sequence[Candidat], salles: Sequence[SalleExamen]) -> Decoupage:
    """
    Découpe `sequence` en tranches successives, une par salle, dans l'ordre des salles.

    Chaque salle reçoit `sequence[decalage : decalage + capacite]` puis le décalage
    avance de la capacité. Aucune contrainte n'est vérifiée ici ; ce qui dépasse la
    capacité totale forme le débordement. Changer l'ordre des salles change donc
    *qui* va dans quelle salle.
    """
    tranches: List[Tranche] = []
    decalage: int = 0
    for salle in salles:
        capacite: int = salle.capacite()
        tranches.append(Tranche(salle=salle, debut=decalage, candidats=list(sequence[decalage:decalage + capacite])))
        decalage += capacite
    return Decoupage(tranches=tranches, debordement=list(sequence[decalage:]))
