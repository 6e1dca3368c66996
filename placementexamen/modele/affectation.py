from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .candidat import Candidat
from .place import Place


@dataclass(frozen=True)
class AffectationSiege:
    """Un candidat placé sur un siège.

    Attributs
    ---------
    candidat : Candidat
    Le candidat placé.
    place : Place
    Le siège occupé.
    cle_banc : int
    Identifiant du banc dans la salle (partagé par les sièges d'un même banc).
    indice_banc : int
    Rang du banc dans sa rangée.
    """

    candidat: Candidat
    place: Place
    cle_banc: int
    indice_banc: int

    def vers_dict(self) -> Dict[str, Any]:
        """Représentation JSON-friendly ; les champs d'affichage sont recopiés tels quels."""
        d: Dict[str, Any] = dict(self.candidat.infos())
        d.update(
            {
                "student_id": self.candidat.identifiant(),
                "class": self.candidat.classe(),
                "row": self.place.ligne,
                "col": self.place.colonne,
                "bench_id": self.cle_banc,
                "bench_index": self.indice_banc,
            }
        )
        return d


@dataclass
class ResultatSession:
    """Résultat complet d'une génération, toutes salles confondues.

    Attributs
    ---------
    par_salle : Dict[str, List[AffectationSiege]]
        Affectations par identifiant de salle, dans l'ordre des salles reçu,
        chaque liste triée ligne par ligne.
    non_places_bloques : List[Candidat]
        Candidats laissés de côté par le moteur dans une salle (blocage).
    non_places_debordement : List[Candidat]
        Candidats au-delà de la capacité totale.
    total_places : int
        Somme des capacités des salles.
    """

    par_salle: Dict[str, List[AffectationSiege]] = field(default_factory=dict)
    non_places_bloques: List[Candidat] = field(default_factory=list)
    non_places_debordement: List[Candidat] = field(default_factory=list)
    total_places: int = 0

    @property
    def non_places(self) -> List[Candidat]:
        """Tous les candidats sans siège : bloqués puis débordement."""
        return self.non_places_bloques + self.non_places_debordement

    def nb_places(self) -> int:
        """Nombre de candidats effectivement assis."""
        return sum(len(aff) for aff in self.par_salle.values())

    def vers_dict(self) -> Dict[str, Any]:
        return {
            "rooms": {sid: [a.vers_dict() for a in aff] for sid, aff in self.par_salle.items()},
            "unseated": [c.identifiant() for c in self.non_places],
            "unseated_overflow": [c.identifiant() for c in self.non_places_debordement],
            "unseated_stuck": [c.identifiant() for c in self.non_places_bloques],
            "total_seats": self.total_places,
            "seated": self.nb_places(),
        }

    def lignes_persistance(self, session_id: Any) -> List[Dict[str, Any]]:
        """
        Lignes à enregistrer par l'appelant, une par candidat assis.
        L'upsert (session, salle) reste à la charge de la couche de stockage.
        """
        out: List[Dict[str, Any]] = []
        for salle_id, aff in self.par_salle.items():
            for a in aff:
                out.append(
                    {
                        "session_id": session_id,
                        "room_id": salle_id,
                        "student_id": a.candidat.identifiant(),
                        "row_num": a.place.ligne,
                        "col_num": a.place.colonne,
                        "bench_index": a.indice_banc,
                        "bench_id": a.cle_banc,
                    }
                )
        return out
