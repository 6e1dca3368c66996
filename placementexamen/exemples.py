from __future__ import annotations

import json
from typing import List

from .agregation import generer_session, verifier_session
from .entrelacement import GroupeClasse
from .modele.candidat import Candidat
from .modele.salle import SalleExamen
from .rendu import texte_salle


def construire_exemple(places_par_banc: int = 2, en_json: bool = False) -> None:
    """
    construit deux salles et une cohorte de trois classes, puis lance la génération.

    affiche chaque salle en grille, les candidats non placés, et le résultat des
    vérifications ; ou le résultat sérialisé si `en_json`.
    """
    # salles : A101 (4 x 6) puis B204 (3 x 4), remplies dans cet ordre
    salles: List[SalleExamen] = [
        SalleExamen("A101", lignes=4, colonnes=6, infos={"name": "A101", "department": "CSE"}),
        SalleExamen("B204", lignes=3, colonnes=4, infos={"name": "B204", "department": "ECE"}),
    ]

    # cohorte : trois sections d'effectifs inégaux
    groupes: List[GroupeClasse] = []
    for classe, effectif in (("CSE-A", 14), ("CSE-B", 12), ("ECE-A", 10)):
        membres = [
            Candidat(f"{classe}-{i:02d}", classe, infos={"register_id": f"{classe[:3]}{classe[-1]}{i:02d}"})
            for i in range(1, effectif + 1)
        ]
        groupes.append((classe, membres))

    resultat = generer_session(salles, groupes, places_par_banc)

    if en_json:
        print(json.dumps(resultat.vers_dict(), ensure_ascii=False, indent=2))
        return

    for salle in salles:
        affectations = resultat.par_salle[salle.identifiant()]
        print(f"=== {salle.identifiant()} : {len(affectations)}/{salle.capacite()} places occupées ===")
        print(texte_salle(salle, affectations))
        print()

    print(f"assis : {resultat.nb_places()} / places : {resultat.total_places}")
    if resultat.non_places:
        print("non placés :", ", ".join(c.identifiant() for c in resultat.non_places))

    anomalies = verifier_session(resultat, salles, places_par_banc)
    print("\n(vérification : OK)" if not anomalies else "\n".join(anomalies))


def main() -> None:
    """point d'entrée du module CLI."""
    construire_exemple()


if __name__ == "__main__":
    main()
