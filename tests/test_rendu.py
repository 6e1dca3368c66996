from __future__ import annotations

from placementexamen.agregation import generer_session
from placementexamen.modele.candidat import Candidat
from placementexamen.modele.salle import SalleExamen
from placementexamen.rendu import grille_salle, texte_salle


def test_grid_rebuilt_from_assignments():
    salle = SalleExamen("R1", 2, 3)
    groupes = [("A", [Candidat("a1", "A"), Candidat("a2", "A")])]
    res = generer_session([salle], groupes, 1)
    grille = grille_salle(salle, res.par_salle["R1"])
    assert len(grille) == 2 and all(len(r) == 3 for r in grille)
    # a1 en (0,0), a2 saute un siège en (0,2)
    assert grille[0][0].candidat.identifiant() == "a1"
    assert grille[0][1] is None
    assert grille[0][2].candidat.identifiant() == "a2"
    assert grille[1] == [None, None, None]


def test_text_rendering_marks_empty_seats():
    salle = SalleExamen("R1", 1, 2)
    res = generer_session([salle], [("A", [Candidat("a1", "A", infos={"register_id": "REG1"})])], 2)
    texte = texte_salle(salle, res.par_salle["R1"])
    assert "REG1/A" in texte
    assert "—" in texte
    assert texte.count(" | ") == 1
