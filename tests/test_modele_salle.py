from __future__ import annotations

import pytest

from placementexamen.modele.candidat import Candidat
from placementexamen.modele.place import Place
from placementexamen.modele.salle import SalleExamen


def test_salle_places_count_and_order():
    salle = SalleExamen("A1", lignes=2, colonnes=3)
    places = salle.toutes_les_places()
    assert salle.capacite() == 6
    assert len(places) == 6
    # ordre ligne par ligne
    assert places[:4] == [Place(0, 0), Place(0, 1), Place(0, 2), Place(1, 0)]


@pytest.mark.parametrize("lignes, colonnes", [(0, 3), (3, 0), (-1, 2), (2.5, 2), ("3", 2)])
def test_salle_rejects_bad_dimensions(lignes, colonnes):
    with pytest.raises(ValueError):
        SalleExamen("X", lignes=lignes, colonnes=colonnes)


def test_position_immutable_hashable():
    a = Place(0, 0)
    b = Place(0, 0)
    s = {a}
    assert b in s  # même valeur -> hash/eq
    assert a.dans_grille(1, 1) is True
    assert Place(1, 0).dans_grille(1, 1) is False


def test_candidat_identity_is_its_id():
    a = Candidat(7, "CSE-A", infos={"name": "Asha"})
    b = Candidat("7", "CSE-B")
    assert a == b
    assert a.identifiant() == "7"
    assert a.affichage_nom() == "Asha"
    assert Candidat("9", "X", infos={"register_id": "R9", "name": "N"}).affichage_nom() == "R9"
