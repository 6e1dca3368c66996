from __future__ import annotations

from placementexamen.contraintes.types import TypeContrainte
from placementexamen.contraintes.voisinage import (
    PasMemeClasseAdjacente,
    PasMemeClasseSurBanc,
    contraintes_par_defaut,
)
from placementexamen.modele.affectation import AffectationSiege
from placementexamen.modele.candidat import Candidat
from placementexamen.modele.etat import EtatSalle
from placementexamen.modele.place import Place


def _aff(sid: str, classe: str, r: int, c: int) -> AffectationSiege:
    # cle_banc/indice_banc non utilisés : les contraintes recalculent depuis la géométrie
    return AffectationSiege(Candidat(sid, classe), Place(r, c), cle_banc=-1, indice_banc=-1)


def test_same_bench_conflicts():
    c = PasMemeClasseSurBanc()
    ok = [_aff("a1", "A", 0, 0), _aff("b1", "B", 0, 1)]
    ko = [_aff("a1", "A", 0, 0), _aff("a2", "A", 0, 2)]  # bancs de 3 : même banc
    assert c.est_satisfaite(ok, colonnes=4, places_par_banc=2) is True
    assert c.est_satisfaite(ko, colonnes=4, places_par_banc=2) is True
    conflits = c.conflits(ko, colonnes=4, places_par_banc=3)
    assert [(a.candidat.identifiant(), b.candidat.identifiant()) for a, b in conflits] == [("a1", "a2")]


def test_adjacency_conflicts_ignore_diagonals():
    c = PasMemeClasseAdjacente()
    diagonale = [_aff("a1", "A", 0, 0), _aff("a2", "A", 1, 1)]
    derriere = [_aff("a1", "A", 0, 0), _aff("a2", "A", 1, 0)]
    assert c.est_satisfaite(diagonale, colonnes=2, places_par_banc=1) is True
    assert c.est_satisfaite(derriere, colonnes=2, places_par_banc=1) is False


def test_incremental_checks_follow_state():
    etat = EtatSalle(lignes=2, colonnes=4, places_par_banc=2)
    etat.occuper(Place(0, 0), "A")
    banc, adj = PasMemeClasseSurBanc(), PasMemeClasseAdjacente()
    assert banc.autorise(etat, Place(0, 1), "A") is False
    assert banc.autorise(etat, Place(0, 1), "B") is True
    assert adj.autorise(etat, Place(1, 0), "A") is False
    assert adj.autorise(etat, Place(1, 1), "A") is True
    assert etat.classes_du_banc(etat.cle_banc(Place(0, 1))) == {"A"}


def test_machine_codes_are_stable():
    codes = [c.code_machine() for c in contraintes_par_defaut()]
    assert codes == [{"type": TypeContrainte.MEME_BANC.value}, {"type": TypeContrainte.ADJACENTS.value}]
    assert all(c.texte_humain() for c in contraintes_par_defaut())
