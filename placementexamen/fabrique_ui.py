# placementexamen/fabrique_ui.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from .banc import valider_places_par_banc
from .entrelacement import CLASSE_INCONNUE, GroupeClasse, grouper_par_classe
from .modele.candidat import Candidat
from .modele.salle import SalleExamen


# --- helpers ---------------------------------------------------------------

_CHAMPS_AFFICHAGE_SALLE = ("name", "department")


def _entier(valeur: Any, libelle: str) -> int:
    """Entier strict : `int` tel quel, ou `str` entièrement numérique ; ni bool ni fraction."""
    if isinstance(valeur, bool):
        raise ValueError(f"{libelle} : entier attendu, reçu {valeur!r}")
    if isinstance(valeur, int):
        return valeur
    if isinstance(valeur, str):
        try:
            return int(valeur.strip())
        except ValueError as exc:
            raise ValueError(f"{libelle} : entier attendu, reçu {valeur!r}") from exc
    raise ValueError(f"{libelle} : entier attendu, reçu {valeur!r}")


def _candidat(s: Mapping[str, Any], classe: Optional[str] = None) -> Candidat:
    """Construit un Candidat ; 'class' du groupe prime sur celle de l'élève, vide -> CLASSE_INCONNUE."""
    sid = s.get("id", s.get("student_id"))
    if sid is None:
        raise ValueError(f"élève sans identifiant (clé 'id') : {dict(s)!r}")
    cls = classe if classe is not None else s.get("class", "")
    infos = {k: v for k, v in s.items() if k not in {"id", "student_id", "class"}}
    return Candidat(identifiant=sid, classe=str(cls or CLASSE_INCONNUE), infos=infos)


# --- public ----------------------------------------------------------------

def salles_depuis_payload(rooms: Sequence[Mapping[str, Any]]) -> List[SalleExamen]:
    """
    Traduit `[{"id", "rows", "cols", "name"?, "department"?}, ...]` en salles,
    en conservant l'ordre reçu (il détermine le remplissage).
    """
    out: List[SalleExamen] = []
    for r in rooms or []:
        if "id" not in r:
            raise ValueError(f"salle sans identifiant (clé 'id') : {dict(r)!r}")
        infos = {k: r[k] for k in _CHAMPS_AFFICHAGE_SALLE if k in r}
        out.append(
            SalleExamen(
                identifiant=r["id"],
                lignes=_entier(r.get("rows"), f"salle {r['id']!r} rows"),
                colonnes=_entier(r.get("cols"), f"salle {r['id']!r} cols"),
                infos=infos,
            )
        )
    return out


def groupes_depuis_payload(payload: Mapping[str, Any]) -> List[GroupeClasse]:
    """
    Deux formats acceptés :
      - "groups": [{"class": "...", "students": [...]}, ...]  (ordre des groupes conservé)
      - "students": [{"id", "class", ...}, ...]  (regroupés par ordre de première apparition)
    """
    groupes_ui = payload.get("groups")
    if groupes_ui is not None:
        groupes: List[GroupeClasse] = []
        for g in groupes_ui:
            classe = str(g.get("class") or CLASSE_INCONNUE)
            groupes.append((classe, [_candidat(s, classe) for s in g.get("students", [])]))
        return groupes
    return grouper_par_classe(_candidat(s) for s in payload.get("students", []))


def places_par_banc_depuis_payload(payload: Mapping[str, Any], defaut: int) -> int:
    """Lit 'seats_per_bench' (défaut : `defaut`) et vérifie qu'il vaut 1, 2 ou 3."""
    brut = payload.get("seats_per_bench")
    valeur = defaut if brut is None else _entier(brut, "seats_per_bench")
    return valider_places_par_banc(valeur)


def resume_salles(salles: Sequence[SalleExamen]) -> Dict[str, Dict[str, Any]]:
    """Dimensions et champs d'affichage par salle, pour reconstruire les grilles côté client."""
    return {
        s.identifiant(): {"rows": s.lignes, "cols": s.colonnes, "capacity": s.capacite(), **s.infos()}
        for s in salles
    }
