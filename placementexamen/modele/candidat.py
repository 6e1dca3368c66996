from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


class Candidat:
    """Modélise un candidat (élève) à placer pour une session d'examen.


    Paramètres du constructeur
    --------------------------
    identifiant : str
    Identifiant opaque, unique dans la cohorte.
    classe : str
    Section / classe du candidat : c'est sur elle que portent les règles de voisinage.
    infos : Mapping[str, Any], optionnel
    Champs d'affichage (nom, matricule...) transportés tels quels.


    Détails d'implémentation
    ------------------------
    - L'identifiant est normalisé en `str` (les identifiants UI peuvent être des entiers).
    - Égalité et hachage ne portent que sur l'identifiant.
    """

    def __init__(self, identifiant: Any, classe: str, infos: Optional[Mapping[str, Any]] = None) -> None:
        self._identifiant: str = str(identifiant)
        self._classe: str = str(classe)
        self._infos: Dict[str, Any] = dict(infos or {})

    def identifiant(self) -> str:
        """Retourne l'identifiant du candidat."""
        return self._identifiant

    def classe(self) -> str:
        """Retourne l'étiquette de classe."""
        return self._classe

    def infos(self) -> Dict[str, Any]:
        """Retourne une copie des champs d'affichage."""
        return dict(self._infos)

    def affichage_nom(self) -> str:
        """Retourne le matricule, ou le nom, ou à défaut l'identifiant."""
        return str(self._infos.get("register_id") or self._infos.get("name") or self._identifiant)

    # --- Protocole de comparaison / hachage ---
    def __str__(self) -> str:  # pragma: no cover - représentation
        return f"{self._identifiant} ({self._classe})"

    def __repr__(self) -> str:  # pragma: no cover - représentation
        return f"Candidat({self._identifiant!r}, {self._classe!r})"

    def __hash__(self) -> int:
        return hash(self._identifiant)

    def __eq__(self, autre: object) -> bool:
        return isinstance(autre, Candidat) and self._identifiant == autre._identifiant
