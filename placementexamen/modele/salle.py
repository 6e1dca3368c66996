from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from .place import Place


class SalleExamen:
    """
    Modélise une salle d'examen : une grille `lignes` x `colonnes` de sièges.

    Les sièges sont regroupés en bancs côté moteur (voir `placementexamen.banc`) ;
    la salle elle-même ne connaît que sa géométrie.

    Exemple :
        salle = SalleExamen("B102", lignes=5, colonnes=6, infos={"name": "B102"})
        salle.capacite()  # 30
    """

    def __init__(self, identifiant: Any, lignes: int, colonnes: int, infos: Optional[Mapping[str, Any]] = None) -> None:
        """
        Args:
            identifiant: identifiant opaque, unique dans une session.
            lignes: nombre de rangées (>= 1).
            colonnes: nombre de sièges par rangée (>= 1).
            infos: champs d'affichage (nom, département...) sans effet sur le placement.

        Lève `ValueError` si une dimension n'est pas un entier >= 1.
        """
        for libelle, valeur in (("lignes", lignes), ("colonnes", colonnes)):
            if isinstance(valeur, bool) or not isinstance(valeur, int):
                raise ValueError(f"Salle {identifiant!r} : {libelle} doit être un entier, reçu {valeur!r}")
            if valeur < 1:
                raise ValueError(f"Salle {identifiant!r} : {libelle} doit être >= 1, reçu {valeur}")

        self._identifiant: str = str(identifiant)
        self._lignes: int = lignes
        self._colonnes: int = colonnes
        self._infos: Dict[str, Any] = dict(infos or {})

    @property
    def lignes(self) -> int:
        """nombre de rangées de la grille."""
        return self._lignes

    @property
    def colonnes(self) -> int:
        """nombre de sièges par rangée."""
        return self._colonnes

    def identifiant(self) -> str:
        """Retourne l'identifiant de la salle."""
        return self._identifiant

    def infos(self) -> Dict[str, Any]:
        """Retourne une copie des champs d'affichage."""
        return dict(self._infos)

    def capacite(self) -> int:
        """Retourne le nombre de sièges (lignes x colonnes)."""
        return self._lignes * self._colonnes

    def toutes_les_places(self) -> List[Place]:
        """
        Énumère toutes les places de la salle en ordre ligne par ligne :
        rangée 0 puis rangée 1..., et dans une rangée colonne 0 puis 1...
        """
        return [Place(ligne=r, colonne=c) for r in range(self._lignes) for c in range(self._colonnes)]

    def __str__(self) -> str:
        return f"SalleExamen({self._identifiant})x[{self._lignes}x{self._colonnes}]"
