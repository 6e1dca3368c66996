from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Place:
    """Représente un *siège* dans la grille d'une salle d'examen.

    Attributs
    ---------
    ligne : int
    Indice de rangée, du tableau vers le fond (0-indexé).
    colonne : int
    Indice de colonne, de gauche à droite (0-indexé).


    Immuable : sert de clé dans les dictionnaires/ensembles du moteur.
    """

    ligne: int
    colonne: int

    def dans_grille(self, lignes: int, colonnes: int) -> bool:
        """Indique si la place appartient à une grille `lignes` x `colonnes`."""
        return 0 <= self.ligne < lignes and 0 <= self.colonne < colonnes
