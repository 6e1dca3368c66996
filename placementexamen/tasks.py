from __future__ import annotations

import logging
from typing import Any, Dict

from celery import shared_task
from django.conf import settings

from .agregation import generer_session
from .fabrique_ui import (
    groupes_depuis_payload,
    places_par_banc_depuis_payload,
    resume_salles,
    salles_depuis_payload,
)

logger = logging.getLogger(__name__)


def executer_generation(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Traduit le payload, lance la génération et renvoie une réponse homogène :
      - {"status": "SUCCESS", "result": {...}, "rooms": {...}, "seats_per_bench": n}
      - {"status": "FAILURE", "error": "..."} si le payload est invalide.
    """
    defaut: int = int(getattr(settings, "PLACEMENT_EXAMEN_PLACES_PAR_BANC", 2))
    try:
        salles = salles_depuis_payload(payload.get("rooms", []))
        groupes = groupes_depuis_payload(payload)
        places_par_banc = places_par_banc_depuis_payload(payload, defaut)
        resultat = generer_session(salles, groupes, places_par_banc)
    except ValueError as exc:
        logger.info("génération refusée : %s", exc)
        return {"status": "FAILURE", "error": str(exc)}

    return {
        "status": "SUCCESS",
        "result": resultat.vers_dict(),
        "rooms": resume_salles(salles),
        "seats_per_bench": places_par_banc,
    }


# --------------------------------------------------------------------------- tâche principale

@shared_task(bind=True)
def t_generer_placement(self, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Tâche asynchrone : génère le placement d'une session d'examen."""
    logger.debug("tâche %s : génération du placement", self.request.id)
    return executer_generation(payload)
