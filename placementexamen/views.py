# placementexamen/views.py
from __future__ import annotations

"""
Vues de l’application "placementexamen".

Contenu :
- Sonde de santé (sante)
- Génération synchrone (generer) : le moteur est pur et rapide
- Démarrage et polling d’une tâche Celery (generer_start / generer_status)
"""

import json
from typing import Any, Dict, Optional

from django.http import HttpRequest, HttpResponse, HttpResponseBadRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from .tasks import executer_generation


def _lire_json(request: HttpRequest) -> Optional[Dict[str, Any]]:
    """Décode le corps JSON ; `None` si invalide ou si ce n'est pas un objet."""
    try:
        data = json.loads((request.body or b"{}").decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


@require_GET
def sante(request: HttpRequest) -> HttpResponse:
    """
    Sonde de santé (sans DB/cache) — utile pour load balancer / monitoring.
    """
    return JsonResponse({"ok": True, "service": "placementexamen", "version": 1})


@csrf_exempt
@require_POST
def generer(request: HttpRequest) -> HttpResponse:
    """
    Génère le placement immédiatement.
    Body : {"rooms": [...], "students": [...] | "groups": [...], "seats_per_bench": 2}
    """
    data = _lire_json(request)
    if data is None:
        return HttpResponseBadRequest("JSON invalide")
    rep = executer_generation(data)
    return JsonResponse(rep, status=200 if rep["status"] == "SUCCESS" else 400)


@csrf_exempt
@require_POST
def generer_start(request: HttpRequest) -> HttpResponse:
    """
    Lance la tâche Celery de génération :
    - Body : même JSON que `generer`
    - Réponse : {"task_id": "..."} à poller via generer_status
    """
    from .tasks import t_generer_placement

    data = _lire_json(request)
    if data is None:
        return HttpResponseBadRequest("JSON invalide")
    task = t_generer_placement.delay(data)
    return JsonResponse({"task_id": task.id})


@require_GET
def generer_status(request: HttpRequest, task_id: str) -> HttpResponse:
    """
    Polling d’état (PENDING / STARTED / SUCCESS / FAILURE).
    En cas de SUCCESS, renvoie le résultat de la tâche.
    """
    from celery.result import AsyncResult

    ar = AsyncResult(task_id)
    if ar.state in ("PENDING", "RECEIVED", "STARTED", "RETRY"):
        return JsonResponse({"status": ar.state})
    if ar.state == "SUCCESS":
        return JsonResponse(ar.result)  # type: ignore[arg-type]

    return JsonResponse({"status": "FAILURE", "error": str(ar.result) or "échec."})
