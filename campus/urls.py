# comments in French
from __future__ import annotations

from django.http import HttpResponse
from django.urls import include, path


def healthz(_request) -> HttpResponse:
    """endpoint très simple pour les sondes de liveness."""
    return HttpResponse("ok", content_type="text/plain")

urlpatterns = [
    # moteur de placement des examens (génération directe ou via Celery)
    path(
        "placementexamen/",
        include(("placementexamen.urls", "placementexamen"), namespace="placementexamen"),
    ),
    path("healthz", healthz),
]
