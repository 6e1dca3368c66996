from django.urls import path
from . import views

app_name = "placementexamen"

urlpatterns = [
    # Petite sonde de santé (pratique pour Nginx / monitoring)
    path("sante", views.sante, name="sante"),

    # Génération directe, ou via Celery (start puis polling du statut)
    path("generer", views.generer, name="generer"),
    path("generer/start", views.generer_start, name="generer_start"),
    path("generer/status/<str:task_id>", views.generer_status, name="generer_status"),
]
