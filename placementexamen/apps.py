# placementexamen/apps.py
from django.apps import AppConfig


class PlacementexamenConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "placementexamen"
    verbose_name = "Placement des examens"
