from .base import *
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env.dev into process env for local development only.
load_dotenv(Path(BASE_DIR) / ".env.dev")


DEBUG = True
ALLOWED_HOSTS = []

EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"

# re-read after .env.dev
PLACEMENT_EXAMEN_PLACES_PAR_BANC = int(os.getenv("PLACEMENT_EXAMEN_PLACES_PAR_BANC", "2"))
