"""WSGI entry point for the lift pass pricing API."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "liftpass.settings")

application = get_wsgi_application()
