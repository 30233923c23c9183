"""WSGI config for the postsite project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "postsite.settings")

application = get_wsgi_application()
