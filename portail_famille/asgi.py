# portail_famille/asgi.py
"""
ASGI config for the Portail Famille project.

This module exposes the ASGI callable as a module-level variable
named ``application``. It is used by ASGI servers such as
Daphne, Uvicorn, or Hypercorn to serve the JSON API.

For more details, see:
https://docs.djangoproject.com/en/stable/howto/deployment/asgi/
"""

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "portail_famille.settings")

#: The ASGI application callable used by ASGI servers
application = get_asgi_application()
