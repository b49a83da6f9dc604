# portail_famille/wsgi.py
"""
WSGI config for the Portail Famille project.

Exposes the WSGI callable used by Gunicorn, uWSGI or the
development server.
"""

import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "portail_famille.settings")

#: The WSGI application callable used by WSGI servers
application = get_wsgi_application()
