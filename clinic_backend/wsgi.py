"""WSGI entry point for the clinic backend.

    gunicorn clinic_backend.wsgi:application
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'clinic_backend.settings')

application = get_wsgi_application()
