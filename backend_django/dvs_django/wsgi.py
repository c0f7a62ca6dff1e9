"""
WSGI config for the DVS landmark service.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'dvs_django.settings')

application = get_wsgi_application()
