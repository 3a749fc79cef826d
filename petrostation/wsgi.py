"""
WSGI config for petrostation project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'petrostation.settings')

application = get_wsgi_application()
