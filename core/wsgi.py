"""WSGI entry point.

The startup translation run is kicked off here so that production servers
(gunicorn, uwsgi) behave like ``manage.py runserver``.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "core.settings")

application = get_wsgi_application()

from api.jobs import process_on_startup  # noqa: E402

process_on_startup()
