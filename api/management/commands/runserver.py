import logging

from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand


class Command(RunserverCommand):
    """``runserver`` listening on ``PORT`` by default.

    The startup translation run is started when the server loads ``core.wsgi``.
    """

    default_port = str(settings.PORT)

    def inner_run(self, *args, **options):
        logging.info(f"Translation server running on port {self.port}")
        super().inner_run(*args, **options)
