from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import Command as StaticRunserverCommand


class Command(StaticRunserverCommand):
    help = "Starts the meeting broker on the configured PORT unless an address is given."

    def handle(self, *args, **options):
        self.default_port = str(settings.PORT)
        return super().handle(*args, **options)
