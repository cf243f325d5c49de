"""
Management command to list the configured PDF drivers.

Shows every driver in settings.PDF['drivers'], marks the default driver
and the adapter class each one resolves to.

Usage:
    python manage.py pdf_drivers
    python manage.py pdf_drivers --driver fpdf
"""

from django.core.management.base import BaseCommand, CommandError

from pdf_drivers import conf
from pdf_drivers.exceptions import ConfigurationError
from pdf_drivers.factory import get_driver_class


class Command(BaseCommand):
    help = 'List the configured PDF drivers and the classes they resolve to'

    def add_arguments(self, parser):
        parser.add_argument(
            '--driver',
            help='Only show this driver (fails if it cannot be resolved)',
        )

    def handle(self, *args, **options):
        requested = options.get('driver')
        default = conf.get_default_driver()
        drivers = conf.get_pdf_settings().get('drivers') or {}

        if requested:
            config = conf.get_driver_config(requested)
            if config is None:
                raise CommandError(f'PDF driver "{requested}" does not exist.')
            try:
                driver_class = get_driver_class(requested, config)
            except ConfigurationError as e:
                raise CommandError(str(e))
            self.stdout.write(f'{requested}: {driver_class.__module__}.{driver_class.__name__}')
            return

        if not drivers:
            self.stdout.write(self.style.WARNING('No PDF drivers configured'))
            return

        for name, config in drivers.items():
            marker = '*' if name == default else ' '
            try:
                driver_class = get_driver_class(name, config or {})
                self.stdout.write(
                    f'{marker} {name}: {driver_class.__module__}.{driver_class.__name__}'
                )
            except ConfigurationError as e:
                self.stdout.write(self.style.ERROR(f'{marker} {name}: {e}'))

        if default not in drivers:
            self.stdout.write(self.style.WARNING(f'Default driver "{default}" is not configured'))
