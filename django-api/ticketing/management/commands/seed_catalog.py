from django.apps import apps
from django.core.management.base import BaseCommand, CommandError

from ticketing.container import DJANGO_BACKEND


class Command(BaseCommand):
    help = "Load demo users, categories, events and a booking into an empty database."

    def handle(self, *args, **options):
        container = apps.get_app_config("ticketing").container
        if container.backend != DJANGO_BACKEND:
            raise CommandError(
                "seed_catalog only applies to TICKETING_STORE_BACKEND=django; "
                "the memory backend seeds itself on startup."
            )
        if container.catalog.list_categories():
            raise CommandError("Catalog already contains data; refusing to seed twice.")

        container.seed()
        self.stdout.write(self.style.SUCCESS("Seeded demo data."))
