from django.core.management.base import BaseCommand
from django.db import transaction
from microposts.models import User

class Command(BaseCommand):
    """
    Management command to remove (unseed) user data from the database.

    Deletes every non-staff user. Microposts, follow edges and favorite
    edges cascade with their users, so staff accounts are left with a
    clean slate.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        """Delete all non-staff users and report how many were removed."""
        with transaction.atomic():
            deleted, _ = User.objects.filter(is_staff=False).delete()
        self.stdout.write(self.style.SUCCESS(f"Removed seeded data ({deleted} rows)."))
