from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from apps.common.models import Notice


class Command(BaseCommand):
    help = 'Delete notices that have already expired'

    def add_arguments(self, parser):
        parser.add_argument(
            '--user-id',
            type=int,
            help='Purge notices for a specific user ID only',
        )

    def handle(self, *args, **options):
        user_id = options.get('user_id')

        if user_id:
            User = get_user_model()
            if not User.objects.filter(id=user_id).exists():
                raise CommandError(f'User with ID {user_id} not found')

        deleted = Notice.purge_expired(user_id=user_id)
        self.stdout.write(self.style.SUCCESS(f'Purged {deleted} expired notice(s)'))
