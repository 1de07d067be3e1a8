from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from apps.points.services import LedgerService


class Command(BaseCommand):
    help = 'Check cached point balances against the transaction ledger'

    def add_arguments(self, parser):
        parser.add_argument(
            '--user-id',
            type=int,
            help='Check a specific user ID only',
        )
        parser.add_argument(
            '--fix',
            action='store_true',
            help='Reset mismatched cached balances to the ledger sum',
        )

    def handle(self, *args, **options):
        User = get_user_model()
        user_id = options.get('user_id')

        users = User.objects.order_by('id')
        if user_id:
            users = users.filter(id=user_id)
            if not users.exists():
                raise CommandError(f'User with ID {user_id} not found')

        mismatched = 0
        for pk in users.values_list('id', flat=True):
            # Compare and reset under the member's row lock so no award lands in between
            with transaction.atomic():
                user = User.objects.select_for_update().get(pk=pk)
                ledger_balance = LedgerService.compute_balance(user.pk)
                if ledger_balance == user.points:
                    continue

                mismatched += 1
                self.stdout.write(
                    self.style.WARNING(
                        f'{user.username}: cached {user.points}, ledger {ledger_balance}'
                    )
                )
                if options['fix']:
                    User.objects.filter(pk=user.pk).update(points=ledger_balance)
                    self.stdout.write(f'  reset {user.username} to {ledger_balance}')

        if mismatched:
            self.stdout.write(self.style.ERROR(f'{mismatched} balance(s) out of sync with the ledger'))
        else:
            self.stdout.write(self.style.SUCCESS('All balances match the ledger'))
