"""
Points ledger service.

The ledger is the append-only list of PointsTransaction rows; ``User.points``
is a cache of their sum. Every write locks the member row, moves the cached
balance with a conditional F() update and appends the entry inside one
atomic block, so the two can never drift apart.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import F, Sum

from ..exceptions import InvalidAmount, InvalidNote, InsufficientBalance, MemberNotFound, NotAuthorized
from ..models import PointsTransaction
from ..signals import send_on_commit, ACTION_AWARDED, ACTION_ADJUSTED

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger('loyalty.audit')


def validate_amount(amount, allow_negative=False):
    """Return ``amount`` if it is a usable integer amount, else raise InvalidAmount"""
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidAmount("Amount must be an integer")
    if allow_negative:
        if amount == 0:
            raise InvalidAmount("Adjustment amount cannot be zero")
    elif amount <= 0:
        raise InvalidAmount("Amount must be greater than 0")
    return amount


def clean_note(note):
    note = (note or '').strip()
    if len(note) > PointsTransaction.NOTE_MAX_LENGTH:
        raise InvalidNote(f"Note must be at most {PointsTransaction.NOTE_MAX_LENGTH} characters")
    return note


def require_role(actor, role):
    if actor is None or not getattr(actor, 'is_authenticated', False) or not actor.has_role(role):
        raise NotAuthorized(f"{role.capitalize()} role or higher is required")


def member_pk(member):
    return getattr(member, 'pk', member)


class LedgerService:
    """Service for reading and writing member point balances"""

    @staticmethod
    def get_member(member_id, lock=False):
        User = get_user_model()
        queryset = User.objects.select_for_update() if lock else User.objects.all()
        try:
            return queryset.get(pk=member_pk(member_id))
        except (User.DoesNotExist, ValueError, TypeError):
            raise MemberNotFound(f"User {member_pk(member_id)} not found")

    @staticmethod
    def get_balance(member_id):
        """Current balance of a member"""
        return LedgerService.get_member(member_id).points

    @staticmethod
    def compute_balance(member_id):
        """Balance recomputed from the transaction history"""
        total = PointsTransaction.objects.filter(user_id=member_pk(member_id)).aggregate(
            total=Sum('amount')
        )['total']
        return total or 0

    @staticmethod
    def history(member_id, kind=None):
        """Member's transactions in creation order"""
        transactions = PointsTransaction.objects.filter(user_id=member_pk(member_id)).select_related(
            'created_by', 'redemption'
        )
        if kind:
            transactions = transactions.filter(kind=kind)
        return transactions.order_by('created_at', 'id')

    @staticmethod
    def record(member_id, kind, amount, actor, note='', redemption=None):
        """
        Append a ledger entry and move the cached balance by ``amount``.

        Debits only go through while the balance covers them; otherwise
        InsufficientBalance is raised and nothing is written.
        """
        User = get_user_model()
        with transaction.atomic():
            member = LedgerService.get_member(member_id, lock=True)

            balance_update = User.objects.filter(pk=member.pk)
            if amount < 0:
                balance_update = balance_update.filter(points__gte=-amount)
            if balance_update.update(points=F('points') + amount) != 1:
                raise InsufficientBalance(f"Insufficient points. Available: {member.points}")

            member.refresh_from_db(fields=['points'])
            entry = PointsTransaction.objects.create(
                user=member,
                created_by=actor,
                kind=kind,
                amount=amount,
                balance_after=member.points,
                note=note,
                redemption=redemption,
            )

        audit_logger.info(
            f"txn={entry.pk} kind={kind} member={member.username} amount={amount:+d} "
            f"balance={entry.balance_after} actor={actor.username}"
        )
        return entry

    @staticmethod
    def award(member_id, amount, actor, note=''):
        """Credit a member's balance (cashier or higher)"""
        require_role(actor, 'cashier')
        validate_amount(amount)
        note = clean_note(note)

        with transaction.atomic():
            entry = LedgerService.record(
                member_id, PointsTransaction.KIND_AWARD, amount, actor, note=note
            )
            send_on_commit(
                LedgerService, actor=actor, member=entry.user, action=ACTION_AWARDED,
                message=f"Awarded {amount} points to {entry.user.username}", instance=entry,
            )
        logger.info(f"{actor.username} awarded {amount} points to {entry.user.username}")
        return entry

    @staticmethod
    def adjust(member_id, amount, actor, note=''):
        """Administrative correction in either direction (manager or higher)"""
        require_role(actor, 'manager')
        validate_amount(amount, allow_negative=True)
        note = clean_note(note)

        with transaction.atomic():
            entry = LedgerService.record(
                member_id, PointsTransaction.KIND_ADJUSTMENT, amount, actor, note=note
            )
            send_on_commit(
                LedgerService, actor=actor, member=entry.user, action=ACTION_ADJUSTED,
                message=f"Adjusted {entry.user.username} by {amount:+d} points", instance=entry,
            )
        logger.info(f"{actor.username} adjusted {entry.user.username} by {amount:+d} points")
        return entry
