"""
Redemption workflow service.

State machine::

    pending --process--> processed
    pending --cancel---> cancelled

Creation only checks the balance at that moment and reserves nothing.
Processing re-checks it while debiting, and claims the request with a
conditional UPDATE on ``status='pending'`` so that of any number of
concurrent processors exactly one succeeds.
"""
import logging

from django.db import transaction
from django.utils import timezone

from ..exceptions import InsufficientBalance, InvalidState, NotAuthorized, NotVerified, RequestNotFound
from ..models import PointsTransaction, RedemptionRequest
from ..signals import (
    send_on_commit, ACTION_REDEMPTION_CREATED, ACTION_REDEMPTION_PROCESSED, ACTION_REDEMPTION_CANCELLED
)
from .ledger_service import LedgerService, validate_amount, clean_note, require_role

logger = logging.getLogger(__name__)


class RedemptionService:
    """Service for the redemption request lifecycle"""

    @staticmethod
    def _lock_request(request_id):
        """Fetch a redemption request with its row locked (caller holds the transaction)"""
        if isinstance(request_id, bool) or not isinstance(request_id, int):
            raise RequestNotFound(f"Redemption request {request_id!r} not found")
        try:
            return RedemptionRequest.objects.select_for_update().get(pk=request_id)
        except RedemptionRequest.DoesNotExist:
            raise RequestNotFound(f"Redemption request #{request_id} not found")

    @staticmethod
    def _claim(redemption, **changes):
        """Move a request out of pending; False if someone else already did"""
        claimed = RedemptionRequest.objects.filter(
            pk=redemption.pk, status=RedemptionRequest.STATUS_PENDING
        ).update(**changes)
        if claimed != 1:
            return False
        for field, value in changes.items():
            setattr(redemption, field, value)
        return True

    @staticmethod
    def get_request(request_id):
        try:
            return RedemptionRequest.objects.select_related('user', 'processed_by').get(pk=request_id)
        except (RedemptionRequest.DoesNotExist, ValueError, TypeError):
            raise RequestNotFound(f"Redemption request #{request_id} not found")

    @staticmethod
    def create_request(member, amount, remark=''):
        """
        Create a pending redemption request for ``member``.

        ``member`` is the authenticated identity; it must be verified and the
        amount must not exceed its balance right now. No points move yet.
        """
        if not getattr(member, 'verified', False):
            raise NotVerified()
        validate_amount(amount)
        remark = clean_note(remark)

        with transaction.atomic():
            balance = LedgerService.get_balance(member.pk)
            if amount > balance:
                raise InsufficientBalance(f"Insufficient points. You have {balance} points available.")

            redemption = RedemptionRequest.objects.create(user=member, amount=amount, remark=remark)
            send_on_commit(
                RedemptionService, actor=member, member=member, action=ACTION_REDEMPTION_CREATED,
                message=f"Redemption request #{redemption.pk} for {amount} points created",
                instance=redemption,
            )

        logger.info(f"{member.username} created redemption request #{redemption.pk} for {amount} points")
        return redemption

    @staticmethod
    def process_request(request_id, processor):
        """
        Fulfil a pending request: debit the member and close the request.

        Returns the redemption PointsTransaction. Raises InvalidState if the
        request is not pending, including when a concurrent processor won.
        """
        require_role(processor, 'cashier')

        with transaction.atomic():
            redemption = RedemptionService._lock_request(request_id)
            if not redemption.is_pending:
                raise InvalidState(f"Redemption request #{redemption.pk} is already {redemption.status}")

            if not RedemptionService._claim(
                redemption,
                status=RedemptionRequest.STATUS_PROCESSED,
                processed_at=timezone.now(),
                processed_by=processor,
            ):
                raise InvalidState(f"Redemption request #{redemption.pk} is no longer pending")

            note = f"Redemption #{redemption.pk}"
            if redemption.remark:
                note = f"{note}: {redemption.remark}"[:PointsTransaction.NOTE_MAX_LENGTH]
            try:
                entry = LedgerService.record(
                    redemption.user_id,
                    PointsTransaction.KIND_REDEMPTION,
                    -redemption.amount,
                    processor,
                    note=note,
                    redemption=redemption,
                )
            except InsufficientBalance:
                logger.warning(
                    f"Redemption #{redemption.pk} exceeds the current balance of member {redemption.user_id}"
                )
                raise

            send_on_commit(
                RedemptionService, actor=processor, member=entry.user, action=ACTION_REDEMPTION_PROCESSED,
                message=f"Redemption #{redemption.pk} processed: {redemption.amount} points",
                instance=redemption,
            )

        logger.info(f"{processor.username} processed redemption #{redemption.pk}")
        return entry

    @staticmethod
    def cancel_request(request_id, actor):
        """Cancel a pending request; allowed for its owner or a manager"""
        if actor is None or not getattr(actor, 'is_authenticated', False):
            raise NotAuthorized()

        with transaction.atomic():
            redemption = RedemptionService._lock_request(request_id)
            if redemption.user_id != actor.pk and not actor.has_role('manager'):
                raise NotAuthorized("Only the owner or a manager can cancel this request")
            if not redemption.is_pending:
                raise InvalidState(f"Redemption request #{redemption.pk} is already {redemption.status}")

            if not RedemptionService._claim(
                redemption,
                status=RedemptionRequest.STATUS_CANCELLED,
                cancelled_at=timezone.now(),
                cancelled_by=actor,
            ):
                raise InvalidState(f"Redemption request #{redemption.pk} is no longer pending")

            send_on_commit(
                RedemptionService, actor=actor, member=redemption.user, action=ACTION_REDEMPTION_CANCELLED,
                message=f"Redemption request #{redemption.pk} cancelled", instance=redemption,
            )

        logger.info(f"{actor.username} cancelled redemption #{redemption.pk}")
        return redemption

    @staticmethod
    def requests_for(member, status=None):
        requests = RedemptionRequest.objects.filter(user_id=member.pk)
        if status:
            requests = requests.filter(status=status)
        return requests

    @staticmethod
    def pending_requests():
        return RedemptionRequest.objects.filter(
            status=RedemptionRequest.STATUS_PENDING
        ).select_related('user').order_by('created_at', 'id')
