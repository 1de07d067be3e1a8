"""
Signals sent by the points services once a ledger change has committed.

``ledger_event`` arguments:
    actor    -- user who performed the operation
    member   -- user whose balance or request was affected
    action   -- one of the ACTION_* names below
    message  -- short human readable summary
    instance -- the PointsTransaction or RedemptionRequest involved
"""
from django.db import transaction
from django.dispatch import Signal

ACTION_AWARDED = 'awarded'
ACTION_ADJUSTED = 'adjusted'
ACTION_REDEMPTION_CREATED = 'redemption_created'
ACTION_REDEMPTION_PROCESSED = 'redemption_processed'
ACTION_REDEMPTION_CANCELLED = 'redemption_cancelled'

ledger_event = Signal()


def send_on_commit(sender, **kwargs):
    """Send ledger_event after the surrounding transaction commits"""
    transaction.on_commit(lambda: ledger_event.send(sender=sender, **kwargs))
