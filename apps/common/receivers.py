"""
Turn committed ledger events into notices for the acting user.
"""
import logging

from django.dispatch import receiver

from apps.points.signals import ledger_event
from .models import Notice

logger = logging.getLogger(__name__)


@receiver(ledger_event)
def post_ledger_notice(sender, actor, member, action, message, instance=None, **kwargs):
    Notice.post(actor, message, level='success')
    if member is not None and member.pk != actor.pk:
        Notice.post(member, message, level='info')
    logger.debug(f"Posted notice for {action}: {message}")
