"""
Scan dispatch: turn decoded QR text into a ledger operation.

A redemption QR processes that request (its stored amount is authoritative);
a member QR awards the operator-entered amount to that member. Anything the
codec does not recognise is rejected before the ledger is touched.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Union

from django.conf import settings

from .. import qr
from ..exceptions import InvalidAmount, InvalidPayload
from ..models import PointsTransaction
from .ledger_service import LedgerService, require_role
from .redemption_service import RedemptionService

logger = logging.getLogger(__name__)

SCAN_AWARD = 'award'
SCAN_REDEMPTION = 'redemption'


@dataclass
class ScanResult:
    kind: str
    payload: Union[qr.UserPayload, qr.RedemptionPayload]
    transaction: PointsTransaction


class ScanService:
    """Dispatch scanned QR payloads to the ledger or the redemption workflow"""

    @staticmethod
    def preview(text):
        """
        Decode without acting, for live feedback while the operator types.

        An undecodable payload is "not recognised yet", not an error.
        """
        payload = qr.decode(text)
        if isinstance(payload, qr.DecodeError):
            return {'recognized': False, 'reason': payload.reason, 'payload': None}
        return {'recognized': True, 'reason': None, 'payload': payload.to_dict()}

    @staticmethod
    def dispatch(text, actor, amount: Optional[int] = None, note='') -> ScanResult:
        require_role(actor, 'cashier')
        payload = qr.decode(text)

        if isinstance(payload, qr.DecodeError):
            raise InvalidPayload(f"Invalid QR code format: {payload.reason}")

        if isinstance(payload, qr.RedemptionPayload):
            # The operator-entered amount is ignored for redemptions
            entry = RedemptionService.process_request(payload.request_id, actor)
            if -entry.amount != payload.amount:
                logger.warning(
                    f"Redemption QR #{payload.request_id} showed {payload.amount} points, "
                    f"request is for {-entry.amount}"
                )
            return ScanResult(kind=SCAN_REDEMPTION, payload=payload, transaction=entry)

        if isinstance(payload, qr.UserPayload):
            if amount is None:
                raise InvalidAmount("Please enter a valid point amount")
            member = LedgerService.get_member(payload.user_id)
            if member.username != payload.utorid:
                logger.warning(
                    f"User QR mismatch: id {payload.user_id} belongs to {member.username}, "
                    f"QR says {payload.utorid}"
                )
                raise InvalidPayload("QR code does not match a registered user")
            entry = LedgerService.award(
                member.pk, amount, actor, note=note or settings.DEFAULT_SCAN_NOTE
            )
            return ScanResult(kind=SCAN_AWARD, payload=payload, transaction=entry)

        raise InvalidPayload(f"Unsupported QR payload: {type(payload).__name__}")
