"""
Errors raised by the points ledger, redemption workflow and scan dispatch.

Every error carries a stable ``code`` for API clients and the HTTP status
the exception handler should answer with. They are raised inside
``transaction.atomic()`` blocks so a failure never leaves partial writes.
"""
from rest_framework import status


class LedgerError(Exception):
    code = 'ledger_error'
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Points operation failed'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class InvalidAmount(LedgerError):
    code = 'invalid_amount'
    default_message = 'Amount must be a positive integer'


class InsufficientBalance(LedgerError):
    code = 'insufficient_balance'
    default_message = 'Insufficient points'


class InvalidNote(LedgerError):
    code = 'invalid_note'
    default_message = 'Note must be at most 200 characters'


class NotVerified(LedgerError):
    code = 'not_verified'
    status_code = status.HTTP_403_FORBIDDEN
    default_message = 'You must be a verified user to create redemption requests'


class NotAuthorized(LedgerError):
    code = 'not_authorized'
    status_code = status.HTTP_403_FORBIDDEN
    default_message = 'Your role does not allow this operation'


class MemberNotFound(LedgerError):
    code = 'member_not_found'
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'User not found'


class RequestNotFound(LedgerError):
    code = 'request_not_found'
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Redemption request not found'


class InvalidState(LedgerError):
    code = 'invalid_state'
    status_code = status.HTTP_409_CONFLICT
    default_message = 'Redemption request is no longer pending'


class InvalidPayload(LedgerError):
    code = 'decode_error'
    default_message = 'Invalid QR code format'


class ImmutableTransactionError(Exception):
    """Raised when code tries to change or delete a recorded transaction"""
