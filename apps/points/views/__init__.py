"""
Points views module.
"""
from .points_account_views import get_points_balance, get_points_transactions, get_all_transactions
from .points_action_views import award_points, adjust_points
from .points_redemption_views import (
    redemptions, pending_redemptions, redemption_detail, redemption_qr_code,
    process_redemption, cancel_redemption
)
from .points_scan_views import scan_qr, scan_preview

__all__ = [
    'get_points_balance',
    'get_points_transactions',
    'get_all_transactions',
    'award_points',
    'adjust_points',
    'redemptions',
    'pending_redemptions',
    'redemption_detail',
    'redemption_qr_code',
    'process_redemption',
    'cancel_redemption',
    'scan_qr',
    'scan_preview',
]
