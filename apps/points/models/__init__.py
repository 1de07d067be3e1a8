"""
Points models module.
"""
from .transaction import PointsTransaction
from .redemption import RedemptionRequest

__all__ = [
    'PointsTransaction',
    'RedemptionRequest',
]
