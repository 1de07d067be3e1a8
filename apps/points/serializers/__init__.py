"""
Points serializers module.
"""
from .transaction_serializers import PointsTransactionListSerializer, PointsTransactionSerializer
from .redemption_serializers import RedemptionRequestSerializer, RedemptionCreateSerializer
from .action_serializers import AwardPointsSerializer, AdjustPointsSerializer, ScanSerializer, ScanPreviewSerializer

__all__ = [
    'PointsTransactionListSerializer',
    'PointsTransactionSerializer',
    'RedemptionRequestSerializer',
    'RedemptionCreateSerializer',
    'AwardPointsSerializer',
    'AdjustPointsSerializer',
    'ScanSerializer',
    'ScanPreviewSerializer',
]
