"""
Cashier and manager balance actions.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes

from apps.common.permissions import IsCashier, IsManager
from apps.common.utils import success_response, error_response
from ..services import LedgerService
from ..serializers import AwardPointsSerializer, AdjustPointsSerializer, PointsTransactionSerializer


@api_view(['POST'])
@permission_classes([IsCashier])
def award_points(request):
    """Award points to a member"""
    serializer = AwardPointsSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid input', serializer.errors)

    data = serializer.validated_data
    entry = LedgerService.award(data['userId'], data['amount'], request.user, note=data['note'])
    return success_response(
        PointsTransactionSerializer(entry).data, 'Points awarded successfully', status.HTTP_201_CREATED
    )


@api_view(['POST'])
@permission_classes([IsManager])
def adjust_points(request):
    """Apply a signed administrative adjustment to a member's balance"""
    serializer = AdjustPointsSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid input', serializer.errors)

    data = serializer.validated_data
    entry = LedgerService.adjust(data['userId'], data['amount'], request.user, note=data['note'])
    return success_response(
        PointsTransactionSerializer(entry).data, 'Points adjusted successfully', status.HTTP_201_CREATED
    )
