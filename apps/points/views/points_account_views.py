"""
Points balance and history views.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from apps.common.permissions import IsManager
from apps.common.utils import success_response, paginated_response
from ..models import PointsTransaction
from ..services import LedgerService
from ..serializers import PointsTransactionListSerializer, PointsTransactionSerializer


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_points_balance(request):
    """Get the current user's points balance"""
    return success_response({
        'userId': request.user.id,
        'utorid': request.user.username,
        'points': LedgerService.get_balance(request.user.id),
    })


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_points_transactions(request):
    """Get the current user's transaction history, newest first"""
    transactions = LedgerService.history(request.user.id, kind=request.GET.get('kind'))
    return paginated_response(
        transactions.order_by('-created_at', '-id'), PointsTransactionListSerializer, request
    )


@api_view(['GET'])
@permission_classes([IsManager])
def get_all_transactions(request):
    """All transactions, filterable by member utorid and kind (manager)"""
    transactions = PointsTransaction.objects.select_related('user', 'created_by')

    utorid = request.GET.get('utorid')
    if utorid:
        transactions = transactions.filter(user__username=utorid)

    kind = request.GET.get('kind')
    if kind:
        transactions = transactions.filter(kind=kind)

    return paginated_response(
        transactions.order_by('-created_at', '-id'), PointsTransactionSerializer, request
    )
