"""
Redemption request views.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from apps.common.permissions import IsCashier
from apps.common.utils import success_response, error_response, paginated_response
from .. import qr
from ..exceptions import RequestNotFound
from ..services import RedemptionService
from ..serializers import (
    RedemptionRequestSerializer, RedemptionCreateSerializer, PointsTransactionSerializer
)


def _visible_request(request, request_id):
    """Members see their own requests; cashiers and above see all"""
    redemption = RedemptionService.get_request(request_id)
    if redemption.user_id != request.user.id and not request.user.is_cashier:
        raise RequestNotFound(f"Redemption request #{request_id} not found")
    return redemption


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def redemptions(request):
    """List the current user's redemption requests or create a new one"""
    if request.method == 'GET':
        requests = RedemptionService.requests_for(request.user, status=request.GET.get('status'))
        return paginated_response(requests, RedemptionRequestSerializer, request)

    serializer = RedemptionCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid input', serializer.errors)

    redemption = RedemptionService.create_request(
        request.user,
        serializer.validated_data['amount'],
        remark=serializer.validated_data['remark'],
    )
    return success_response(
        RedemptionRequestSerializer(redemption).data,
        'Redemption request created successfully',
        status.HTTP_201_CREATED,
    )


@api_view(['GET'])
@permission_classes([IsCashier])
def pending_redemptions(request):
    """Pending requests awaiting a cashier, oldest first"""
    return paginated_response(RedemptionService.pending_requests(), RedemptionRequestSerializer, request)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def redemption_detail(request, request_id):
    redemption = _visible_request(request, request_id)
    return success_response(RedemptionRequestSerializer(redemption).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def redemption_qr_code(request, request_id):
    """QR payload and image for a pending request the cashier can scan"""
    redemption = _visible_request(request, request_id)
    if not redemption.is_pending:
        return error_response(
            f"Redemption request is already {redemption.status}",
            status_code=status.HTTP_409_CONFLICT,
            error_code='invalid_state',
        )

    payload = qr.encode(redemption)
    return success_response({
        'payload': payload,
        'image': qr.render_png_data_url(payload),
    })


@api_view(['POST'])
@permission_classes([IsCashier])
def process_redemption(request, request_id):
    """Fulfil a pending redemption request"""
    entry = RedemptionService.process_request(request_id, request.user)
    return success_response(
        PointsTransactionSerializer(entry).data, 'Redemption processed successfully'
    )


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def cancel_redemption(request, request_id):
    """Cancel a pending request (owner or manager)"""
    redemption = RedemptionService.cancel_request(request_id, request.user)
    return success_response(
        RedemptionRequestSerializer(redemption).data, 'Redemption request cancelled'
    )
