"""
QR scan views for cashiers.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes

from apps.common.permissions import IsCashier
from apps.common.utils import success_response, error_response
from ..services import ScanService
from ..services.scan_service import SCAN_REDEMPTION
from ..serializers import ScanSerializer, ScanPreviewSerializer, PointsTransactionSerializer


@api_view(['POST'])
@permission_classes([IsCashier])
def scan_qr(request):
    """
    Act on scanned QR text.

    A redemption QR processes that request; a user QR awards ``amount``
    points with an optional ``note``.
    """
    serializer = ScanSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid input', serializer.errors)

    data = serializer.validated_data
    result = ScanService.dispatch(data['payload'], request.user, amount=data['amount'], note=data['note'])

    if result.kind == SCAN_REDEMPTION:
        message = 'Redemption processed successfully!'
    else:
        message = 'Points awarded successfully!'

    return success_response({
        'kind': result.kind,
        'payload': result.payload.to_dict(),
        'transaction': PointsTransactionSerializer(result.transaction).data,
    }, message, status.HTTP_201_CREATED)


@api_view(['POST'])
@permission_classes([IsCashier])
def scan_preview(request):
    """Decode QR text without acting on it"""
    serializer = ScanPreviewSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response('Invalid input', serializer.errors)
    return success_response(ScanService.preview(serializer.validated_data['payload']))
