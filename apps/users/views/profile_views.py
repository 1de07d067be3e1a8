"""
Current user profile and QR code views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response, error_response
from apps.points import qr
from ..serializers import UserDetailSerializer, UserUpdateSerializer


class UserProfileView(APIView):
    """Profile of the authenticated user, including the points balance"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        serializer = UserDetailSerializer(request.user, context={'request': request})
        return success_response(serializer.data, 'User info retrieved successfully')

    def patch(self, request):
        serializer = UserUpdateSerializer(request.user, data=request.data, partial=True, context={'request': request})
        if serializer.is_valid():
            serializer.save()
            updated_data = UserDetailSerializer(request.user, context={'request': request}).data
            return success_response(updated_data, 'Profile updated successfully')
        return error_response('Profile update failed', serializer.errors)

    def put(self, request):
        return self.patch(request)


class UserQRCodeView(APIView):
    """QR code that identifies the authenticated user to a cashier"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        payload = qr.encode(request.user)
        return success_response({
            'payload': payload,
            'image': qr.render_png_data_url(payload),
        })
