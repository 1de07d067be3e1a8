"""
Notice (banner) views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response
from ..models import Notice


class NoticeListView(APIView):
    """Notices that are still visible for the current user"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        notices = Notice.objects.filter(user=request.user).visible()
        return success_response([
            {
                'id': notice.id,
                'message': notice.message,
                'level': notice.level,
                'created_at': notice.created_at,
                'expires_at': notice.expires_at,
            }
            for notice in notices
        ])
