"""
Manager dashboard statistics.
"""
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.views import APIView

from apps.common.permissions import IsManager
from apps.common.utils import success_response
from apps.points.models import PointsTransaction, RedemptionRequest
from apps.promotions.models import Promotion, Event


class ManagerDashboardView(APIView):
    """Headline counts for the manager dashboard"""
    permission_classes = [IsManager]

    def get(self, request):
        now = timezone.now()
        return success_response({
            'totalUsers': get_user_model().objects.count(),
            'totalTransactions': PointsTransaction.objects.count(),
            'pendingRedemptions': RedemptionRequest.objects.filter(
                status=RedemptionRequest.STATUS_PENDING
            ).count(),
            'totalEvents': Event.objects.count(),
            'upcomingEvents': Event.objects.upcoming(now).count(),
            'totalPromotions': Promotion.objects.count(),
            'activePromotions': Promotion.objects.active(now).count(),
        })
