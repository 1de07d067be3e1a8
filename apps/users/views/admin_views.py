"""
Manager user lookup views.
"""
from django.db.models import Q
from rest_framework.views import APIView

from apps.common.permissions import IsCashier
from apps.common.utils import paginated_response
from ..models import User
from ..serializers import UserListSerializer


class UserListView(APIView):
    """
    Search members by handle or name.

    Cashiers use this to find the member they are awarding points to.
    """
    permission_classes = [IsCashier]

    def get(self, request):
        users = User.objects.all()

        keyword = request.GET.get('keyword', '').strip()
        if keyword:
            users = users.filter(Q(username__icontains=keyword) | Q(name__icontains=keyword))

        role = request.GET.get('role')
        if role:
            users = users.filter(role=role)

        verified = request.GET.get('verified')
        if verified in ('true', 'false'):
            users = users.filter(verified=(verified == 'true'))

        return paginated_response(users.order_by('username'), UserListSerializer, request)
