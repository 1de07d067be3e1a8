"""
Promotion and event management views.

Any authenticated user can browse; regular members only see what is still
relevant to them (active promotions, events that have not ended). Managers
see everything and may create, update and delete.
"""
import logging

from django.utils import timezone
from rest_framework import viewsets, status

from apps.common.permissions import IsManagerOrReadOnly
from apps.common.utils import success_response, paginated_response
from .models import Promotion, Event
from .serializers import PromotionSerializer, EventSerializer

logger = logging.getLogger(__name__)


class ManagedWindowViewSet(viewsets.ModelViewSet):
    permission_classes = [IsManagerOrReadOnly]
    label = 'Item'

    def member_queryset(self, queryset):
        return queryset

    def get_queryset(self):
        queryset = self.serializer_class.Meta.model.objects.select_related('created_by')
        if not getattr(self.request.user, 'is_manager', False):
            queryset = self.member_queryset(queryset)
        return queryset

    def perform_create(self, serializer):
        instance = serializer.save(created_by=self.request.user)
        logger.info(f"{self.request.user.username} created {self.label.lower()} #{instance.pk} {instance.name!r}")

    def list(self, request, *args, **kwargs):
        return paginated_response(self.filter_queryset(self.get_queryset()), self.serializer_class, request)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        return success_response(serializer.data, f'{self.label} created successfully', status.HTTP_201_CREATED)

    def retrieve(self, request, *args, **kwargs):
        return success_response(self.get_serializer(self.get_object()).data)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        return success_response(serializer.data, f'{self.label} updated successfully')

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        logger.info(f"{request.user.username} deleted {self.label.lower()} #{instance.pk} {instance.name!r}")
        self.perform_destroy(instance)
        return success_response(None, f'{self.label} deleted successfully')


class PromotionViewSet(ManagedWindowViewSet):
    """
    Endpoints:
    - GET /promotions/ - List promotions
    - POST /promotions/ - Create promotion (manager)
    - GET/PUT/PATCH/DELETE /promotions/{id}/
    """
    serializer_class = PromotionSerializer
    label = 'Promotion'

    def member_queryset(self, queryset):
        return queryset.active()


class EventViewSet(ManagedWindowViewSet):
    """
    Endpoints:
    - GET /events/ - List events
    - POST /events/ - Create event (manager)
    - GET/PUT/PATCH/DELETE /events/{id}/
    """
    serializer_class = EventSerializer
    label = 'Event'

    def member_queryset(self, queryset):
        return queryset.filter(end_time__gt=timezone.now())
