"""
Promotion and event serializers.
"""
from django.utils import timezone
from rest_framework import serializers

from .models import Promotion, Event


class TimeWindowSerializerMixin:
    """Validate that a window ends after it starts"""

    def validate(self, attrs):
        attrs = super().validate(attrs)
        start = attrs.get('start_time', getattr(self.instance, 'start_time', None)) or timezone.now()
        end = attrs.get('end_time', getattr(self.instance, 'end_time', None))
        if end is not None and end <= start:
            raise serializers.ValidationError({'end_time': 'End time must be after start time.'})
        return attrs


class PromotionSerializer(TimeWindowSerializerMixin, serializers.ModelSerializer):
    """
    Used for: /api/promotions/
    """
    is_active = serializers.SerializerMethodField()
    created_by = serializers.CharField(source='created_by.username', read_only=True)

    class Meta:
        model = Promotion
        fields = [
            'id', 'name', 'description', 'start_time', 'end_time',
            'is_active', 'created_by', 'created_at'
        ]
        read_only_fields = ['id', 'is_active', 'created_by', 'created_at']
        extra_kwargs = {'start_time': {'required': False}}

    def get_is_active(self, obj):
        return obj.is_active()


class EventSerializer(TimeWindowSerializerMixin, serializers.ModelSerializer):
    """
    Used for: /api/events/
    """
    is_upcoming = serializers.SerializerMethodField()
    created_by = serializers.CharField(source='created_by.username', read_only=True)

    class Meta:
        model = Event
        fields = [
            'id', 'name', 'description', 'location', 'start_time', 'end_time',
            'capacity', 'is_upcoming', 'created_by', 'created_at'
        ]
        read_only_fields = ['id', 'is_upcoming', 'created_by', 'created_at']

    def get_is_upcoming(self, obj):
        return obj.is_upcoming()
