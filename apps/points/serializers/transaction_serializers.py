"""
Points transaction serializers for list and detail display.
"""
from rest_framework import serializers
from ..models import PointsTransaction


class PointsTransactionListSerializer(serializers.ModelSerializer):
    """
    Serializer for a member's own history - minimal fields for list display.
    Used for: GET /api/points/transactions/
    """
    kind_display = serializers.CharField(source='get_kind_display', read_only=True)

    class Meta:
        model = PointsTransaction
        fields = ['id', 'kind', 'kind_display', 'amount', 'balance_after', 'note', 'created_at']
        read_only_fields = fields


class PointsTransactionSerializer(serializers.ModelSerializer):
    """
    Serializer for transaction detail, including who it was for and by.
    Used for: GET /api/points/transactions/all/ and action responses
    """
    kind_display = serializers.CharField(source='get_kind_display', read_only=True)
    utorid = serializers.CharField(source='user.username', read_only=True)
    created_by = serializers.CharField(source='created_by.username', read_only=True)
    redemption_id = serializers.IntegerField(read_only=True, allow_null=True)

    class Meta:
        model = PointsTransaction
        fields = [
            'id', 'kind', 'kind_display', 'amount', 'balance_after', 'utorid',
            'created_by', 'note', 'redemption_id', 'created_at'
        ]
        read_only_fields = fields
