"""
Redemption request serializers.
"""
from rest_framework import serializers
from .. import qr
from ..models import RedemptionRequest


class RedemptionRequestSerializer(serializers.ModelSerializer):
    """
    Serializer for redemption request display.
    Used for: GET /api/points/redemptions/ and /api/points/redemptions/{id}/
    """
    utorid = serializers.CharField(source='user.username', read_only=True)
    processed_by = serializers.SerializerMethodField()
    qr_payload = serializers.SerializerMethodField()

    class Meta:
        model = RedemptionRequest
        fields = [
            'id', 'utorid', 'amount', 'remark', 'status', 'created_at',
            'processed_at', 'processed_by', 'cancelled_at', 'qr_payload'
        ]
        read_only_fields = fields

    def get_processed_by(self, obj):
        return obj.processed_by.username if obj.processed_by_id else None

    def get_qr_payload(self, obj):
        """Only pending requests have a scannable code"""
        return qr.encode(obj) if obj.is_pending else None


class RedemptionCreateSerializer(serializers.Serializer):
    """
    Serializer for creating a redemption request.
    Used for: POST /api/points/redemptions/
    """
    amount = serializers.IntegerField(help_text="Points to redeem")
    remark = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
