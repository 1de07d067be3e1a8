"""
Input serializers for cashier and manager ledger actions.

Amounts are only checked for being integers here; positivity and balance
rules belong to the services so they hold for every caller.
"""
from rest_framework import serializers

from ..qr import QR_PAYLOAD_MAX_LENGTH


class AwardPointsSerializer(serializers.Serializer):
    """Used for: POST /api/points/award/"""
    userId = serializers.IntegerField()
    amount = serializers.IntegerField()
    note = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')


class AdjustPointsSerializer(serializers.Serializer):
    """Used for: POST /api/points/adjust/"""
    userId = serializers.IntegerField()
    amount = serializers.IntegerField(help_text="Signed amount, negative to debit")
    note = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')


class ScanSerializer(serializers.Serializer):
    """Used for: POST /api/points/scan/"""
    payload = serializers.CharField(max_length=QR_PAYLOAD_MAX_LENGTH, trim_whitespace=True)
    amount = serializers.IntegerField(required=False, allow_null=True, default=None)
    note = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')


class ScanPreviewSerializer(serializers.Serializer):
    """Used for: POST /api/points/scan/preview/"""
    payload = serializers.CharField(max_length=QR_PAYLOAD_MAX_LENGTH, allow_blank=True, trim_whitespace=True)
