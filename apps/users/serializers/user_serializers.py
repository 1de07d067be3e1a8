"""
User serializers for list, detail and profile update operations.
"""
from rest_framework import serializers
from ..models import User


class UserListSerializer(serializers.ModelSerializer):
    """
    Serializer for user list view - minimal fields for list display.
    Used for: GET /api/users/
    """
    utorid = serializers.CharField(source='username', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'utorid', 'name', 'role', 'verified', 'points']
        read_only_fields = fields


class UserDetailSerializer(serializers.ModelSerializer):
    """
    Serializer for the authenticated user's own profile.
    Used for: GET /api/users/me/
    """
    utorid = serializers.CharField(source='username', read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'utorid', 'name', 'email', 'role', 'verified',
            'points', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'utorid', 'role', 'verified', 'points', 'created_at', 'updated_at']


class UserUpdateSerializer(serializers.ModelSerializer):
    """Serializer for profile updates; balance, role and verification are not writable here"""

    class Meta:
        model = User
        fields = ['name', 'email']

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name cannot be blank.")
        return value
