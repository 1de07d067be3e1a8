"""
User serializers module.
"""
from .user_serializers import UserListSerializer, UserDetailSerializer, UserUpdateSerializer

__all__ = [
    'UserListSerializer',
    'UserDetailSerializer',
    'UserUpdateSerializer',
]
