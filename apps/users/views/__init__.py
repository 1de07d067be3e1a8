"""
User views module.
"""
from .profile_views import UserProfileView, UserQRCodeView
from .admin_views import UserListView

__all__ = [
    'UserProfileView',
    'UserQRCodeView',
    'UserListView',
]
