"""
Common views module.
"""
from .notice_views import NoticeListView
from .dashboard_views import ManagerDashboardView

__all__ = [
    'NoticeListView',
    'ManagerDashboardView',
]
