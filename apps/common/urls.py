from django.urls import path
from .health_views import BasicHealthCheckView
from .views import NoticeListView, ManagerDashboardView

app_name = 'common'

urlpatterns = [
    path('notices/', NoticeListView.as_view(), name='notices'),
    path('dashboard/', ManagerDashboardView.as_view(), name='dashboard'),
    path('health/', BasicHealthCheckView.as_view(), name='health_check'),
]
