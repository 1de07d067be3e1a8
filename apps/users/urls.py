from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    path('', views.UserListView.as_view(), name='user-list'),
    path('me/', views.UserProfileView.as_view(), name='me'),
    path('me/qr/', views.UserQRCodeView.as_view(), name='me-qr'),
]
