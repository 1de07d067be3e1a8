from django.urls import path
from . import views

app_name = 'points'

urlpatterns = [
    # Member endpoints
    path('balance/', views.get_points_balance, name='balance'),
    path('transactions/', views.get_points_transactions, name='transactions'),
    path('redemptions/', views.redemptions, name='redemptions'),
    path('redemptions/<int:request_id>/', views.redemption_detail, name='redemption_detail'),
    path('redemptions/<int:request_id>/qr/', views.redemption_qr_code, name='redemption_qr'),
    path('redemptions/<int:request_id>/cancel/', views.cancel_redemption, name='cancel_redemption'),

    # Cashier endpoints
    path('award/', views.award_points, name='award'),
    path('scan/', views.scan_qr, name='scan'),
    path('scan/preview/', views.scan_preview, name='scan_preview'),
    path('redemptions/pending/', views.pending_redemptions, name='pending_redemptions'),
    path('redemptions/<int:request_id>/process/', views.process_redemption, name='process_redemption'),

    # Manager endpoints
    path('adjust/', views.adjust_points, name='adjust'),
    path('transactions/all/', views.get_all_transactions, name='all_transactions'),
]
