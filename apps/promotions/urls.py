from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import PromotionViewSet, EventViewSet

app_name = 'promotions'

router = DefaultRouter()
router.register(r'promotions', PromotionViewSet, basename='promotion')
router.register(r'events', EventViewSet, basename='event')

urlpatterns = [
    path('', include(router.urls)),
]
