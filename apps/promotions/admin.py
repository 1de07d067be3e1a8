from django.contrib import admin
from .models import Promotion, Event


@admin.register(Promotion)
class PromotionAdmin(admin.ModelAdmin):
    list_display = ['name', 'start_time', 'end_time', 'created_by', 'created_at']
    list_filter = ['start_time', 'end_time']
    search_fields = ['name', 'description']


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ['name', 'location', 'start_time', 'end_time', 'capacity', 'created_by']
    list_filter = ['start_time']
    search_fields = ['name', 'description', 'location']
