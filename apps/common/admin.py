from django.contrib import admin
from .models import Notice


@admin.register(Notice)
class NoticeAdmin(admin.ModelAdmin):
    list_display = ['user', 'message', 'level', 'created_at', 'expires_at']
    list_filter = ['level', 'created_at']
    search_fields = ['user__username', 'message']
