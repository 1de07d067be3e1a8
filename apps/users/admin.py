from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """User admin with loyalty fields; the balance is only changed through the ledger"""
    list_display = ['username', 'name', 'email', 'role', 'verified', 'points', 'created_at']
    list_filter = ['role', 'verified', 'is_active', 'created_at']
    search_fields = ['username', 'name', 'email']
    ordering = ['username']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Loyalty', {
            'fields': ('name', 'role', 'verified', 'points')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Loyalty', {
            'fields': ('name', 'role', 'verified')
        }),
    )
    readonly_fields = ['points', 'created_at', 'updated_at']

    actions = ['mark_verified']

    def mark_verified(self, request, queryset):
        """Mark selected users as verified"""
        updated = queryset.update(verified=True)
        self.message_user(request, f'{updated} users verified.')
    mark_verified.short_description = 'Mark selected users as verified'
