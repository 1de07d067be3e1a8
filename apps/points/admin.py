from django.contrib import admin
from .models import PointsTransaction, RedemptionRequest


@admin.register(PointsTransaction)
class PointsTransactionAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'kind', 'amount', 'balance_after', 'created_by', 'note', 'created_at']
    list_filter = ['kind', 'created_at']
    search_fields = ['user__username', 'created_by__username', 'note']
    readonly_fields = [f.name for f in PointsTransaction._meta.fields]

    def has_add_permission(self, request):
        return False  # Use the award/adjust endpoints so the balance moves too

    def has_change_permission(self, request, obj=None):
        return False  # Ledger entries are immutable

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(RedemptionRequest)
class RedemptionRequestAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'amount', 'status', 'created_at', 'processed_by', 'processed_at']
    list_filter = ['status', 'created_at']
    search_fields = ['user__username', 'remark']
    readonly_fields = [f.name for f in RedemptionRequest._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False  # Status only changes through the redemption workflow

    def has_delete_permission(self, request, obj=None):
        return False
