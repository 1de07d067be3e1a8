from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator


class RedemptionRequest(models.Model):
    """
    A member's intent to convert points into a reward.

    Created ``pending``; a cashier scan moves it to ``processed`` (and debits
    the balance), or the owner/manager moves it to ``cancelled``. Both are
    terminal.
    """
    STATUS_PENDING = 'pending'
    STATUS_PROCESSED = 'processed'
    STATUS_CANCELLED = 'cancelled'

    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_PROCESSED, 'Processed'),
        (STATUS_CANCELLED, 'Cancelled'),
    ]

    TERMINAL_STATUSES = (STATUS_PROCESSED, STATUS_CANCELLED)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='redemption_requests'
    )
    amount = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    remark = models.CharField(max_length=200, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    processed_at = models.DateTimeField(null=True, blank=True)
    processed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, null=True, blank=True,
        related_name='processed_redemptions'
    )
    cancelled_at = models.DateTimeField(null=True, blank=True)
    cancelled_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, null=True, blank=True,
        related_name='cancelled_redemptions'
    )

    class Meta:
        db_table = 'redemption_requests'
        ordering = ['-created_at', '-id']
        verbose_name = 'Redemption Request'
        verbose_name_plural = 'Redemption Requests'
        indexes = [
            models.Index(fields=['status', 'created_at'], name='redemption__status_0f3c1e_idx'),
            models.Index(fields=['user', 'status'], name='redemption__user_id_8a2d47_idx'),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(amount__gt=0), name='redemption_amount_positive'),
        ]

    def __str__(self):
        return f"Redemption #{self.id} - {self.user.username} {self.amount} points ({self.status})"

    @property
    def is_pending(self):
        return self.status == self.STATUS_PENDING

    @property
    def is_terminal(self):
        return self.status in self.TERMINAL_STATUSES
