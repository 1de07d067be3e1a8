from django.db import models
from django.conf import settings

from ..exceptions import ImmutableTransactionError


class PointsTransaction(models.Model):
    """
    Append-only ledger entry.

    A member's balance is always the sum of ``amount`` over their entries.
    Rows are never updated or deleted once written.
    """
    KIND_AWARD = 'award'
    KIND_REDEMPTION = 'redemption'
    KIND_ADJUSTMENT = 'adjustment'

    KIND_CHOICES = [
        (KIND_AWARD, 'Points Awarded'),
        (KIND_REDEMPTION, 'Points Redeemed'),
        (KIND_ADJUSTMENT, 'Manual Adjustment'),
    ]

    NOTE_MAX_LENGTH = 200

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='points_transactions'
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='created_points_transactions'
    )
    kind = models.CharField(max_length=20, choices=KIND_CHOICES)
    amount = models.IntegerField()  # Positive for credits, negative for debits
    balance_after = models.IntegerField()  # Member balance right after this entry
    note = models.CharField(max_length=NOTE_MAX_LENGTH, blank=True)
    redemption = models.OneToOneField(
        'RedemptionRequest', on_delete=models.PROTECT, null=True, blank=True, related_name='transaction'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'points_transactions'
        ordering = ['created_at', 'id']
        verbose_name = 'Points Transaction'
        verbose_name_plural = 'Points Transactions'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='points_tran_user_id_5b9e02_idx'),
            models.Index(fields=['kind', 'created_at'], name='points_tran_kind_c41f7a_idx'),
        ]

    def __str__(self):
        return f"{self.user.username} {self.amount:+d} points ({self.get_kind_display()})"

    def save(self, *args, **kwargs):
        if self.pk is not None and not self._state.adding:
            raise ImmutableTransactionError("Points transactions cannot be modified")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ImmutableTransactionError("Points transactions cannot be deleted")

    @property
    def is_credit(self):
        return self.amount > 0

    @property
    def is_debit(self):
        return self.amount < 0
