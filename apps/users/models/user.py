from django.contrib.auth.models import AbstractUser
from django.core.validators import MinValueValidator
from django.db import models


class User(AbstractUser):
    """
    Loyalty program member.

    ``username`` is the member's UTORid handle. ``points`` caches the ledger
    balance and is only written by the points services.
    """
    ROLE_REGULAR = 'regular'
    ROLE_CASHIER = 'cashier'
    ROLE_MANAGER = 'manager'
    ROLE_SUPERUSER = 'superuser'

    ROLE_CHOICES = [
        (ROLE_REGULAR, 'Regular'),
        (ROLE_CASHIER, 'Cashier'),
        (ROLE_MANAGER, 'Manager'),
        (ROLE_SUPERUSER, 'Superuser'),
    ]

    # Capabilities are ranked, a manager can do everything a cashier can
    ROLE_RANK = {
        ROLE_REGULAR: 0,
        ROLE_CASHIER: 1,
        ROLE_MANAGER: 2,
        ROLE_SUPERUSER: 3,
    }

    name = models.CharField(max_length=50, blank=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_REGULAR)
    verified = models.BooleanField(default=False)
    points = models.IntegerField(default=0, validators=[MinValueValidator(0)])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'
        constraints = [
            models.CheckConstraint(condition=models.Q(points__gte=0), name='users_points_non_negative'),
        ]

    def __str__(self):
        return self.username or f"User {self.id}"

    @property
    def utorid(self):
        return self.username

    def has_role(self, role):
        """Check that the user holds ``role`` or a higher one"""
        return self.ROLE_RANK.get(self.role, -1) >= self.ROLE_RANK[role]

    @property
    def is_cashier(self):
        return self.has_role(self.ROLE_CASHIER)

    @property
    def is_manager(self):
        return self.has_role(self.ROLE_MANAGER)
