from datetime import timedelta

from django.conf import settings
from django.db import models
from django.utils import timezone


class NoticeQuerySet(models.QuerySet):
    def visible(self, now=None):
        return self.filter(expires_at__gt=now or timezone.now())


class Notice(models.Model):
    """Short-lived banner shown to a user after an operation they performed"""

    LEVEL_CHOICES = [
        ('info', 'Information'),
        ('success', 'Success'),
        ('error', 'Error'),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='notices'
    )
    message = models.CharField(max_length=255)
    level = models.CharField(max_length=10, choices=LEVEL_CHOICES, default='info')
    created_at = models.DateTimeField(auto_now_add=True)
    expires_at = models.DateTimeField()

    objects = NoticeQuerySet.as_manager()

    class Meta:
        db_table = 'notices'
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['user', 'expires_at'], name='notices_user_id_3e7d52_idx'),
        ]

    def __str__(self):
        return f"{self.user} - {self.message}"

    def is_expired(self, now=None):
        return (now or timezone.now()) >= self.expires_at

    @classmethod
    def post(cls, user, message, level='info', seconds=None):
        """Create a notice that disappears after NOTICE_DISPLAY_SECONDS"""
        if seconds is None:
            seconds = settings.NOTICE_DISPLAY_SECONDS
        return cls.objects.create(
            user=user,
            message=message[:255],
            level=level,
            expires_at=timezone.now() + timedelta(seconds=seconds),
        )

    @classmethod
    def purge_expired(cls, now=None, user_id=None):
        """Delete notices nobody can see any more"""
        expired = cls.objects.filter(expires_at__lte=now or timezone.now())
        if user_id:
            expired = expired.filter(user_id=user_id)
        deleted, _ = expired.delete()
        return deleted
