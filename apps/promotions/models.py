from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class TimeWindowQuerySet(models.QuerySet):
    def active(self, now=None):
        now = now or timezone.now()
        return self.filter(start_time__lte=now, end_time__gt=now)

    def upcoming(self, now=None):
        return self.filter(start_time__gt=now or timezone.now())


class TimeWindow(models.Model):
    """Something that runs from start_time (inclusive) to end_time (exclusive)"""
    name = models.CharField(max_length=100)
    description = models.TextField()
    start_time = models.DateTimeField(default=timezone.now)
    end_time = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    objects = TimeWindowQuerySet.as_manager()

    class Meta:
        abstract = True

    def __str__(self):
        return self.name

    def clean(self):
        if self.start_time and self.end_time and self.end_time <= self.start_time:
            raise ValidationError({'end_time': 'End time must be after start time.'})

    def is_active(self, now=None):
        now = now or timezone.now()
        return self.start_time <= now < self.end_time

    def is_upcoming(self, now=None):
        return self.start_time > (now or timezone.now())


class Promotion(TimeWindow):
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='created_promotions'
    )

    class Meta:
        db_table = 'promotions'
        ordering = ['-end_time', '-id']
        verbose_name = 'Promotion'
        verbose_name_plural = 'Promotions'


class Event(TimeWindow):
    location = models.CharField(max_length=200, blank=True)
    capacity = models.PositiveIntegerField(null=True, blank=True, validators=[MinValueValidator(1)])
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='created_events'
    )

    class Meta:
        db_table = 'events'
        ordering = ['start_time', 'id']
        verbose_name = 'Event'
        verbose_name_plural = 'Events'
