from datetime import timedelta

from django.db import models
from django.utils import timezone

from cropApp.models import Crop
from userApp.models import CustomUser


class IrrigationSchedule(models.Model):
    FREQUENCY_CHOICES = [
        ('daily', 'Daily'),
        ('weekly', 'Weekly'),
        ('monthly', 'Monthly'),
    ]

    user = models.ForeignKey(CustomUser, on_delete=models.CASCADE, related_name='irrigation_schedules')
    crop = models.ForeignKey(Crop, on_delete=models.SET_NULL, null=True, blank=True, related_name='irrigation_schedules')
    field_name = models.CharField(max_length=150)
    schedule_time = models.TimeField()
    duration_minutes = models.PositiveIntegerField(default=30)
    frequency = models.CharField(max_length=10, choices=FREQUENCY_CHOICES, default='daily')
    is_active = models.BooleanField(default=True)
    last_irrigated = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['schedule_time']

    def __str__(self):
        return f"{self.field_name} at {self.schedule_time} ({self.get_frequency_display()})"

    def toggle(self, now=None):
        """Start or pause the run. Starting stamps last_irrigated, pausing clears it."""
        self.is_active = not self.is_active
        self.last_irrigated = (now or timezone.now()) if self.is_active else None
        self.save(update_fields=['is_active', 'last_irrigated', 'updated_at'])
        return self.is_active

    @property
    def end_time(self):
        if not self.last_irrigated:
            return None
        return self.last_irrigated + timedelta(minutes=self.duration_minutes)

    def time_remaining(self, now=None):
        """Countdown for a running schedule, or None when nothing is running."""
        if not self.is_active or not self.last_irrigated:
            return None

        now = now or timezone.now()
        remaining = (self.end_time - now).total_seconds()
        if remaining <= 0:
            return None

        total = self.duration_minutes * 60
        minutes = int(remaining // 60)
        seconds = int(remaining % 60)
        progress = (total - remaining) / total * 100

        return {
            'minutes': minutes,
            'seconds': seconds,
            'progress': round(min(progress, 100), 2),
            'time_string': f"{minutes}:{seconds:02d}",
        }
