from django.db import models
from django.core.exceptions import ValidationError
from userApp.models import CustomUser


class Crop(models.Model):
    STATUS_CHOICES = [
        ('planned', 'Planned'),
        ('planted', 'Planted'),
        ('growing', 'Growing'),
        ('harvested', 'Harvested'),
    ]

    user = models.ForeignKey(CustomUser, on_delete=models.CASCADE, related_name='crops')
    crop_name = models.CharField(max_length=100)
    variety = models.CharField(max_length=100, blank=True)
    area_planted = models.FloatField(null=True, blank=True, help_text="Area in acres")
    planting_date = models.DateField(null=True, blank=True)
    expected_harvest_date = models.DateField(null=True, blank=True)
    location_field = models.CharField(max_length=150, blank=True, help_text="Field or plot name")
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='planted')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def clean(self):
        if (self.planting_date and self.expected_harvest_date
                and self.expected_harvest_date < self.planting_date):
            raise ValidationError("Expected harvest date cannot be before planting date")

    def __str__(self):
        variety = f" ({self.variety})" if self.variety else ""
        return f"{self.crop_name}{variety} - {self.get_status_display()}"
