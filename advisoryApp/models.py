from django.db import models

from cropApp.models import Crop
from userApp.models import CustomUser


EXPERT_CATEGORIES = [
    ('crop_management', 'Crop Management'),
    ('pest_disease', 'Pest & Disease'),
    ('soil_fertilizer', 'Soil & Fertilizer'),
    ('irrigation', 'Irrigation'),
    ('market_pricing', 'Market & Pricing'),
    ('weather', 'Weather Related'),
    ('equipment', 'Equipment'),
    ('general', 'General'),
]


class ExpertQuery(models.Model):
    STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('answered', 'Answered'),
    ]

    user = models.ForeignKey(CustomUser, on_delete=models.CASCADE, related_name='expert_queries')
    question = models.TextField()
    category = models.CharField(max_length=30, choices=EXPERT_CATEGORIES, default='general')
    images = models.JSONField(default=list, blank=True)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='pending')
    expert_response = models.TextField(blank=True, null=True)
    answered_at = models.DateTimeField(null=True, blank=True)
    answered_by = models.ForeignKey(
        CustomUser, on_delete=models.SET_NULL, null=True, blank=True, related_name='answered_queries'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name_plural = 'Expert queries'

    def __str__(self):
        return f"{self.get_category_display()}: {self.question[:50]}"


class PestReport(models.Model):
    SEVERITY_CHOICES = [
        ('low', 'Low'),
        ('medium', 'Medium'),
        ('high', 'High'),
    ]

    STATUS_CHOICES = [
        ('reported', 'Reported'),
        ('reviewed', 'Reviewed'),
        ('resolved', 'Resolved'),
    ]

    user = models.ForeignKey(CustomUser, on_delete=models.CASCADE, related_name='pest_reports')
    crop = models.ForeignKey(Crop, on_delete=models.SET_NULL, null=True, blank=True, related_name='pest_reports')
    user_description = models.TextField(blank=True)
    image = models.FileField(upload_to='pest-images/', null=True, blank=True)
    image_url = models.CharField(max_length=500, blank=True)
    ai_identification = models.JSONField(default=dict, blank=True)
    severity = models.CharField(max_length=10, choices=SEVERITY_CHOICES, default='medium')
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='reported')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    @property
    def pest_name(self):
        return (self.ai_identification or {}).get('pest_name')

    def __str__(self):
        return f"{self.pest_name or 'Unidentified'} ({self.severity}) - {self.user.email}"
