from django.db import models
from userApp.models import CustomUser


class MarketplaceListing(models.Model):
    CATEGORY_CHOICES = [
        ('crops', 'Crops'),
        ('seeds', 'Seeds'),
        ('fertilizers', 'Fertilizers'),
        ('tools', 'Tools'),
        ('livestock', 'Livestock'),
    ]

    user = models.ForeignKey(CustomUser, on_delete=models.CASCADE, related_name='marketplace_listings')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    quantity = models.DecimalField(max_digits=12, decimal_places=2)
    unit = models.CharField(max_length=20, default='kg')
    location = models.CharField(max_length=150, blank=True)
    region = models.CharField(max_length=100, blank=True)
    image_url = models.URLField(blank=True)
    contact_phone = models.CharField(max_length=20, blank=True)
    contact_email = models.EmailField(blank=True)
    crop_type = models.CharField(max_length=100, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} - {self.price}/{self.unit}"


class MarketplaceFavorite(models.Model):
    user = models.ForeignKey(CustomUser, on_delete=models.CASCADE, related_name='marketplace_favorites')
    listing = models.ForeignKey(MarketplaceListing, on_delete=models.CASCADE, related_name='favorites')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ('user', 'listing')

    def __str__(self):
        return f"{self.user.email} likes {self.listing.title}"
