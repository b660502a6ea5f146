from decimal import Decimal

from django.db import models
from django.utils import timezone

from cropApp.models import Crop
from userApp.models import CustomUser


EXPENSE_CATEGORIES = [
    'Seeds & Seedlings',
    'Fertilizers',
    'Pesticides',
    'Equipment',
    'Fuel',
    'Labor',
    'Irrigation',
    'Transportation',
    'Storage',
    'Other',
]


class Expense(models.Model):
    CATEGORY_CHOICES = [(category, category) for category in EXPENSE_CATEGORIES]

    user = models.ForeignKey(CustomUser, on_delete=models.CASCADE, related_name='expenses')
    crop = models.ForeignKey(Crop, on_delete=models.SET_NULL, null=True, blank=True, related_name='expenses')
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    category = models.CharField(max_length=50, choices=CATEGORY_CHOICES)
    description = models.TextField(blank=True)
    expense_date = models.DateField(default=timezone.localdate)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-expense_date', '-created_at']

    def __str__(self):
        return f"{self.category}: {self.amount} on {self.expense_date}"


class RevenueRecord(models.Model):
    user = models.ForeignKey(CustomUser, on_delete=models.CASCADE, related_name='revenue_records')
    crop = models.ForeignKey(Crop, on_delete=models.SET_NULL, null=True, blank=True, related_name='revenue_records')
    quantity_sold = models.DecimalField(max_digits=12, decimal_places=2)
    price_per_unit = models.DecimalField(max_digits=12, decimal_places=2)
    total_amount = models.DecimalField(max_digits=14, decimal_places=2, editable=False)
    buyer_name = models.CharField(max_length=150, blank=True)
    market_location = models.CharField(max_length=150, blank=True)
    sale_date = models.DateField(default=timezone.localdate)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-sale_date', '-created_at']

    def save(self, *args, **kwargs):
        self.total_amount = (
            Decimal(self.quantity_sold) * Decimal(self.price_per_unit)
        ).quantize(Decimal('0.01'))
        super().save(*args, **kwargs)

    def __str__(self):
        return f"Sale of {self.quantity_sold} @ {self.price_per_unit} on {self.sale_date}"
