from rest_framework import serializers

from cropApp.serializers import OwnedCropField
from .models import Expense, RevenueRecord


class ExpenseSerializer(serializers.ModelSerializer):
    crop = OwnedCropField()
    crop_name = serializers.CharField(source='crop.crop_name', read_only=True, default=None)

    class Meta:
        model = Expense
        fields = [
            'id',
            'amount',
            'category',
            'description',
            'expense_date',
            'crop',
            'crop_name',
            'created_at'
        ]
        read_only_fields = ['id', 'created_at']

    def validate_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError("Amount must be greater than 0")
        return value


class RevenueRecordSerializer(serializers.ModelSerializer):
    crop = OwnedCropField()
    crop_name = serializers.CharField(source='crop.crop_name', read_only=True, default=None)

    class Meta:
        model = RevenueRecord
        fields = [
            'id',
            'quantity_sold',
            'price_per_unit',
            'total_amount',
            'buyer_name',
            'market_location',
            'sale_date',
            'crop',
            'crop_name',
            'created_at'
        ]
        read_only_fields = ['id', 'total_amount', 'created_at']

    def validate_quantity_sold(self, value):
        if value <= 0:
            raise serializers.ValidationError("Quantity sold must be greater than 0")
        return value

    def validate_price_per_unit(self, value):
        if value <= 0:
            raise serializers.ValidationError("Price per unit must be greater than 0")
        return value
