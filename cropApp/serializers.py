from rest_framework import serializers
from .models import Crop


class CropSerializer(serializers.ModelSerializer):
    class Meta:
        model = Crop
        fields = [
            'id',
            'crop_name',
            'variety',
            'area_planted',
            'planting_date',
            'expected_harvest_date',
            'location_field',
            'status',
            'created_at',
            'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_crop_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Crop name cannot be empty")
        return value.strip()

    def validate_area_planted(self, value):
        """Validate that area is positive"""
        if value is not None and value <= 0:
            raise serializers.ValidationError("Area planted must be greater than 0")
        return value

    def validate(self, attrs):
        planting_date = attrs.get('planting_date', getattr(self.instance, 'planting_date', None))
        harvest_date = attrs.get('expected_harvest_date', getattr(self.instance, 'expected_harvest_date', None))
        if planting_date and harvest_date and harvest_date < planting_date:
            raise serializers.ValidationError(
                {'expected_harvest_date': "Expected harvest date cannot be before planting date"}
            )
        return attrs


class OwnedCropField(serializers.PrimaryKeyRelatedField):
    """Optional crop reference restricted to the requesting user's crops."""

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)

    def get_queryset(self):
        request = self.context.get('request')
        if request is None or not request.user.is_authenticated:
            return Crop.objects.none()
        return Crop.objects.filter(user=request.user)
