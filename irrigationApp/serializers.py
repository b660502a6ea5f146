from rest_framework import serializers

from cropApp.serializers import OwnedCropField
from .models import IrrigationSchedule


class IrrigationScheduleSerializer(serializers.ModelSerializer):
    crop = OwnedCropField()
    countdown = serializers.SerializerMethodField()

    class Meta:
        model = IrrigationSchedule
        fields = [
            'id',
            'field_name',
            'crop',
            'schedule_time',
            'duration_minutes',
            'frequency',
            'is_active',
            'last_irrigated',
            'countdown',
            'created_at',
            'updated_at'
        ]
        read_only_fields = ['id', 'is_active', 'last_irrigated', 'created_at', 'updated_at']

    def get_countdown(self, obj):
        return obj.time_remaining(self.context.get('now'))

    def validate_field_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Field name cannot be empty")
        return value.strip()

    def validate_duration_minutes(self, value):
        if value < 1:
            raise serializers.ValidationError("Duration must be at least 1 minute")
        return value
