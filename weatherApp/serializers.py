from rest_framework import serializers
from .models import WeatherAlert


class WeatherAlertSerializer(serializers.ModelSerializer):
    class Meta:
        model = WeatherAlert
        fields = ['id', 'alert_type', 'message', 'severity', 'is_read', 'created_at']
        read_only_fields = fields


class WeatherRequestSerializer(serializers.Serializer):
    location = serializers.CharField(max_length=150, required=False, allow_blank=True)
