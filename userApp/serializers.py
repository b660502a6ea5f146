from rest_framework import serializers
from .models import CustomUser, Profile, CROP_OPTIONS, LANGUAGE_CHOICES, NOTIFICATION_KEYS


class UserSerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomUser
        fields = ['id', 'email', 'phone_number', 'role', 'created_at']


class ProfileSerializer(serializers.ModelSerializer):
    email = serializers.EmailField(source='user.email', read_only=True)

    class Meta:
        model = Profile
        fields = [
            'id',
            'email',
            'full_name',
            'farm_name',
            'phone',
            'location',
            'farm_size',
            'primary_crops',
            'language',
            'notifications',
            'created_at',
            'updated_at'
        ]
        read_only_fields = ['id', 'email', 'language', 'notifications', 'created_at', 'updated_at']

    def validate_farm_size(self, value):
        if value is not None and value < 0:
            raise serializers.ValidationError("Farm size cannot be negative")
        return value

    def validate_primary_crops(self, value):
        if not isinstance(value, list):
            raise serializers.ValidationError("Primary crops must be a list")
        unknown = [crop for crop in value if crop not in CROP_OPTIONS]
        if unknown:
            raise serializers.ValidationError(f"Unknown crops: {', '.join(map(str, unknown))}")
        # keep first occurrence order, drop duplicates
        return list(dict.fromkeys(value))


class SettingsSerializer(serializers.ModelSerializer):
    language = serializers.ChoiceField(choices=LANGUAGE_CHOICES, required=False)

    class Meta:
        model = Profile
        fields = ['language', 'notifications']

    def validate_notifications(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError("Notifications must be an object")
        unknown = [key for key in value if key not in NOTIFICATION_KEYS]
        if unknown:
            raise serializers.ValidationError(f"Unknown notification settings: {', '.join(unknown)}")
        if not all(isinstance(flag, bool) for flag in value.values()):
            raise serializers.ValidationError("Notification settings must be true or false")
        return value

    def update(self, instance, validated_data):
        notifications = validated_data.pop('notifications', None)
        if notifications is not None:
            merged = dict(instance.notifications or {})
            merged.update(notifications)
            instance.notifications = merged
        return super().update(instance, validated_data)
