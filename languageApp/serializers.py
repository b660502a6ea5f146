from rest_framework import serializers

from userApp.models import LANGUAGE_CHOICES


class TranslateRequestSerializer(serializers.Serializer):
    keys = serializers.ListField(child=serializers.CharField(max_length=200), allow_empty=False)
    language = serializers.ChoiceField(choices=LANGUAGE_CHOICES, required=False)


class LanguagePreferenceSerializer(serializers.Serializer):
    language = serializers.ChoiceField(choices=LANGUAGE_CHOICES)
