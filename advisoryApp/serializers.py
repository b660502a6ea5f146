import base64
import binascii
import re
import uuid

from django.core.files.base import ContentFile
from rest_framework import serializers

from cropApp.serializers import OwnedCropField
from .models import ExpertQuery, PestReport

DATA_URL_PATTERN = re.compile(r'^data:(?P<mime>image/[\w.+-]+);base64,(?P<payload>.+)$', re.DOTALL)


class ExpertQuerySerializer(serializers.ModelSerializer):
    answered_by_email = serializers.EmailField(source='answered_by.email', read_only=True, default=None)

    class Meta:
        model = ExpertQuery
        fields = [
            'id', 'question', 'category', 'images', 'status', 'expert_response',
            'answered_at', 'answered_by', 'answered_by_email', 'created_at'
        ]
        read_only_fields = ['id', 'status', 'expert_response', 'answered_at', 'answered_by', 'created_at']

    def validate_question(self, value):
        if not value.strip():
            raise serializers.ValidationError("Question cannot be empty")
        return value.strip()

    def validate_images(self, value):
        if not isinstance(value, list) or not all(isinstance(url, str) for url in value):
            raise serializers.ValidationError("Images must be a list of URLs")
        return value


class SubmitQuerySerializer(ExpertQuerySerializer):
    auto_answer = serializers.BooleanField(required=False, default=False, write_only=True)

    class Meta(ExpertQuerySerializer.Meta):
        fields = ExpertQuerySerializer.Meta.fields + ['auto_answer']

    def create(self, validated_data):
        validated_data.pop('auto_answer', None)
        return super().create(validated_data)


class ExpertAnswerSerializer(serializers.Serializer):
    expert_response = serializers.CharField()

    def validate_expert_response(self, value):
        if not value.strip():
            raise serializers.ValidationError("Response cannot be empty")
        return value.strip()


class PestReportSerializer(serializers.ModelSerializer):
    crop_name = serializers.CharField(source='crop.crop_name', read_only=True, default=None)
    pest_name = serializers.ReadOnlyField()

    class Meta:
        model = PestReport
        fields = [
            'id', 'crop', 'crop_name', 'user_description', 'image_url', 'ai_identification',
            'pest_name', 'severity', 'status', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class PestStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=PestReport.STATUS_CHOICES)


class PestIdentifySerializer(serializers.Serializer):
    """Accepts either a multipart `image` or an `imageBase64` data URL."""
    image = serializers.FileField(required=False)
    imageBase64 = serializers.CharField(required=False, allow_blank=False)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    crop_id = OwnedCropField()

    def validate_imageBase64(self, value):
        match = DATA_URL_PATTERN.match(value.strip())
        if not match:
            raise serializers.ValidationError("imageBase64 must be a base64 data URL")
        try:
            base64.b64decode(match.group('payload'), validate=True)
        except (binascii.Error, ValueError):
            raise serializers.ValidationError("imageBase64 is not valid base64")
        return value.strip()

    def validate(self, attrs):
        if not attrs.get('image') and not attrs.get('imageBase64'):
            raise serializers.ValidationError("An image file or imageBase64 is required")
        return attrs

    def image_payload(self):
        """Return (data_url, ContentFile) for the submitted image."""
        data = self.validated_data
        if data.get('image'):
            upload = data['image']
            raw = upload.read()
            mime = getattr(upload, 'content_type', None) or 'image/jpeg'
            data_url = f"data:{mime};base64,{base64.b64encode(raw).decode('ascii')}"
        else:
            data_url = data['imageBase64']
            match = DATA_URL_PATTERN.match(data_url)
            mime = match.group('mime')
            raw = base64.b64decode(match.group('payload'))

        extension = mime.split('/')[-1].replace('jpeg', 'jpg')
        filename = f"pest-report-{uuid.uuid4().hex}.{extension}"
        return data_url, ContentFile(raw, name=filename)
