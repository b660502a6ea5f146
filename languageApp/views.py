# views.py
import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response

from userApp.models import get_user_profile
from .serializers import TranslateRequestSerializer, LanguagePreferenceSerializer
from .translator import Translator, SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([AllowAny])
def get_translations(request, lang):
    """Full translation dictionary for a language"""
    if lang not in SUPPORTED_LANGUAGES:
        return Response(
            {'error': f'Unsupported language: {lang}'},
            status=status.HTTP_404_NOT_FOUND
        )

    translator = Translator(lang)
    return Response(
        {
            'language': translator.language,
            'requested_language': lang,
            'translations': translator.translations
        },
        status=status.HTTP_200_OK
    )


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def translate_keys(request):
    """Resolve a list of dotted keys in the requested or preferred language"""
    serializer = TranslateRequestSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(
            {
                'error': 'Invalid data provided',
                'details': serializer.errors
            },
            status=status.HTTP_400_BAD_REQUEST
        )

    language = serializer.validated_data.get('language') or get_user_profile(request.user).language
    translator = Translator(language)

    return Response(
        {
            'language': translator.language,
            'data': translator.translate_many(serializer.validated_data['keys'])
        },
        status=status.HTTP_200_OK
    )


@api_view(['PUT', 'PATCH'])
@permission_classes([IsAuthenticated])
def update_language_preference(request):
    serializer = LanguagePreferenceSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(
            {
                'error': 'Invalid data provided',
                'details': serializer.errors
            },
            status=status.HTTP_400_BAD_REQUEST
        )

    profile = get_user_profile(request.user)
    profile.language = serializer.validated_data['language']
    profile.save(update_fields=['language', 'updated_at'])
    logger.info("User %s switched language to %s", request.user.id, profile.language)

    return Response(
        {
            'message': 'Language preference updated successfully',
            'language': profile.language
        },
        status=status.HTTP_200_OK
    )
