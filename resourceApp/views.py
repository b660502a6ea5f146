# views.py
import logging

from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response

from .schemes import ALL_CATEGORIES, filter_schemes, get_scheme, category_stats
from .youtube import YouTubeClient, VideoSearchError, categorize_videos

logger = logging.getLogger(__name__)

DEFAULT_VIDEO_QUERY = 'farming techniques'
DEFAULT_MAX_RESULTS = 12


@api_view(['GET'])
@permission_classes([AllowAny])
def get_schemes(request):
    """Government schemes filtered by ?search= and ?category="""
    search = request.GET.get('search', '')
    category = request.GET.get('category') or ALL_CATEGORIES
    schemes = filter_schemes(search=search, category=category)

    return Response(
        {
            'message': 'Schemes retrieved successfully',
            'filters': {'search': search, 'category': category},
            'count': len(schemes),
            'data': schemes
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([AllowAny])
def get_scheme_detail(request, scheme_id):
    scheme = get_scheme(scheme_id)
    if scheme is None:
        return Response(
            {'error': 'Scheme not found'},
            status=status.HTTP_404_NOT_FOUND
        )

    return Response(
        {
            'message': 'Scheme retrieved successfully',
            'data': scheme
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([AllowAny])
def get_scheme_categories(request):
    return Response(
        {
            'message': 'Scheme categories retrieved successfully',
            'data': category_stats()
        },
        status=status.HTTP_200_OK
    )


def _clamped_max_results(raw):
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_MAX_RESULTS
    return max(1, min(50, value))


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_videos(request):
    """Farming tutorial videos from YouTube, grouped by topic"""
    if not settings.YOUTUBE_API_KEY:
        logger.error("YOUTUBE_API_KEY is not configured")
        return Response(
            {'error': 'YouTube API key not configured'},
            status=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    query = (request.GET.get('query') or '').strip() or DEFAULT_VIDEO_QUERY
    max_results = _clamped_max_results(request.GET.get('max_results', DEFAULT_MAX_RESULTS))

    try:
        videos, total = YouTubeClient().search(query, max_results)
    except VideoSearchError as exc:
        return Response(
            {'error': str(exc)},
            status=status.HTTP_502_BAD_GATEWAY
        )

    return Response(
        {
            'videos': videos,
            'categories': categorize_videos(videos),
            'totalResults': total
        },
        status=status.HTTP_200_OK
    )
