# views.py
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .stats import compute_dashboard_stats


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_dashboard_stats(request):
    """Active crops, irrigation coverage, season revenue and unread alerts"""
    return Response(
        {
            'message': 'Dashboard stats retrieved successfully',
            'data': compute_dashboard_stats(request.user, timezone.localdate())
        },
        status=status.HTTP_200_OK
    )
