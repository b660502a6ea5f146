# views.py
import logging

from django.conf import settings
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from userApp.models import get_user_profile
from .models import WeatherAlert
from .openweather import OpenWeatherClient, WeatherServiceError
from .reports import build_weather_report
from .serializers import WeatherAlertSerializer, WeatherRequestSerializer

logger = logging.getLogger(__name__)


def _resolve_location(request, requested):
    if requested and requested.strip():
        return requested.strip()

    profile = get_user_profile(request.user)
    if profile.location:
        return profile.location

    return settings.DEFAULT_WEATHER_LOCATION


def store_alerts(user, alerts):
    """Persist derived alerts, skipping types that already have an unread alert."""
    unread_types = set(
        WeatherAlert.objects.filter(user=user, is_read=False).values_list('alert_type', flat=True)
    )

    created = []
    for alert in alerts:
        if alert['type'] in unread_types:
            continue
        created.append(WeatherAlert.objects.create(
            user=user,
            alert_type=alert['type'],
            message=alert['message'],
            severity=alert['severity'],
        ))
        unread_types.add(alert['type'])
    return created


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def get_current_weather(request):
    """Current conditions, a five day forecast and crop alerts for a location"""
    source = request.data if request.method == 'POST' else request.GET
    serializer = WeatherRequestSerializer(data=source)
    if not serializer.is_valid():
        return Response(
            {
                'error': 'Invalid data provided',
                'details': serializer.errors
            },
            status=status.HTTP_400_BAD_REQUEST
        )

    if not settings.OPENWEATHERMAP_API_KEY:
        logger.error("OPENWEATHERMAP_API_KEY is not configured")
        return Response(
            {'error': 'OpenWeatherMap API key not configured'},
            status=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    location = _resolve_location(request, serializer.validated_data.get('location'))
    client = OpenWeatherClient()

    try:
        current = client.current(location)
        forecast = client.forecast(location)
    except WeatherServiceError as exc:
        return Response(
            {'error': str(exc)},
            status=status.HTTP_502_BAD_GATEWAY
        )

    report = build_weather_report(current, forecast)
    new_alerts = store_alerts(request.user, report['alerts'])
    logger.info("Weather for %s fetched by user %s, %d new alerts", location, request.user.id, len(new_alerts))

    return Response(
        {
            'message': 'Weather retrieved successfully',
            'data': report,
            'new_alerts': len(new_alerts)
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_user_alerts(request):
    alerts = WeatherAlert.objects.filter(user=request.user)

    if request.GET.get('unread', '').lower() == 'true':
        alerts = alerts.filter(is_read=False)

    serializer = WeatherAlertSerializer(alerts, many=True)
    return Response(
        {
            'message': 'Weather alerts retrieved successfully',
            'count': alerts.count(),
            'data': serializer.data
        },
        status=status.HTTP_200_OK
    )


@api_view(['PATCH', 'POST'])
@permission_classes([IsAuthenticated])
def mark_alert_read(request, alert_id):
    alert = get_object_or_404(WeatherAlert, id=alert_id)

    if alert.user != request.user:
        return Response(
            {'error': 'You do not have permission to update this alert'},
            status=status.HTTP_403_FORBIDDEN
        )

    alert.is_read = True
    alert.save(update_fields=['is_read'])

    return Response(
        {
            'message': 'Alert marked as read',
            'data': WeatherAlertSerializer(alert).data
        },
        status=status.HTTP_200_OK
    )


@api_view(['PATCH', 'POST'])
@permission_classes([IsAuthenticated])
def mark_all_alerts_read(request):
    updated = WeatherAlert.objects.filter(user=request.user, is_read=False).update(is_read=True)

    return Response(
        {
            'message': 'All alerts marked as read',
            'count': updated
        },
        status=status.HTTP_200_OK
    )


@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def delete_alert(request, alert_id):
    alert = get_object_or_404(WeatherAlert, id=alert_id)

    if alert.user != request.user:
        return Response(
            {'error': 'You do not have permission to delete this alert'},
            status=status.HTTP_403_FORBIDDEN
        )

    alert_data = WeatherAlertSerializer(alert).data
    alert.delete()

    return Response(
        {
            'message': 'Alert deleted successfully',
            'data': alert_data
        },
        status=status.HTTP_200_OK
    )
