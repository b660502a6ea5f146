# views.py
import logging

from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .models import IrrigationSchedule
from .serializers import IrrigationScheduleSerializer

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_schedule(request):
    """Create an irrigation schedule for one of the user's fields"""
    serializer = IrrigationScheduleSerializer(data=request.data, context={'request': request})

    if serializer.is_valid():
        schedule = serializer.save(user=request.user)
        logger.info("Irrigation schedule %s created by user %s", schedule.id, request.user.id)
        return Response(
            {
                'message': 'Irrigation schedule created successfully',
                'data': IrrigationScheduleSerializer(schedule).data
            },
            status=status.HTTP_201_CREATED
        )

    return Response(
        {
            'error': 'Invalid data provided',
            'details': serializer.errors
        },
        status=status.HTTP_400_BAD_REQUEST
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_user_schedules(request):
    schedules = IrrigationSchedule.objects.filter(user=request.user).order_by('schedule_time')
    serializer = IrrigationScheduleSerializer(schedules, many=True, context={'now': timezone.now()})

    return Response(
        {
            'message': 'Irrigation schedules retrieved successfully',
            'count': schedules.count(),
            'data': serializer.data
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_running_schedules(request):
    """Schedules whose countdown has not yet finished"""
    now = timezone.now()
    schedules = IrrigationSchedule.objects.filter(
        user=request.user, is_active=True, last_irrigated__isnull=False
    ).order_by('schedule_time')
    running = [schedule for schedule in schedules if schedule.time_remaining(now) is not None]
    serializer = IrrigationScheduleSerializer(running, many=True, context={'now': now})

    return Response(
        {
            'message': 'Running irrigation schedules retrieved successfully',
            'count': len(running),
            'data': serializer.data
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_schedule_by_id(request, schedule_id):
    schedule = get_object_or_404(IrrigationSchedule, id=schedule_id)

    if schedule.user != request.user:
        return Response(
            {'error': 'You do not have permission to view this schedule'},
            status=status.HTTP_403_FORBIDDEN
        )

    return Response(
        {
            'message': 'Irrigation schedule retrieved successfully',
            'data': IrrigationScheduleSerializer(schedule).data
        },
        status=status.HTTP_200_OK
    )


@api_view(['PUT', 'PATCH'])
@permission_classes([IsAuthenticated])
def update_schedule(request, schedule_id):
    schedule = get_object_or_404(IrrigationSchedule, id=schedule_id)

    if schedule.user != request.user:
        return Response(
            {'error': 'You do not have permission to update this schedule'},
            status=status.HTTP_403_FORBIDDEN
        )

    partial = request.method == 'PATCH'
    serializer = IrrigationScheduleSerializer(
        schedule, data=request.data, partial=partial, context={'request': request}
    )

    if serializer.is_valid():
        updated_schedule = serializer.save()
        return Response(
            {
                'message': 'Irrigation schedule updated successfully',
                'data': IrrigationScheduleSerializer(updated_schedule).data
            },
            status=status.HTTP_200_OK
        )

    return Response(
        {
            'error': 'Invalid data provided',
            'details': serializer.errors
        },
        status=status.HTTP_400_BAD_REQUEST
    )


@api_view(['POST', 'PATCH'])
@permission_classes([IsAuthenticated])
def toggle_schedule(request, schedule_id):
    """Start or pause a schedule"""
    schedule = get_object_or_404(IrrigationSchedule, id=schedule_id)

    if schedule.user != request.user:
        return Response(
            {'error': 'You do not have permission to update this schedule'},
            status=status.HTTP_403_FORBIDDEN
        )

    now = timezone.now()
    is_active = schedule.toggle(now)
    state = 'activated' if is_active else 'paused'
    logger.info("Irrigation schedule %s %s", schedule.id, state)

    return Response(
        {
            'message': f'Irrigation schedule {state}',
            'data': IrrigationScheduleSerializer(schedule, context={'now': now}).data
        },
        status=status.HTTP_200_OK
    )


@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def delete_schedule(request, schedule_id):
    schedule = get_object_or_404(IrrigationSchedule, id=schedule_id)

    if schedule.user != request.user:
        return Response(
            {'error': 'You do not have permission to delete this schedule'},
            status=status.HTTP_403_FORBIDDEN
        )

    schedule_data = IrrigationScheduleSerializer(schedule).data
    schedule.delete()

    return Response(
        {
            'message': 'Irrigation schedule deleted successfully',
            'data': schedule_data
        },
        status=status.HTTP_200_OK
    )
