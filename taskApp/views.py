# views.py
import logging

from django.db.models import F
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .models import Task
from .serializers import TaskSerializer, TaskStatusSerializer

logger = logging.getLogger(__name__)


def _owned_task_or_error(request, task_id, action):
    task = get_object_or_404(Task, id=task_id)
    if task.user != request.user:
        return None, Response(
            {'error': f'You do not have permission to {action} this task'},
            status=status.HTTP_403_FORBIDDEN
        )
    return task, None


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_task(request):
    """Create a new farm task"""
    serializer = TaskSerializer(data=request.data)

    if serializer.is_valid():
        task = serializer.save(user=request.user)
        logger.info("Task %s created by user %s", task.id, request.user.id)
        return Response(
            {
                'message': 'Task created successfully',
                'data': TaskSerializer(task).data
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
def get_user_tasks(request):
    """Tasks of the logged-in user, soonest due first, undated tasks last"""
    tasks = Task.objects.filter(user=request.user)

    task_status = request.GET.get('status')
    if task_status:
        tasks = tasks.filter(status=task_status)

    priority = request.GET.get('priority')
    if priority:
        tasks = tasks.filter(priority=priority)

    tasks = tasks.order_by(F('due_date').asc(nulls_last=True), 'due_time', '-created_at')
    serializer = TaskSerializer(tasks, many=True)

    return Response(
        {
            'message': 'Tasks retrieved successfully',
            'count': tasks.count(),
            'data': serializer.data
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_task_by_id(request, task_id):
    task, error = _owned_task_or_error(request, task_id, 'view')
    if error:
        return error

    return Response(
        {
            'message': 'Task retrieved successfully',
            'data': TaskSerializer(task).data
        },
        status=status.HTTP_200_OK
    )


@api_view(['PUT', 'PATCH'])
@permission_classes([IsAuthenticated])
def update_task(request, task_id):
    task, error = _owned_task_or_error(request, task_id, 'update')
    if error:
        return error

    partial = request.method == 'PATCH'
    serializer = TaskSerializer(task, data=request.data, partial=partial)

    if serializer.is_valid():
        updated_task = serializer.save()
        return Response(
            {
                'message': 'Task updated successfully',
                'data': TaskSerializer(updated_task).data
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


@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_task_status(request, task_id):
    """Move a task between pending, in progress and completed"""
    task, error = _owned_task_or_error(request, task_id, 'update')
    if error:
        return error

    serializer = TaskStatusSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(
            {
                'error': 'Invalid status',
                'details': serializer.errors
            },
            status=status.HTTP_400_BAD_REQUEST
        )

    task.status = serializer.validated_data['status']
    task.save(update_fields=['status', 'updated_at'])
    logger.info("Task %s moved to %s", task.id, task.status)

    return Response(
        {
            'message': f'Task marked as {task.get_status_display().lower()}',
            'data': TaskSerializer(task).data
        },
        status=status.HTTP_200_OK
    )


@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def delete_task(request, task_id):
    task, error = _owned_task_or_error(request, task_id, 'delete')
    if error:
        return error

    task_data = TaskSerializer(task).data
    task.delete()

    return Response(
        {
            'message': 'Task deleted successfully',
            'data': task_data
        },
        status=status.HTTP_200_OK
    )
