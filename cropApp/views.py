# views.py
import logging

from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from userApp.models import get_user_profile
from .crop_guide import CROP_GUIDE, get_crop_guide, guide_with_recommendation, current_season
from .models import Crop
from .serializers import CropSerializer

logger = logging.getLogger(__name__)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_crop(request):
    """Create a new crop record"""
    serializer = CropSerializer(data=request.data)

    if serializer.is_valid():
        crop = serializer.save(user=request.user)
        logger.info("Crop %s created by user %s", crop.id, request.user.id)
        return Response(
            {
                'message': 'Crop created successfully',
                'data': CropSerializer(crop).data
            },
            status=status.HTTP_201_CREATED
        )

    logger.warning("Crop validation error: %s", serializer.errors)
    return Response(
        {
            'error': 'Invalid data provided',
            'details': serializer.errors
        },
        status=status.HTTP_400_BAD_REQUEST
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_user_crops(request):
    """Get crops owned by the logged-in user, optionally filtered by status"""
    crops = Crop.objects.filter(user=request.user)

    crop_status = request.GET.get('status')
    if crop_status:
        crops = crops.filter(status=crop_status)

    crops = crops.order_by('-created_at')
    serializer = CropSerializer(crops, many=True)

    return Response(
        {
            'message': 'Crops retrieved successfully',
            'count': crops.count(),
            'data': serializer.data
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_crop_by_id(request, crop_id):
    crop = get_object_or_404(Crop, id=crop_id)

    if crop.user != request.user:
        return Response(
            {'error': 'You do not have permission to view this crop'},
            status=status.HTTP_403_FORBIDDEN
        )

    return Response(
        {
            'message': 'Crop retrieved successfully',
            'data': CropSerializer(crop).data
        },
        status=status.HTTP_200_OK
    )


@api_view(['PUT', 'PATCH'])
@permission_classes([IsAuthenticated])
def update_crop(request, crop_id):
    """Update a crop record"""
    crop = get_object_or_404(Crop, id=crop_id)

    if crop.user != request.user:
        return Response(
            {'error': 'You do not have permission to update this crop'},
            status=status.HTTP_403_FORBIDDEN
        )

    partial = request.method == 'PATCH'
    serializer = CropSerializer(crop, data=request.data, partial=partial)

    if serializer.is_valid():
        updated_crop = serializer.save()
        logger.info("Crop %s updated", crop_id)
        return Response(
            {
                'message': 'Crop updated successfully',
                'data': CropSerializer(updated_crop).data
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


@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def delete_crop(request, crop_id):
    """Delete a crop record"""
    crop = get_object_or_404(Crop, id=crop_id)

    if crop.user != request.user:
        return Response(
            {'error': 'You do not have permission to delete this crop'},
            status=status.HTTP_403_FORBIDDEN
        )

    crop_data = CropSerializer(crop).data
    crop.delete()
    logger.info("Crop %s deleted", crop_id)

    return Response(
        {
            'message': 'Crop deleted successfully',
            'data': crop_data
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def list_crop_guides(request):
    month = timezone.localdate().month
    return Response(
        {
            'message': 'Crop guides retrieved successfully',
            'current_season': current_season(month),
            'count': len(CROP_GUIDE),
            'data': sorted(CROP_GUIDE.keys())
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_crop_guide_detail(request, crop_name):
    info = get_crop_guide(crop_name)
    if info is None:
        return Response(
            {'error': f'No cultivation guide available for {crop_name}'},
            status=status.HTTP_404_NOT_FOUND
        )

    return Response(
        {
            'message': 'Crop guide retrieved successfully',
            'data': guide_with_recommendation(info, timezone.localdate().month)
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_my_crop_guides(request):
    """Guides for the crops listed in the user's profile"""
    profile = get_user_profile(request.user)
    month = timezone.localdate().month

    guides = []
    without_guide = []
    for crop_name in profile.primary_crops or []:
        info = get_crop_guide(crop_name)
        if info is None:
            without_guide.append(crop_name)
        else:
            guides.append(guide_with_recommendation(info, month))

    return Response(
        {
            'message': 'Crop guides retrieved successfully',
            'current_season': current_season(month),
            'count': len(guides),
            'data': guides,
            'crops_without_guide': without_guide
        },
        status=status.HTTP_200_OK
    )
