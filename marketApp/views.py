# views.py
import logging

from django.db import IntegrityError, transaction
from django.db.models import Count, Q
from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response

from .filters import filter_listings
from .mandi import get_location_specific_prices, build_market_insights
from .models import MarketplaceListing, MarketplaceFavorite
from .serializers import ListingSerializer, FavoriteSerializer, MandiPriceRequestSerializer

logger = logging.getLogger(__name__)


def _favorite_ids(user):
    if not user.is_authenticated:
        return set()
    return set(MarketplaceFavorite.objects.filter(user=user).values_list('listing_id', flat=True))


def _owned_listing_or_error(request, listing_id, action):
    listing = get_object_or_404(MarketplaceListing, id=listing_id)
    if listing.user != request.user:
        return None, Response(
            {'error': f'You do not have permission to {action} this listing'},
            status=status.HTTP_403_FORBIDDEN
        )
    return listing, None


@api_view(['GET'])
@permission_classes([AllowAny])
def get_listings(request):
    """Browse active listings with search, category, region and sort filters."""
    try:
        listings = filter_listings(
            MarketplaceListing.objects.select_related('user__profile'),
            search=request.GET.get('search'),
            category=request.GET.get('category'),
            region=request.GET.get('region'),
            sort_by=request.GET.get('sort_by'),
        )
        serializer = ListingSerializer(
            listings, many=True, context={'favorite_ids': _favorite_ids(request.user)}
        )

        return Response(
            {
                'message': 'Listings retrieved successfully',
                'count': listings.count(),
                'data': serializer.data
            },
            status=status.HTTP_200_OK
        )

    except Exception:
        logger.exception("Error retrieving marketplace listings")
        return Response(
            {'error': 'Failed to retrieve listings'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_listing(request):
    serializer = ListingSerializer(data=request.data)

    if serializer.is_valid():
        listing = serializer.save(user=request.user)
        logger.info("Listing %s posted by user %s", listing.id, request.user.id)
        return Response(
            {
                'message': 'Listing created successfully',
                'data': ListingSerializer(listing).data
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
def get_user_listings(request):
    """All of the seller's own listings, including deactivated ones."""
    listings = MarketplaceListing.objects.filter(user=request.user).order_by('-created_at')
    serializer = ListingSerializer(listings, many=True)

    return Response(
        {
            'message': 'Your listings retrieved successfully',
            'count': listings.count(),
            'data': serializer.data
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([AllowAny])
def get_listing_by_id(request, listing_id):
    listing = get_object_or_404(MarketplaceListing, id=listing_id)

    if not listing.is_active and listing.user != request.user:
        return Response(
            {'error': 'Listing not found'},
            status=status.HTTP_404_NOT_FOUND
        )

    serializer = ListingSerializer(listing, context={'favorite_ids': _favorite_ids(request.user)})
    return Response(
        {
            'message': 'Listing retrieved successfully',
            'data': serializer.data
        },
        status=status.HTTP_200_OK
    )


@api_view(['PUT', 'PATCH'])
@permission_classes([IsAuthenticated])
def update_listing(request, listing_id):
    listing, error = _owned_listing_or_error(request, listing_id, 'update')
    if error:
        return error

    partial = request.method == 'PATCH'
    serializer = ListingSerializer(listing, data=request.data, partial=partial)

    if serializer.is_valid():
        updated_listing = serializer.save()
        return Response(
            {
                'message': 'Listing updated successfully',
                'data': ListingSerializer(updated_listing).data
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
def delete_listing(request, listing_id):
    listing, error = _owned_listing_or_error(request, listing_id, 'delete')
    if error:
        return error

    listing_data = ListingSerializer(listing).data
    listing.delete()
    logger.info("Listing %s deleted", listing_id)

    return Response(
        {
            'message': 'Listing deleted successfully',
            'data': listing_data
        },
        status=status.HTTP_200_OK
    )


@api_view(['PATCH', 'POST'])
@permission_classes([IsAuthenticated])
def deactivate_listing(request, listing_id):
    """Take a listing off the public marketplace without deleting it."""
    listing, error = _owned_listing_or_error(request, listing_id, 'deactivate')
    if error:
        return error

    listing.is_active = False
    listing.save(update_fields=['is_active', 'updated_at'])

    return Response(
        {
            'message': 'Listing deactivated successfully',
            'data': ListingSerializer(listing).data
        },
        status=status.HTTP_200_OK
    )


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def toggle_favorite(request, listing_id):
    listing = get_object_or_404(MarketplaceListing, id=listing_id)

    try:
        with transaction.atomic():
            favorite, created = MarketplaceFavorite.objects.get_or_create(user=request.user, listing=listing)
    except IntegrityError:
        # a concurrent toggle already added it
        logger.warning("Favorite for listing %s by user %s already exists", listing.id, request.user.id)
        created = True
    else:
        if not created:
            favorite.delete()

    is_favorite = created
    message = 'Added to favorites' if created else 'Removed from favorites'

    return Response(
        {
            'message': message,
            'listing_id': listing.id,
            'is_favorite': is_favorite
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_favorites(request):
    favorites = MarketplaceFavorite.objects.filter(user=request.user).select_related(
        'listing__user__profile'
    ).order_by('-created_at')
    serializer = FavoriteSerializer(favorites, many=True)

    return Response(
        {
            'message': 'Favorites retrieved successfully',
            'count': favorites.count(),
            'data': serializer.data
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([AllowAny])
def get_regions(request):
    regions = (
        MarketplaceListing.objects.filter(is_active=True)
        .exclude(region='')
        .values_list('region', flat=True)
        .distinct()
        .order_by('region')
    )

    return Response(
        {
            'message': 'Regions retrieved successfully',
            'data': list(regions)
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET'])
@permission_classes([AllowAny])
def get_categories(request):
    counts = MarketplaceListing.objects.aggregate(**{
        value: Count('id', filter=Q(category=value, is_active=True))
        for value, _ in MarketplaceListing.CATEGORY_CHOICES
    })

    data = [
        {'value': value, 'label': label, 'count': counts[value]}
        for value, label in MarketplaceListing.CATEGORY_CHOICES
    ]

    return Response(
        {
            'message': 'Categories retrieved successfully',
            'data': data
        },
        status=status.HTTP_200_OK
    )


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def get_mandi_prices(request):
    """Location-specific commodity prices with gainers, losers and a summary."""
    source = request.data if request.method == 'POST' else request.GET
    serializer = MandiPriceRequestSerializer(data=source)

    if not serializer.is_valid():
        return Response(
            {
                'error': 'Invalid data provided',
                'details': serializer.errors
            },
            status=status.HTTP_400_BAD_REQUEST
        )

    state = serializer.validated_data['state']
    district = serializer.validated_data['district']
    now = timezone.now()

    prices = get_location_specific_prices(state, district, now.date())

    return Response(
        {
            'prices': prices,
            'insights': build_market_insights(prices),
            'lastUpdated': now.isoformat(),
            'region': {'state': state, 'district': district}
        },
        status=status.HTTP_200_OK
    )
