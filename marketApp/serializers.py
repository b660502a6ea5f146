from rest_framework import serializers
from .models import MarketplaceListing, MarketplaceFavorite


class ListingSerializer(serializers.ModelSerializer):
    """Marketplace listing with the seller's public name."""
    seller_name = serializers.SerializerMethodField()
    is_favorite = serializers.SerializerMethodField()

    class Meta:
        model = MarketplaceListing
        fields = [
            'id', 'title', 'description', 'category', 'price', 'quantity', 'unit',
            'location', 'region', 'image_url', 'contact_phone', 'contact_email',
            'crop_type', 'is_active', 'seller_name', 'is_favorite', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'is_active', 'created_at', 'updated_at']

    def get_seller_name(self, obj):
        profile = getattr(obj.user, 'profile', None)
        if profile and profile.full_name:
            return profile.full_name
        return None

    def get_is_favorite(self, obj):
        favorite_ids = self.context.get('favorite_ids')
        if favorite_ids is None:
            return False
        return obj.id in favorite_ids

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError("Title cannot be empty")
        return value.strip()

    def validate_price(self, value):
        if value <= 0:
            raise serializers.ValidationError("Price must be greater than 0")
        return value

    def validate_quantity(self, value):
        if value <= 0:
            raise serializers.ValidationError("Quantity must be greater than 0")
        return value


class FavoriteSerializer(serializers.ModelSerializer):
    listing = ListingSerializer(read_only=True)

    class Meta:
        model = MarketplaceFavorite
        fields = ['id', 'listing', 'created_at']


class MandiPriceRequestSerializer(serializers.Serializer):
    state = serializers.CharField(max_length=100, required=False, default='Maharashtra')
    district = serializers.CharField(max_length=100, required=False, default='Pune')
