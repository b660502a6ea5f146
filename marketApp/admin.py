from django.contrib import admin
from .models import MarketplaceListing, MarketplaceFavorite


@admin.register(MarketplaceListing)
class MarketplaceListingAdmin(admin.ModelAdmin):
    list_display = ['id', 'title', 'user', 'category', 'price', 'quantity', 'unit', 'region', 'is_active', 'created_at']
    list_filter = ['category', 'region', 'is_active']
    search_fields = ['title', 'description', 'crop_type', 'user__email']
    readonly_fields = ['created_at', 'updated_at']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user')


@admin.register(MarketplaceFavorite)
class MarketplaceFavoriteAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'listing', 'created_at']
    search_fields = ['user__email', 'listing__title']
