from django.urls import path
from . import views

urlpatterns = [
    # Listings
    path('listings/', views.get_listings, name='get_listings'),
    path('create/', views.create_listing, name='create_listing'),
    path('my-listings/', views.get_user_listings, name='get_user_listings'),
    path('<int:listing_id>/', views.get_listing_by_id, name='get_listing_by_id'),
    path('update/<int:listing_id>/', views.update_listing, name='update_listing'),
    path('delete/<int:listing_id>/', views.delete_listing, name='delete_listing'),
    path('deactivate/<int:listing_id>/', views.deactivate_listing, name='deactivate_listing'),

    # Favorites
    path('favorites/', views.get_favorites, name='get_favorites'),
    path('favorites/toggle/<int:listing_id>/', views.toggle_favorite, name='toggle_favorite'),

    # Browse helpers
    path('regions/', views.get_regions, name='get_regions'),
    path('categories/', views.get_categories, name='get_categories'),

    # Mandi prices
    path('mandi-prices/', views.get_mandi_prices, name='get_mandi_prices'),
]
