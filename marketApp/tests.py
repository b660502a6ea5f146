import datetime
from decimal import Decimal
from unittest import mock

from django.db import IntegrityError
from django.test import SimpleTestCase
from rest_framework import status
from rest_framework.test import APITestCase

from userApp.models import CustomUser
from .filters import filter_listings
from .mandi import get_location_specific_prices, build_market_insights, price_multiplier
from .models import MarketplaceListing, MarketplaceFavorite

TODAY = datetime.date(2025, 6, 15)


class MandiPriceTest(SimpleTestCase):
    def test_default_location_uses_base_prices(self):
        prices = get_location_specific_prices('Maharashtra', 'Pune', TODAY)
        wheat = prices[0]

        self.assertEqual(wheat['commodity'], 'Wheat')
        self.assertEqual(wheat['modalPrice'], 2215)
        self.assertEqual(wheat['minPrice'], 1883)
        self.assertEqual(wheat['maxPrice'], 2547)
        self.assertEqual(wheat['market'], 'Pune APMC')
        self.assertEqual(wheat['date'], '2025-06-15')

    def test_state_specific_commodities(self):
        names = [price['commodity'] for price in get_location_specific_prices('Punjab', 'Ludhiana', TODAY)]
        self.assertEqual(len(names), 7)
        self.assertIn('Basmati Rice', names)
        self.assertNotIn('Grapes', names)

        coconut = get_location_specific_prices('Tamil Nadu', 'Chennai', TODAY)[-1]
        self.assertEqual(coconut['unit'], 'per 1000 nuts')

    def test_multipliers_combine_and_default_to_one(self):
        self.assertAlmostEqual(price_multiplier('Punjab', 'Ludhiana'), 1.265)
        self.assertEqual(price_multiplier('Goa', 'Panaji'), 1.0)

        onion = get_location_specific_prices('Maharashtra', 'Akola', TODAY)[2]
        self.assertEqual(onion['modalPrice'], 1060)

    def test_insights(self):
        insights = build_market_insights(get_location_specific_prices('Maharashtra', 'Pune', TODAY))

        self.assertEqual(
            [price['commodity'] for price in insights['topGainers']],
            ['Tomato', 'Grapes', 'Cotton']
        )
        self.assertEqual([price['commodity'] for price in insights['topLosers']], ['Onion'])
        self.assertEqual(insights['marketSummary'], {
            'totalCommodities': 7, 'trending': 4, 'declining': 1, 'stable': 2,
        })


class ListingFilterTest(APITestCase):
    def setUp(self):
        self.seller = CustomUser.objects.create_user(email='seller@example.com', password='Farmer@2024')
        self.cheap = MarketplaceListing.objects.create(
            user=self.seller, title='Organic onions', category='crops', price=Decimal('20'),
            quantity=Decimal('500'), region='Nashik', crop_type='Onion',
        )
        self.pricey = MarketplaceListing.objects.create(
            user=self.seller, title='Power tiller', description='Barely used', category='tools',
            price=Decimal('85000'), quantity=Decimal('1'), unit='piece', region='Pune',
        )
        MarketplaceListing.objects.create(
            user=self.seller, title='Old onion seeds', category='seeds', price=Decimal('5'),
            quantity=Decimal('10'), region='Nashik', is_active=False,
        )

    def test_search_matches_crop_type_and_skips_inactive(self):
        results = filter_listings(MarketplaceListing.objects.all(), search='ONION')
        self.assertEqual(list(results), [self.cheap])

    def test_all_means_no_filter(self):
        results = filter_listings(MarketplaceListing.objects.all(), category='all', region='all')
        self.assertEqual(results.count(), 2)

    def test_category_and_region(self):
        self.assertEqual(list(filter_listings(MarketplaceListing.objects.all(), category='tools')), [self.pricey])
        self.assertEqual(list(filter_listings(MarketplaceListing.objects.all(), region='Nashik')), [self.cheap])

    def test_sorting(self):
        by_price = filter_listings(MarketplaceListing.objects.all(), sort_by='price-low')
        self.assertEqual(list(by_price), [self.cheap, self.pricey])

        by_price_desc = filter_listings(MarketplaceListing.objects.all(), sort_by='price-high')
        self.assertEqual(list(by_price_desc), [self.pricey, self.cheap])

        newest = filter_listings(MarketplaceListing.objects.all(), sort_by='bogus')
        self.assertEqual(list(newest), [self.pricey, self.cheap])


class MarketplaceApiTest(APITestCase):
    def setUp(self):
        self.seller = CustomUser.objects.create_user(email='seller@example.com', password='Farmer@2024')
        profile = self.seller.profile
        profile.full_name = 'Ramesh Patil'
        profile.save()
        self.buyer = CustomUser.objects.create_user(email='buyer@example.com', password='Farmer@2024')

    def create_listing(self, **overrides):
        data = {
            'user': self.seller, 'title': 'Basmati rice', 'category': 'crops',
            'price': Decimal('60'), 'quantity': Decimal('200'), 'region': 'Punjab',
        }
        data.update(overrides)
        return MarketplaceListing.objects.create(**data)

    def test_public_listing_shows_seller_name(self):
        self.create_listing()

        response = self.client.get('/marketplace/listings/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data'][0]['seller_name'], 'Ramesh Patil')

    def test_create_listing_validates_price(self):
        self.client.force_authenticate(user=self.seller)
        response = self.client.post('/marketplace/create/', {
            'title': 'Tomatoes', 'category': 'crops', 'price': '-1', 'quantity': '10',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('price', response.data['details'])

    def test_create_listing_defaults_unit(self):
        self.client.force_authenticate(user=self.seller)
        response = self.client.post('/marketplace/create/', {
            'title': 'Tomatoes', 'category': 'crops', 'price': '18', 'quantity': '300',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['data']['unit'], 'kg')

    def test_deactivate_hides_from_public_but_not_owner(self):
        listing = self.create_listing()
        self.client.force_authenticate(user=self.seller)

        self.client.patch(f'/marketplace/deactivate/{listing.id}/')
        self.assertEqual(self.client.get('/marketplace/my-listings/').data['count'], 1)

        self.client.force_authenticate(user=None)
        self.assertEqual(self.client.get('/marketplace/listings/').data['count'], 0)

    def test_only_owner_can_update(self):
        listing = self.create_listing()
        self.client.force_authenticate(user=self.buyer)

        response = self.client.patch(f'/marketplace/update/{listing.id}/', {'price': '1'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_toggle_favorite(self):
        listing = self.create_listing()
        self.client.force_authenticate(user=self.buyer)

        response = self.client.post(f'/marketplace/favorites/toggle/{listing.id}/')
        self.assertTrue(response.data['is_favorite'])
        self.assertEqual(self.client.get('/marketplace/favorites/').data['count'], 1)
        self.assertTrue(self.client.get('/marketplace/listings/').data['data'][0]['is_favorite'])

        response = self.client.post(f'/marketplace/favorites/toggle/{listing.id}/')
        self.assertFalse(response.data['is_favorite'])
        self.assertFalse(MarketplaceFavorite.objects.exists())

    def test_toggle_favorite_survives_concurrent_add(self):
        listing = self.create_listing()
        self.client.force_authenticate(user=self.buyer)

        with mock.patch.object(MarketplaceFavorite.objects, 'get_or_create', side_effect=IntegrityError):
            response = self.client.post(f'/marketplace/favorites/toggle/{listing.id}/')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['is_favorite'])
        self.assertEqual(response.data['message'], 'Added to favorites')

    def test_regions_and_categories(self):
        self.create_listing(region='Punjab')
        self.create_listing(region='Punjab', category='seeds')
        self.create_listing(region='')
        self.create_listing(region='Haryana', is_active=False)

        regions = self.client.get('/marketplace/regions/').data['data']
        self.assertEqual(regions, ['Punjab'])

        categories = {row['value']: row['count'] for row in self.client.get('/marketplace/categories/').data['data']}
        self.assertEqual(categories['crops'], 2)
        self.assertEqual(categories['seeds'], 1)
        self.assertEqual(categories['livestock'], 0)

    def test_mandi_prices_defaults_and_post(self):
        self.client.force_authenticate(user=self.buyer)

        response = self.client.get('/marketplace/mandi-prices/')
        self.assertEqual(response.data['region'], {'state': 'Maharashtra', 'district': 'Pune'})

        response = self.client.post('/marketplace/mandi-prices/', {'state': 'Karnataka', 'district': 'Mysore'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('Coffee', [price['commodity'] for price in response.data['prices']])
        self.assertIn('lastUpdated', response.data)
