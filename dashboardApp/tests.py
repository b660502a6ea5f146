import datetime
from decimal import Decimal

from rest_framework import status
from rest_framework.test import APITestCase

from cropApp.models import Crop
from financeApp.models import RevenueRecord
from irrigationApp.models import IrrigationSchedule
from userApp.models import CustomUser
from weatherApp.models import WeatherAlert
from .stats import compute_dashboard_stats

TODAY = datetime.date(2025, 8, 20)


class DashboardStatsTest(APITestCase):
    def setUp(self):
        self.user = CustomUser.objects.create_user(email='farmer@example.com', password='Farmer@2024')

    def test_empty_account(self):
        self.assertEqual(compute_dashboard_stats(self.user, TODAY), {
            'activeCrops': 0,
            'irrigationStatus': 0,
            'seasonRevenue': Decimal('0'),
            'activeAlerts': 0,
        })

    def test_counts_only_relevant_rows(self):
        Crop.objects.create(user=self.user, crop_name='Wheat', status='planted')
        Crop.objects.create(user=self.user, crop_name='Rice', status='harvested')
        for hour in range(3):
            IrrigationSchedule.objects.create(user=self.user, field_name=f'Plot {hour}', schedule_time=datetime.time(hour, 0))
        IrrigationSchedule.objects.create(user=self.user, field_name='Idle', schedule_time=datetime.time(9, 0), is_active=False)
        RevenueRecord.objects.create(user=self.user, quantity_sold=Decimal('10'), price_per_unit=Decimal('20'),
                                     sale_date=datetime.date(2025, 1, 1))
        RevenueRecord.objects.create(user=self.user, quantity_sold=Decimal('1'), price_per_unit=Decimal('999'),
                                     sale_date=datetime.date(2024, 12, 31))
        WeatherAlert.objects.create(user=self.user, alert_type='heat_wave', message='Hot', severity='high')
        WeatherAlert.objects.create(user=self.user, alert_type='strong_wind', message='Windy', is_read=True)

        stats = compute_dashboard_stats(self.user, TODAY)

        self.assertEqual(stats['activeCrops'], 1)
        self.assertEqual(stats['irrigationStatus'], 60)
        self.assertEqual(stats['seasonRevenue'], Decimal('200.00'))
        self.assertEqual(stats['activeAlerts'], 1)

    def test_irrigation_status_caps_at_100(self):
        for minute in range(7):
            IrrigationSchedule.objects.create(user=self.user, field_name='Plot', schedule_time=datetime.time(6, minute))
        self.assertEqual(compute_dashboard_stats(self.user, TODAY)['irrigationStatus'], 100)

    def test_endpoint_requires_login(self):
        self.assertEqual(self.client.get('/dashboard/stats/').status_code, status.HTTP_401_UNAUTHORIZED)

        self.client.force_authenticate(user=self.user)
        response = self.client.get('/dashboard/stats/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('seasonRevenue', response.data['data'])
