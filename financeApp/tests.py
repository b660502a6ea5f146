import datetime
from decimal import Decimal

from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from cropApp.models import Crop
from userApp.models import CustomUser
from .models import Expense, RevenueRecord


class ExpenseApiTest(APITestCase):
    def setUp(self):
        self.user = CustomUser.objects.create_user(email='farmer@example.com', password='Farmer@2024')
        self.other = CustomUser.objects.create_user(email='other@example.com', password='Farmer@2024')
        self.crop = Crop.objects.create(user=self.user, crop_name='Wheat')
        self.client.force_authenticate(user=self.user)

    def test_create_expense_defaults_to_today(self):
        response = self.client.post('/finance/expenses/create/', {
            'amount': '1500.00',
            'category': 'Fertilizers',
            'crop': self.crop.id,
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        expense = Expense.objects.get()
        self.assertEqual(expense.expense_date, timezone.localdate())
        self.assertEqual(response.data['data']['crop_name'], 'Wheat')

    def test_rejects_non_positive_amount_and_unknown_category(self):
        response = self.client.post('/finance/expenses/create/', {
            'amount': '0',
            'category': 'Holidays',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('amount', response.data['details'])
        self.assertIn('category', response.data['details'])

    def test_cannot_attach_someone_elses_crop(self):
        foreign_crop = Crop.objects.create(user=self.other, crop_name='Rice')
        response = self.client.post('/finance/expenses/create/', {
            'amount': '200',
            'category': 'Seeds & Seedlings',
            'crop': foreign_crop.id,
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('crop', response.data['details'])

    def test_summary_groups_by_category_within_bounds(self):
        Expense.objects.create(user=self.user, amount=Decimal('100'), category='Fuel',
                               expense_date=datetime.date(2025, 1, 5))
        Expense.objects.create(user=self.user, amount=Decimal('50'), category='Fuel',
                               expense_date=datetime.date(2025, 2, 5))
        Expense.objects.create(user=self.user, amount=Decimal('300'), category='Labor',
                               expense_date=datetime.date(2025, 2, 10))
        Expense.objects.create(user=self.other, amount=Decimal('999'), category='Labor',
                               expense_date=datetime.date(2025, 2, 10))

        response = self.client.get('/finance/expenses/summary/', {'start': '2025-02-01'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data['data']
        self.assertEqual(data['total'], Decimal('350'))
        self.assertEqual(data['by_category']['Fuel'], Decimal('50'))
        self.assertEqual(data['by_category']['Labor'], Decimal('300'))

    def test_summary_rejects_bad_date(self):
        response = self.client.get('/finance/expenses/summary/', {'end': 'yesterday'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

        response = self.client.get('/finance/expenses/summary/', {'start': '2025-02-30'})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Invalid start date. Use YYYY-MM-DD')

    def test_list_is_newest_first(self):
        Expense.objects.create(user=self.user, amount=Decimal('10'), category='Other',
                               expense_date=datetime.date(2025, 1, 1))
        Expense.objects.create(user=self.user, amount=Decimal('20'), category='Other',
                               expense_date=datetime.date(2025, 3, 1))

        response = self.client.get('/finance/expenses/my-expenses/')
        dates = [expense['expense_date'] for expense in response.data['data']]
        self.assertEqual(dates, ['2025-03-01', '2025-01-01'])


class RevenueApiTest(APITestCase):
    def setUp(self):
        self.user = CustomUser.objects.create_user(email='farmer@example.com', password='Farmer@2024')
        self.client.force_authenticate(user=self.user)

    def test_total_amount_is_computed(self):
        response = self.client.post('/finance/revenue/create/', {
            'quantity_sold': '12.5',
            'price_per_unit': '2200',
            'total_amount': '1',
            'buyer_name': 'Pune APMC trader',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(RevenueRecord.objects.get().total_amount, Decimal('27500.00'))

    def test_summary_splits_season_and_all_time(self):
        today = timezone.localdate()
        RevenueRecord.objects.create(user=self.user, quantity_sold=Decimal('2'), price_per_unit=Decimal('100'),
                                     sale_date=today.replace(month=1, day=1))
        RevenueRecord.objects.create(user=self.user, quantity_sold=Decimal('1'), price_per_unit=Decimal('50'),
                                     sale_date=today.replace(year=today.year - 1, month=12, day=31))

        response = self.client.get('/finance/revenue/summary/')

        self.assertEqual(response.data['data']['season_total'], Decimal('200.00'))
        self.assertEqual(response.data['data']['all_time_total'], Decimal('250.00'))
