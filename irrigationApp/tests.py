import datetime
from datetime import timedelta

from django.test import TestCase
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from userApp.models import CustomUser
from .models import IrrigationSchedule


class CountdownTest(TestCase):
    def setUp(self):
        self.user = CustomUser.objects.create_user(email='farmer@example.com', password='Farmer@2024')
        self.started = timezone.now()
        self.schedule = IrrigationSchedule.objects.create(
            user=self.user,
            field_name='North plot',
            schedule_time=datetime.time(6, 0),
            duration_minutes=10,
            last_irrigated=self.started,
        )

    def test_countdown_midway(self):
        countdown = self.schedule.time_remaining(self.started + timedelta(minutes=2, seconds=30))

        self.assertEqual(countdown['minutes'], 7)
        self.assertEqual(countdown['seconds'], 30)
        self.assertEqual(countdown['time_string'], '7:30')
        self.assertEqual(countdown['progress'], 25.0)

    def test_finished_schedule_has_no_countdown(self):
        self.assertIsNone(self.schedule.time_remaining(self.started + timedelta(minutes=10)))

    def test_inactive_schedule_has_no_countdown(self):
        self.schedule.is_active = False
        self.assertIsNone(self.schedule.time_remaining(self.started))

    def test_never_started_schedule_has_no_countdown(self):
        self.schedule.last_irrigated = None
        self.assertIsNone(self.schedule.time_remaining(self.started))

    def test_toggle_pauses_and_restarts(self):
        self.assertFalse(self.schedule.toggle())
        self.assertIsNone(self.schedule.last_irrigated)

        restart = self.started + timedelta(hours=1)
        self.assertTrue(self.schedule.toggle(restart))
        self.assertEqual(self.schedule.last_irrigated, restart)


class IrrigationApiTest(APITestCase):
    def setUp(self):
        self.user = CustomUser.objects.create_user(email='farmer@example.com', password='Farmer@2024')
        self.client.force_authenticate(user=self.user)

    def test_create_schedule_starts_idle(self):
        response = self.client.post('/irrigation/create/', {
            'field_name': 'Drip block A',
            'schedule_time': '06:30',
            'duration_minutes': 45,
            'frequency': 'weekly',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertTrue(response.data['data']['is_active'])
        self.assertIsNone(response.data['data']['last_irrigated'])
        self.assertIsNone(response.data['data']['countdown'])

    def test_zero_duration_is_rejected(self):
        response = self.client.post('/irrigation/create/', {
            'field_name': 'Drip block A',
            'schedule_time': '06:30',
            'duration_minutes': 0,
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_toggle_messages_and_running_list(self):
        schedule = IrrigationSchedule.objects.create(
            user=self.user, field_name='South plot', schedule_time=datetime.time(18, 0),
            duration_minutes=30, is_active=False,
        )

        response = self.client.post(f'/irrigation/toggle/{schedule.id}/')
        self.assertEqual(response.data['message'], 'Irrigation schedule activated')
        self.assertIsNotNone(response.data['data']['countdown'])

        response = self.client.get('/irrigation/running/')
        self.assertEqual(response.data['count'], 1)

        response = self.client.post(f'/irrigation/toggle/{schedule.id}/')
        self.assertEqual(response.data['message'], 'Irrigation schedule paused')
        self.assertEqual(self.client.get('/irrigation/running/').data['count'], 0)

    def test_schedules_ordered_by_time(self):
        IrrigationSchedule.objects.create(user=self.user, field_name='Evening', schedule_time=datetime.time(18, 0))
        IrrigationSchedule.objects.create(user=self.user, field_name='Morning', schedule_time=datetime.time(6, 0))

        response = self.client.get('/irrigation/my-schedules/')
        names = [schedule['field_name'] for schedule in response.data['data']]
        self.assertEqual(names, ['Morning', 'Evening'])
