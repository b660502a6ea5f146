import datetime

from rest_framework import status
from rest_framework.test import APITestCase

from userApp.models import CustomUser
from .models import Task


class TaskApiTest(APITestCase):
    def setUp(self):
        self.user = CustomUser.objects.create_user(email='farmer@example.com', password='Farmer@2024')
        self.client.force_authenticate(user=self.user)

    def test_create_task_defaults(self):
        response = self.client.post('/tasks/create/', {'title': 'Spray neem oil', 'crop_name': 'Cotton'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['data']['priority'], 'medium')
        self.assertEqual(response.data['data']['status'], 'pending')

    def test_title_is_required(self):
        response = self.client.post('/tasks/create/', {'title': '   '}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_tasks_ordered_by_due_date_with_undated_last(self):
        Task.objects.create(user=self.user, title='No date')
        Task.objects.create(user=self.user, title='Later', due_date=datetime.date(2025, 6, 10))
        Task.objects.create(user=self.user, title='Sooner', due_date=datetime.date(2025, 6, 1))

        response = self.client.get('/tasks/my-tasks/')
        titles = [task['title'] for task in response.data['data']]
        self.assertEqual(titles, ['Sooner', 'Later', 'No date'])

    def test_filter_by_status_and_priority(self):
        Task.objects.create(user=self.user, title='Weeding', priority='high')
        Task.objects.create(user=self.user, title='Harvest', priority='high', status='completed')
        Task.objects.create(user=self.user, title='Fence', priority='low')

        response = self.client.get('/tasks/my-tasks/', {'priority': 'high', 'status': 'pending'})
        self.assertEqual(response.data['count'], 1)
        self.assertEqual(response.data['data'][0]['title'], 'Weeding')

    def test_update_status(self):
        task = Task.objects.create(user=self.user, title='Irrigate plot B')

        response = self.client.patch(f'/tasks/status/{task.id}/', {'status': 'completed'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        task.refresh_from_db()
        self.assertEqual(task.status, 'completed')

    def test_invalid_status_is_rejected(self):
        task = Task.objects.create(user=self.user, title='Irrigate plot B')
        response = self.client.patch(f'/tasks/status/{task.id}/', {'status': 'done'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_other_users_task_is_forbidden(self):
        other = CustomUser.objects.create_user(email='other@example.com', password='Farmer@2024')
        task = Task.objects.create(user=other, title='Private')

        self.assertEqual(self.client.get(f'/tasks/{task.id}/').status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(self.client.delete(f'/tasks/delete/{task.id}/').status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(Task.objects.filter(id=task.id).exists())
