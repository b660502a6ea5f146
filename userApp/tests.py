from rest_framework import status
from rest_framework.test import APITestCase

from .models import CustomUser, Profile
from .views import is_valid_password


class PasswordRulesTest(APITestCase):
    def test_rejects_weak_passwords(self):
        self.assertIsNotNone(is_valid_password("short1!"))
        self.assertIsNotNone(is_valid_password("nouppercase1!"))
        self.assertIsNotNone(is_valid_password("NoDigits!!"))
        self.assertIsNotNone(is_valid_password("NoSpecial123"))

    def test_accepts_strong_password(self):
        self.assertIsNone(is_valid_password("Farmer@2024"))


class RegistrationAndLoginTest(APITestCase):
    def test_register_creates_user_and_profile(self):
        response = self.client.post('/register/', {
            'email': 'asha@example.com',
            'password': 'Farmer@2024',
            'confirmPassword': 'Farmer@2024',
            'full_name': 'Asha Patil',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIn('access', response.data['token'])
        user = CustomUser.objects.get(email='asha@example.com')
        self.assertEqual(user.role, 'farmer')
        self.assertEqual(user.profile.full_name, 'Asha Patil')

    def test_register_rejects_mismatched_passwords(self):
        response = self.client.post('/register/', {
            'email': 'asha@example.com',
            'password': 'Farmer@2024',
            'confirmPassword': 'Farmer@2025',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Passwords do not match.')

    def test_register_rejects_duplicate_email(self):
        CustomUser.objects.create_user(email='asha@example.com', password='Farmer@2024')
        response = self.client.post('/register/', {
            'email': 'ASHA@example.com',
            'password': 'Farmer@2024',
            'confirmPassword': 'Farmer@2024',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_login_returns_tokens(self):
        CustomUser.objects.create_user(email='asha@example.com', password='Farmer@2024')
        response = self.client.post('/login/', {
            'email': 'asha@example.com',
            'password': 'Farmer@2024',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('refresh', response.data['token'])

    def test_login_with_wrong_password(self):
        CustomUser.objects.create_user(email='asha@example.com', password='Farmer@2024')
        response = self.client.post('/login/', {
            'email': 'asha@example.com',
            'password': 'wrong',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)


class ProfileTest(APITestCase):
    def setUp(self):
        self.user = CustomUser.objects.create_user(email='ravi@example.com', password='Farmer@2024')
        self.client.force_authenticate(user=self.user)

    def test_profile_created_by_signal(self):
        self.assertTrue(Profile.objects.filter(user=self.user).exists())

    def test_get_profile_requires_auth(self):
        self.client.force_authenticate(user=None)
        response = self.client.get('/profile/')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_update_profile(self):
        response = self.client.put('/profile/update/', {
            'full_name': 'Ravi Kumar',
            'farm_name': 'Green Acres',
            'location': 'Nashik,IN',
            'farm_size': 4.5,
            'primary_crops': ['Wheat', 'Onion', 'Wheat'],
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['primary_crops'], ['Wheat', 'Onion'])
        self.user.profile.refresh_from_db()
        self.assertEqual(self.user.profile.location, 'Nashik,IN')

    def test_update_profile_rejects_unknown_crop(self):
        response = self.client.patch('/profile/update/', {
            'primary_crops': ['Dragonfruit'],
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('primary_crops', response.data['details'])

    def test_update_settings_merges_notifications(self):
        response = self.client.put('/settings/', {
            'language': 'hi',
            'notifications': {'market_updates': False},
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        profile = Profile.objects.get(user=self.user)
        self.assertEqual(profile.language, 'hi')
        self.assertFalse(profile.notifications['market_updates'])
        self.assertTrue(profile.notifications['weather_alerts'])

    def test_update_settings_rejects_unknown_language(self):
        response = self.client.put('/settings/', {'language': 'fr'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
