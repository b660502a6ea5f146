from rest_framework import status
from rest_framework.test import APITestCase

from userApp.models import CustomUser
from .crop_guide import CROP_GUIDE, current_season, season_recommendation, get_crop_guide, KHARIF, RABI
from .models import Crop


class CropGuideTest(APITestCase):
    def test_current_season_boundaries(self):
        self.assertEqual(current_season(3), RABI)
        self.assertEqual(current_season(4), KHARIF)
        self.assertEqual(current_season(9), KHARIF)
        self.assertEqual(current_season(10), RABI)

    def test_rice_is_optimal_in_monsoon(self):
        recommendation = season_recommendation(CROP_GUIDE['Rice'], 7)
        self.assertTrue(recommendation['is_optimal'])
        self.assertEqual(recommendation['message'], "Optimal time for this crop!")

    def test_wheat_is_not_optimal_in_monsoon(self):
        recommendation = season_recommendation(CROP_GUIDE['Wheat'], 7)
        self.assertFalse(recommendation['is_optimal'])

    def test_onion_is_optimal_in_both_seasons(self):
        self.assertTrue(season_recommendation(CROP_GUIDE['Onion'], 1)['is_optimal'])
        self.assertTrue(season_recommendation(CROP_GUIDE['Onion'], 6)['is_optimal'])

    def test_lookup_is_case_insensitive(self):
        self.assertEqual(get_crop_guide('tomato')['name'], 'Tomato')
        self.assertIsNone(get_crop_guide('Sugarcane'))


class CropApiTest(APITestCase):
    def setUp(self):
        self.user = CustomUser.objects.create_user(email='farmer@example.com', password='Farmer@2024')
        self.other = CustomUser.objects.create_user(email='other@example.com', password='Farmer@2024')
        self.client.force_authenticate(user=self.user)

    def test_create_crop(self):
        response = self.client.post('/crops/create/', {
            'crop_name': 'Wheat',
            'variety': 'HD-2967',
            'area_planted': 2.5,
            'planting_date': '2024-11-01',
            'expected_harvest_date': '2025-03-20',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['data']['status'], 'planted')
        self.assertEqual(Crop.objects.get().user, self.user)

    def test_create_crop_rejects_harvest_before_planting(self):
        response = self.client.post('/crops/create/', {
            'crop_name': 'Wheat',
            'planting_date': '2024-11-01',
            'expected_harvest_date': '2024-10-01',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('expected_harvest_date', response.data['details'])

    def test_list_only_returns_own_crops(self):
        Crop.objects.create(user=self.user, crop_name='Rice')
        Crop.objects.create(user=self.user, crop_name='Onion', status='harvested')
        Crop.objects.create(user=self.other, crop_name='Cotton')

        response = self.client.get('/crops/my-crops/')
        self.assertEqual(response.data['count'], 2)

        response = self.client.get('/crops/my-crops/', {'status': 'harvested'})
        self.assertEqual(response.data['count'], 1)
        self.assertEqual(response.data['data'][0]['crop_name'], 'Onion')

    def test_cannot_update_someone_elses_crop(self):
        crop = Crop.objects.create(user=self.other, crop_name='Cotton')
        response = self.client.patch(f'/crops/update/{crop.id}/', {'status': 'growing'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_update_and_delete_crop(self):
        crop = Crop.objects.create(user=self.user, crop_name='Rice')

        response = self.client.patch(f'/crops/update/{crop.id}/', {'status': 'growing'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['status'], 'growing')

        response = self.client.delete(f'/crops/delete/{crop.id}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(Crop.objects.exists())

    def test_missing_crop_returns_404(self):
        response = self.client.get('/crops/999/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_guide_detail(self):
        response = self.client.get('/crops/guide/Potato/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('recommendation', response.data['data'])

        response = self.client.get('/crops/guide/Banana/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_my_crop_guides_use_profile_crops(self):
        profile = self.user.profile
        profile.primary_crops = ['Wheat', 'Sugarcane']
        profile.save()

        response = self.client.get('/crops/guide/my-crops/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['count'], 1)
        self.assertEqual(response.data['data'][0]['name'], 'Wheat')
        self.assertEqual(response.data['crops_without_guide'], ['Sugarcane'])
