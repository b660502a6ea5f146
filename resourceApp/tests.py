from unittest import mock

import requests
from django.test import SimpleTestCase, override_settings
from rest_framework import status
from rest_framework.test import APITestCase

from userApp.models import CustomUser
from .schemes import filter_schemes, category_stats
from .youtube import YouTubeClient, VideoSearchError, categorize_videos


def youtube_item(video_id, title):
    return {
        'id': {'kind': 'youtube#video', 'videoId': video_id},
        'snippet': {
            'title': title,
            'description': f'{title} explained',
            'thumbnails': {'medium': {'url': f'https://i.ytimg.com/vi/{video_id}/mqdefault.jpg'}},
            'channelTitle': 'Krishi Darshan',
            'publishedAt': '2024-05-01T10:00:00Z',
        },
    }


def video(title):
    return {'id': title, 'title': title}


class SchemeCatalogueTest(SimpleTestCase):
    def test_all_returns_every_scheme(self):
        self.assertEqual(len(filter_schemes(category='All')), 6)
        self.assertEqual(len(filter_schemes()), 6)

    def test_category_must_match_exactly(self):
        schemes = filter_schemes(category='Insurance')
        self.assertEqual([scheme['name'] for scheme in schemes], ['Crop Insurance Scheme (PMFBY)'])
        self.assertEqual(filter_schemes(category='insurance'), [])

    def test_search_covers_name_description_and_category(self):
        self.assertEqual(filter_schemes(search='kisan')[0]['id'], 1)
        self.assertEqual(len(filter_schemes(search='KISAN')), 2)
        self.assertEqual(filter_schemes(search='soil testing')[0]['id'], 3)
        self.assertEqual(filter_schemes(search='marketing')[0]['id'], 6)

    def test_category_stats(self):
        stats = {row['name']: row['count'] for row in category_stats()}
        self.assertEqual(sum(stats.values()), 6)
        self.assertEqual(stats['Credit'], 1)


class VideoCategoryTest(SimpleTestCase):
    def test_keywords_are_case_insensitive_and_capped(self):
        videos = [video(f'Drip Irrigation part {n}') for n in range(6)] + [video('Organic PEST spray')]
        categories = categorize_videos(videos)

        self.assertEqual(len(categories['Irrigation & Water']), 4)
        self.assertEqual(categories['Pest Control'], [videos[-1]])
        self.assertEqual(categories['Crop Management'], [])
        self.assertEqual(categories['General Farming'], videos[:4])


class YouTubeClientTest(SimpleTestCase):
    @mock.patch('resourceApp.youtube.requests.get')
    def test_search_formats_videos(self, mock_get):
        mock_get.return_value.status_code = 200
        mock_get.return_value.json.return_value = {
            'items': [youtube_item('abc123', 'Wheat harvest tips')],
            'pageInfo': {'totalResults': 981},
        }

        videos, total = YouTubeClient(api_key='yt', timeout=5).search('wheat', 3)

        self.assertEqual(total, 981)
        self.assertEqual(videos[0]['url'], 'https://www.youtube.com/watch?v=abc123')
        self.assertEqual(videos[0]['thumbnail'], 'https://i.ytimg.com/vi/abc123/mqdefault.jpg')
        self.assertEqual(videos[0]['channel'], 'Krishi Darshan')
        params = mock_get.call_args.kwargs['params']
        self.assertEqual(params['q'], 'wheat farming agriculture tutorial')
        self.assertEqual(params['maxResults'], 3)

    @mock.patch('resourceApp.youtube.requests.get')
    def test_missing_items_raises(self, mock_get):
        mock_get.return_value.status_code = 403
        mock_get.return_value.json.return_value = {'error': {'message': 'quota exceeded'}}

        with self.assertRaisesMessage(VideoSearchError, 'No videos found'):
            YouTubeClient(api_key='yt', timeout=5).search('wheat')

    @mock.patch('resourceApp.youtube.requests.get', side_effect=requests.exceptions.ConnectionError('offline'))
    def test_transport_failure_raises(self, mock_get):
        with self.assertRaises(VideoSearchError):
            YouTubeClient(api_key='yt', timeout=5).search('wheat')


class ResourceApiTest(APITestCase):
    def setUp(self):
        self.user = CustomUser.objects.create_user(email='farmer@example.com', password='Farmer@2024')
        self.client.force_authenticate(user=self.user)

    def test_scheme_list_echoes_filters(self):
        response = self.client.get('/resources/schemes/', {'category': 'Credit'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['filters'], {'search': '', 'category': 'Credit'})
        self.assertEqual(response.data['count'], 1)

    def test_scheme_detail_and_404(self):
        self.assertEqual(self.client.get('/resources/schemes/4/').data['data']['name'], 'MGNREGA')
        self.assertEqual(self.client.get('/resources/schemes/99/').status_code, status.HTTP_404_NOT_FOUND)

    @override_settings(YOUTUBE_API_KEY='')
    def test_videos_without_key(self):
        response = self.client.get('/resources/videos/')
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)

    @override_settings(YOUTUBE_API_KEY='yt')
    @mock.patch('resourceApp.views.YouTubeClient')
    def test_videos_defaults_and_clamping(self, mock_client):
        mock_client.return_value.search.return_value = ([video('Drip irrigation basics')], 1)

        response = self.client.get('/resources/videos/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        mock_client.return_value.search.assert_called_with('farming techniques', 12)
        self.assertEqual(response.data['totalResults'], 1)
        self.assertEqual(len(response.data['categories']['Irrigation & Water']), 1)

        self.client.get('/resources/videos/', {'query': 'paddy', 'max_results': 500})
        mock_client.return_value.search.assert_called_with('paddy', 50)

    @override_settings(YOUTUBE_API_KEY='yt')
    @mock.patch('resourceApp.views.YouTubeClient')
    def test_videos_upstream_failure(self, mock_client):
        mock_client.return_value.search.side_effect = VideoSearchError('No videos found')

        response = self.client.get('/resources/videos/')
        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
