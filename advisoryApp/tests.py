import base64
import shutil
import tempfile
from unittest import mock

import httpx
import openai
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import SimpleTestCase, override_settings
from rest_framework import status
from rest_framework.test import APITestCase

from cropApp.models import Crop
from userApp.models import CustomUser
from .ai_client import (
    AdvisoryClient,
    AdvisoryRateLimited,
    AdvisoryServiceError,
    parse_identification,
)
from .models import ExpertQuery, PestReport

TINY_JPEG = b'\xff\xd8\xff\xe0fake-jpeg-bytes\xff\xd9'
TINY_JPEG_URL = 'data:image/jpeg;base64,' + base64.b64encode(TINY_JPEG).decode('ascii')

ANALYSIS = {
    'identified': True,
    'pest_name': 'Aphids',
    'severity': 'High',
    'confidence': 0.9,
    'treatment': 'Spray neem oil',
    'prevention': 'Encourage ladybirds',
    'crop_specific_advice': 'Check undersides of cotton leaves',
}


def completion(content):
    message = mock.Mock(content=content)
    return mock.Mock(choices=[mock.Mock(message=message)])


def rate_limit_error():
    request = httpx.Request('POST', 'https://api.openai.com/v1/chat/completions')
    return openai.RateLimitError('Too many requests', response=httpx.Response(429, request=request), body=None)


class IdentificationParsingTest(SimpleTestCase):
    def test_valid_json_is_returned_as_is(self):
        self.assertEqual(parse_identification('{"identified": true, "pest_name": "Bollworm"}')['pest_name'], 'Bollworm')

    def test_invalid_json_falls_back(self):
        result = parse_identification('Looks like early blight, remove affected leaves.')

        self.assertFalse(result['identified'])
        self.assertEqual(result['pest_name'], 'Analysis incomplete')
        self.assertEqual(result['severity'], 'medium')
        self.assertEqual(result['confidence'], 0.5)
        self.assertEqual(result['treatment'], 'Looks like early blight, remove affected leaves.')
        self.assertEqual(result['prevention'], 'Regular monitoring recommended')
        self.assertEqual(result['crop_specific_advice'], 'Consult local agricultural expert')


@mock.patch('advisoryApp.ai_client.openai.OpenAI')
class AdvisoryClientTest(SimpleTestCase):
    def test_answer_question_sends_expert_prompt(self, mock_openai):
        create = mock_openai.return_value.chat.completions.create
        create.return_value = completion('Use drip irrigation.')

        answer = AdvisoryClient(api_key='k', chat_model='chat', vision_model='vision', timeout=5).answer_question(
            'How often should I water onions?', 'irrigation'
        )

        self.assertEqual(answer, 'Use drip irrigation.')
        kwargs = create.call_args.kwargs
        self.assertEqual(kwargs['model'], 'chat')
        self.assertEqual(kwargs['max_tokens'], 800)
        self.assertEqual(kwargs['temperature'], 0.7)
        self.assertEqual(
            kwargs['messages'][1]['content'],
            'Category: irrigation\nQuestion: How often should I water onions?'
        )

    def test_identify_pest_sends_image(self, mock_openai):
        create = mock_openai.return_value.chat.completions.create
        create.return_value = completion('{"identified": false}')

        AdvisoryClient(api_key='k', chat_model='chat', vision_model='vision', timeout=5).identify_pest(TINY_JPEG_URL)

        kwargs = create.call_args.kwargs
        self.assertEqual(kwargs['model'], 'vision')
        self.assertEqual(kwargs['max_tokens'], 1000)
        parts = kwargs['messages'][1]['content']
        self.assertIn('No additional description provided', parts[0]['text'])
        self.assertEqual(parts[1]['image_url']['url'], TINY_JPEG_URL)

    def test_rate_limit_is_translated(self, mock_openai):
        mock_openai.return_value.chat.completions.create.side_effect = rate_limit_error()

        with self.assertRaises(AdvisoryRateLimited):
            AdvisoryClient(api_key='k', timeout=5).answer_question('Any subsidy for drip?')

    def test_empty_answer_is_an_error(self, mock_openai):
        mock_openai.return_value.chat.completions.create.return_value = completion('')

        with self.assertRaises(AdvisoryServiceError):
            AdvisoryClient(api_key='k', timeout=5).answer_question('Any subsidy for drip?')


@override_settings(OPENAI_API_KEY='test-key')
class ExpertQueryApiTest(APITestCase):
    def setUp(self):
        self.farmer = CustomUser.objects.create_user(email='farmer@example.com', password='Farmer@2024')
        self.expert = CustomUser.objects.create_expert(email='expert@example.com', password='Expert@2024')
        self.client.force_authenticate(user=self.farmer)

    def test_plain_submission_stays_pending(self):
        response = self.client.post('/advisory/submit/', {
            'question': 'Which wheat variety suits late sowing?',
            'category': 'crop_management',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['data']['status'], 'pending')
        self.assertIsNone(response.data['aiResponse'])

    @mock.patch('advisoryApp.views.AdvisoryClient')
    def test_auto_answer_marks_answered(self, mock_client):
        mock_client.return_value.answer_question.return_value = 'Try HD-3059 for late sowing.'

        response = self.client.post('/advisory/submit/', {
            'question': 'Which wheat variety suits late sowing?',
            'auto_answer': True,
        }, format='json')

        query = ExpertQuery.objects.get()
        self.assertEqual(query.status, 'answered')
        self.assertEqual(query.expert_response, 'Try HD-3059 for late sowing.')
        self.assertIsNotNone(query.answered_at)
        self.assertEqual(response.data['aiResponse'], 'Try HD-3059 for late sowing.')

    @mock.patch('advisoryApp.views.AdvisoryClient')
    def test_rate_limit_leaves_query_pending(self, mock_client):
        mock_client.return_value.answer_question.side_effect = AdvisoryRateLimited('slow down')

        response = self.client.post('/advisory/submit/', {'question': 'Best time to sow cotton?', 'auto_answer': True}, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIn('reviewed manually', response.data['message'])
        self.assertEqual(ExpertQuery.objects.get().status, 'pending')

    @mock.patch('advisoryApp.views.AdvisoryClient')
    def test_ai_failure_leaves_query_pending(self, mock_client):
        mock_client.return_value.answer_question.side_effect = AdvisoryServiceError('boom')

        self.client.post('/advisory/submit/', {'question': 'Best time to sow cotton?', 'auto_answer': True}, format='json')

        query = ExpertQuery.objects.get()
        self.assertEqual(query.status, 'pending')
        self.assertIsNone(query.expert_response)

    def test_only_experts_answer(self):
        query = ExpertQuery.objects.create(user=self.farmer, question='Yellow leaves on rice?')

        response = self.client.post(f'/advisory/answer/{query.id}/', {'expert_response': 'Nitrogen deficiency'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

        self.client.force_authenticate(user=self.expert)
        self.assertEqual(self.client.get('/advisory/pending/').data['count'], 1)

        response = self.client.post(f'/advisory/answer/{query.id}/', {'expert_response': 'Nitrogen deficiency'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        query.refresh_from_db()
        self.assertEqual(query.status, 'answered')
        self.assertEqual(query.answered_by, self.expert)
        self.assertEqual(self.client.get('/advisory/pending/').data['count'], 0)

    def test_only_owner_deletes(self):
        query = ExpertQuery.objects.create(user=self.farmer, question='Yellow leaves on rice?')

        self.client.force_authenticate(user=self.expert)
        response = self.client.delete(f'/advisory/delete/{query.id}/')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class PestIdentificationApiTest(APITestCase):
    def setUp(self):
        self.media_root = tempfile.mkdtemp()
        self.settings_override = override_settings(OPENAI_API_KEY='test-key', MEDIA_ROOT=self.media_root)
        self.settings_override.enable()
        self.user = CustomUser.objects.create_user(email='farmer@example.com', password='Farmer@2024')
        self.crop = Crop.objects.create(user=self.user, crop_name='Cotton')
        self.client.force_authenticate(user=self.user)

    def tearDown(self):
        self.settings_override.disable()
        shutil.rmtree(self.media_root, ignore_errors=True)

    @mock.patch('advisoryApp.views.AdvisoryClient')
    def test_identify_from_base64(self, mock_client):
        mock_client.return_value.identify_pest.return_value = ANALYSIS

        response = self.client.post('/advisory/identify/', {
            'imageBase64': TINY_JPEG_URL,
            'description': 'Sticky leaves',
            'crop_id': self.crop.id,
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['aiAnalysis']['pest_name'], 'Aphids')
        report = PestReport.objects.get()
        self.assertEqual(report.severity, 'high')
        self.assertEqual(report.crop, self.crop)
        self.assertTrue(report.image.name.startswith('pest-images/'))
        with report.image.open('rb') as stored:
            self.assertEqual(stored.read(), TINY_JPEG)
        mock_client.return_value.identify_pest.assert_called_once_with(TINY_JPEG_URL, 'Sticky leaves')

    @mock.patch('advisoryApp.views.AdvisoryClient')
    def test_identify_from_upload(self, mock_client):
        mock_client.return_value.identify_pest.return_value = ANALYSIS
        upload = SimpleUploadedFile('leaf.jpg', TINY_JPEG, content_type='image/jpeg')

        response = self.client.post('/advisory/identify/', {'image': upload}, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        data_url = mock_client.return_value.identify_pest.call_args.args[0]
        self.assertEqual(data_url, TINY_JPEG_URL)

    def test_image_is_required(self):
        response = self.client.post('/advisory/identify/', {'description': 'No photo'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_bad_data_url_is_rejected(self):
        response = self.client.post('/advisory/identify/', {'imageBase64': 'not-a-data-url'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    @mock.patch('advisoryApp.views.AdvisoryClient')
    def test_ai_failure_returns_502_and_saves_nothing(self, mock_client):
        mock_client.return_value.identify_pest.side_effect = AdvisoryServiceError('Failed to get AI analysis')

        response = self.client.post('/advisory/identify/', {'imageBase64': TINY_JPEG_URL}, format='json')

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertFalse(PestReport.objects.exists())

    def test_missing_key_returns_503(self):
        with override_settings(OPENAI_API_KEY=''):
            response = self.client.post('/advisory/identify/', {'imageBase64': TINY_JPEG_URL}, format='json')
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)

    def test_report_status_update(self):
        report = PestReport.objects.create(user=self.user, ai_identification=ANALYSIS)

        response = self.client.patch(f'/advisory/reports/status/{report.id}/', {'status': 'resolved'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['pest_name'], 'Aphids')

        response = self.client.patch(f'/advisory/reports/status/{report.id}/', {'status': 'ignored'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
