import json
import shutil
import tempfile
from pathlib import Path

from django.test import SimpleTestCase
from rest_framework import status
from rest_framework.test import APITestCase

from userApp.models import CustomUser
from .translator import Translator, SUPPORTED_LANGUAGES


class TranslatorTest(SimpleTestCase):
    def setUp(self):
        self.locale_dir = Path(tempfile.mkdtemp())
        (self.locale_dir / 'en.json').write_text(json.dumps({
            'weather': {'title': 'Weather', 'stats': {'count': 3}},
        }), encoding='utf-8')
        (self.locale_dir / 'hi.json').write_text(json.dumps({
            'weather': {'title': 'मौसम'},
        }), encoding='utf-8')
        (self.locale_dir / 'ta.json').write_text('{not json', encoding='utf-8')

    def tearDown(self):
        shutil.rmtree(self.locale_dir, ignore_errors=True)

    def test_nested_lookup(self):
        self.assertEqual(Translator('hi', locale_dir=self.locale_dir).t('weather.title'), 'मौसम')

    def test_missing_or_non_string_returns_key(self):
        translator = Translator('en', locale_dir=self.locale_dir)

        self.assertEqual(translator.t('weather.wind'), 'weather.wind')
        self.assertEqual(translator.t('weather'), 'weather')
        self.assertEqual(translator.t('weather.stats.count'), 'weather.stats.count')
        self.assertEqual(translator.t('weather.title.extra'), 'weather.title.extra')

    def test_missing_or_invalid_file_falls_back_to_english(self):
        missing = Translator('te', locale_dir=self.locale_dir)
        invalid = Translator('ta', locale_dir=self.locale_dir)

        self.assertEqual(missing.language, 'en')
        self.assertEqual(invalid.t('weather.title'), 'Weather')

    def test_unsupported_language(self):
        with self.assertRaises(ValueError):
            Translator('fr', locale_dir=self.locale_dir)

    def test_shipped_dictionaries_load(self):
        self.assertEqual(SUPPORTED_LANGUAGES, ['en', 'hi', 'pu', 'mr', 'ta', 'te'])
        self.assertEqual(Translator('en').t('dashboard.stats.activeCrops'), 'Active Crops')
        self.assertEqual(Translator('hi').language, 'hi')


class LanguageApiTest(APITestCase):
    def setUp(self):
        self.user = CustomUser.objects.create_user(email='farmer@example.com', password='Farmer@2024')

    def test_translation_dictionary(self):
        response = self.client.get('/language/translations/hi/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['translations']['navigation']['market'], 'बाज़ार')

        self.assertEqual(self.client.get('/language/translations/xx/').status_code, status.HTTP_404_NOT_FOUND)

    def test_translate_uses_profile_language(self):
        self.client.force_authenticate(user=self.user)
        self.client.put('/language/preference/', {'language': 'hi'}, format='json')

        response = self.client.post('/language/translate/', {'keys': ['weather.title', 'no.such.key']}, format='json')

        self.assertEqual(response.data['language'], 'hi')
        self.assertEqual(response.data['data'], {'weather.title': 'मौसम', 'no.such.key': 'no.such.key'})

    def test_explicit_language_wins(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.post('/language/translate/', {'keys': ['weather.title'], 'language': 'en'}, format='json')
        self.assertEqual(response.data['data']['weather.title'], 'Weather')

    def test_invalid_preference(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.put('/language/preference/', {'language': 'fr'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
