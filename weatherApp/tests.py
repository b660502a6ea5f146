from unittest import mock

import requests
from django.test import SimpleTestCase, override_settings
from rest_framework import status
from rest_framework.test import APITestCase

from userApp.models import CustomUser
from .models import WeatherAlert
from .openweather import OpenWeatherClient, WeatherServiceError
from .reports import build_daily_forecast, build_weather_report, derive_alerts

# 2025-06-01 00:00:00 UTC, a Sunday
JUNE_FIRST = 1748736000


def forecast_item(offset_hours, temp=28.4, main='Clear', description='clear sky'):
    return {
        'dt': JUNE_FIRST + offset_hours * 3600,
        'main': {'temp': temp},
        'weather': [{'main': main, 'description': description}],
    }


def current_payload(temp=30.2, humidity=60, wind=3.0, main='Clouds'):
    return {
        'name': 'Pune',
        'main': {'temp': temp, 'humidity': humidity, 'pressure': 1008},
        'wind': {'speed': wind},
        'weather': [{'main': main, 'description': 'scattered clouds'}],
    }


class ForecastTest(SimpleTestCase):
    def test_one_entry_per_day_capped_at_five(self):
        items = [forecast_item(hours) for hours in range(0, 6 * 24, 3)]
        daily = build_daily_forecast(items)

        self.assertEqual([day['day'] for day in daily], ['Today', 'Tomorrow', 'Tue', 'Wed', 'Thu'])

    def test_first_reading_of_each_day_is_used(self):
        items = [
            forecast_item(21, temp=24.5, main='Rain', description='light rain'),
            forecast_item(24, temp=19.4),
            forecast_item(27, temp=33.0),
        ]
        daily = build_daily_forecast(items)

        self.assertEqual(len(daily), 2)
        self.assertEqual(daily[0], {'day': 'Today', 'temp': 25, 'icon': 'rain', 'description': 'light rain'})
        self.assertEqual(daily[1]['temp'], 19)

    def test_readings_without_temperature_are_skipped(self):
        items = [
            {'dt': JUNE_FIRST, 'weather': [{'main': 'Clear', 'description': 'clear sky'}]},
            forecast_item(3, temp=27.6),
            forecast_item(24, temp=21.2),
        ]
        daily = build_daily_forecast(items)

        self.assertEqual([(day['day'], day['temp']) for day in daily], [('Today', 28), ('Tomorrow', 21)])


class AlertDerivationTest(SimpleTestCase):
    def test_calm_weather_has_no_alerts(self):
        self.assertEqual(derive_alerts(current_payload(), [forecast_item(0)]), [])

    def test_all_thresholds_in_order(self):
        current = current_payload(temp=36.5, humidity=85, wind=16)
        items = [forecast_item(hours) for hours in range(0, 21, 3)] + [forecast_item(21, main='Rain')]

        alerts = derive_alerts(current, items)
        self.assertEqual(
            [alert['type'] for alert in alerts],
            ['high_humidity', 'heat_wave', 'strong_wind', 'rain_forecast']
        )

    def test_rain_beyond_24_hours_is_ignored(self):
        items = [forecast_item(hours) for hours in range(0, 24, 3)] + [forecast_item(24, main='Rain')]
        self.assertEqual(derive_alerts(current_payload(), items), [])

    def test_thresholds_are_exclusive(self):
        self.assertEqual(derive_alerts(current_payload(temp=35, humidity=80, wind=15), []), [])

    def test_report_converts_wind_to_kmh(self):
        report = build_weather_report(current_payload(wind=4.2), {'list': []})

        self.assertEqual(report['current']['windSpeed'], 15)
        self.assertEqual(report['current']['temperature'], 30)
        self.assertEqual(report['current']['icon'], 'clouds')
        self.assertEqual(report['forecast'], [])


class OpenWeatherClientTest(SimpleTestCase):
    @mock.patch('weatherApp.openweather.requests.get')
    def test_sends_metric_query(self, mock_get):
        mock_get.return_value.status_code = 200
        mock_get.return_value.json.return_value = current_payload()

        OpenWeatherClient(api_key='abc', timeout=5).current('Nashik,IN')

        args, kwargs = mock_get.call_args
        self.assertTrue(args[0].endswith('/data/2.5/weather'))
        self.assertEqual(kwargs['params'], {'q': 'Nashik,IN', 'appid': 'abc', 'units': 'metric'})
        self.assertEqual(kwargs['timeout'], 5)

    @mock.patch('weatherApp.openweather.requests.get')
    def test_error_status_raises(self, mock_get):
        mock_get.return_value.status_code = 404
        mock_get.return_value.json.return_value = {'message': 'city not found'}

        with self.assertRaisesMessage(WeatherServiceError, 'city not found'):
            OpenWeatherClient(api_key='abc', timeout=5).forecast('Atlantis')

    @mock.patch('weatherApp.openweather.requests.get', side_effect=requests.exceptions.ConnectTimeout('slow'))
    def test_transport_failure_raises(self, mock_get):
        with self.assertRaises(WeatherServiceError):
            OpenWeatherClient(api_key='abc', timeout=5).current('Pune,IN')

    @mock.patch('weatherApp.openweather.requests.get')
    def test_non_json_body_raises(self, mock_get):
        mock_get.return_value.status_code = 200
        mock_get.return_value.json.side_effect = ValueError('Expecting value')

        with self.assertRaises(WeatherServiceError):
            OpenWeatherClient(api_key='abc', timeout=5).current('Pune,IN')


@override_settings(OPENWEATHERMAP_API_KEY='test-key', DEFAULT_WEATHER_LOCATION='Pune,IN')
class WeatherApiTest(APITestCase):
    def setUp(self):
        self.user = CustomUser.objects.create_user(email='farmer@example.com', password='Farmer@2024')
        self.client.force_authenticate(user=self.user)

    def mock_client(self, mock_cls, current=None, forecast=None):
        instance = mock_cls.return_value
        instance.current.return_value = current or current_payload(humidity=90)
        instance.forecast.return_value = forecast or {'list': [forecast_item(0)]}
        return instance

    @mock.patch('weatherApp.views.OpenWeatherClient')
    def test_uses_profile_location_then_default(self, mock_cls):
        instance = self.mock_client(mock_cls)

        self.client.get('/weather/current/')
        instance.current.assert_called_with('Pune,IN')

        profile = self.user.profile
        profile.location = 'Nashik'
        profile.save()
        self.client.get('/weather/current/')
        instance.current.assert_called_with('Nashik')

        self.client.post('/weather/current/', {'location': 'Akola'}, format='json')
        instance.current.assert_called_with('Akola')

    @mock.patch('weatherApp.views.OpenWeatherClient')
    def test_alerts_are_stored_without_duplicating_unread(self, mock_cls):
        self.mock_client(mock_cls)

        response = self.client.get('/weather/current/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['alerts'][0]['type'], 'high_humidity')

        self.client.get('/weather/current/')
        self.assertEqual(WeatherAlert.objects.filter(user=self.user).count(), 1)

        WeatherAlert.objects.update(is_read=True)
        self.client.get('/weather/current/')
        self.assertEqual(WeatherAlert.objects.filter(user=self.user).count(), 2)

    @mock.patch('weatherApp.views.OpenWeatherClient')
    def test_upstream_failure_returns_502(self, mock_cls):
        mock_cls.return_value.current.side_effect = WeatherServiceError('Weather API error: city not found')

        response = self.client.get('/weather/current/', {'location': 'Atlantis'})
        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)

    @mock.patch('weatherApp.openweather.requests.get')
    def test_non_json_upstream_body_returns_502(self, mock_get):
        mock_get.return_value.status_code = 200
        mock_get.return_value.json.side_effect = ValueError('Expecting value')

        response = self.client.get('/weather/current/')
        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertFalse(WeatherAlert.objects.exists())

    @override_settings(OPENWEATHERMAP_API_KEY='')
    def test_missing_key_returns_503(self):
        response = self.client.get('/weather/current/')
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)

    def test_alert_read_flow(self):
        first = WeatherAlert.objects.create(user=self.user, alert_type='heat_wave', message='Hot', severity='high')
        WeatherAlert.objects.create(user=self.user, alert_type='strong_wind', message='Windy', severity='medium')

        self.client.patch(f'/weather/alerts/read/{first.id}/')
        response = self.client.get('/weather/alerts/', {'unread': 'true'})
        self.assertEqual(response.data['count'], 1)

        response = self.client.post('/weather/alerts/read-all/')
        self.assertEqual(response.data['count'], 1)
        self.assertEqual(self.client.get('/weather/alerts/', {'unread': 'true'}).data['count'], 0)

        response = self.client.delete(f'/weather/alerts/delete/{first.id}/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(WeatherAlert.objects.count(), 1)
