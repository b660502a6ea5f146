"""
Thin client for the OpenWeatherMap current weather and 5 day / 3 hour
forecast endpoints.
"""
import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

BASE_URL = 'https://api.openweathermap.org/data/2.5'


class WeatherServiceError(Exception):
    """Raised when OpenWeatherMap cannot be reached or answers with an error."""


class OpenWeatherClient:
    def __init__(self, api_key=None, timeout=None):
        self.api_key = api_key if api_key is not None else settings.OPENWEATHERMAP_API_KEY
        self.timeout = timeout or settings.EXTERNAL_API_TIMEOUT

    def _get(self, endpoint, location):
        params = {'q': location, 'appid': self.api_key, 'units': 'metric'}
        try:
            response = requests.get(f"{BASE_URL}/{endpoint}", params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            logger.error("OpenWeatherMap %s request failed: %s", endpoint, exc)
            raise WeatherServiceError(f"Weather service unavailable: {exc}") from exc

        if response.status_code != 200:
            try:
                detail = response.json().get('message', 'Unknown error')
            except ValueError:
                detail = response.text or 'Unknown error'
            logger.warning("OpenWeatherMap %s returned %s: %s", endpoint, response.status_code, detail)
            raise WeatherServiceError(f"Weather API error: {detail}")

        try:
            return response.json()
        except ValueError as exc:
            logger.error("OpenWeatherMap %s returned a non-JSON body", endpoint)
            raise WeatherServiceError("Weather API returned an invalid response") from exc

    def current(self, location):
        return self._get('weather', location)

    def forecast(self, location):
        return self._get('forecast', location)
