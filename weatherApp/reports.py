"""
Turns raw OpenWeatherMap payloads into the dashboard weather report and
the crop alerts derived from it.
"""
from datetime import datetime, timezone as dt_timezone

from backend.utils import round_half_up

MAX_FORECAST_ITEMS = 40
MAX_FORECAST_DAYS = 5
NEXT_24H_ITEMS = 8

HUMIDITY_THRESHOLD = 80
HEAT_THRESHOLD = 35
WIND_THRESHOLD = 15  # m/s


def _main_condition(item):
    weather = item.get('weather') or [{}]
    return (weather[0].get('main') or '').lower(), weather[0].get('description', '')


def build_daily_forecast(items):
    """One entry per UTC calendar date, first usable reading of the day, at most five days."""
    daily = []
    seen_dates = set()

    for item in items[:MAX_FORECAST_ITEMS]:
        if len(daily) >= MAX_FORECAST_DAYS:
            break

        temp = (item.get('main') or {}).get('temp')
        if item.get('dt') is None or temp is None:
            continue

        moment = datetime.fromtimestamp(item['dt'], tz=dt_timezone.utc)
        if moment.date() in seen_dates:
            continue
        seen_dates.add(moment.date())

        if len(daily) == 0:
            day = 'Today'
        elif len(daily) == 1:
            day = 'Tomorrow'
        else:
            day = moment.strftime('%a')

        icon, description = _main_condition(item)
        daily.append({
            'day': day,
            'temp': round_half_up(temp),
            'icon': icon,
            'description': description,
        })

    return daily


def derive_alerts(current, items):
    alerts = []
    main = current.get('main', {})
    temperature = main.get('temp', 0)
    humidity = main.get('humidity', 0)
    wind_speed = (current.get('wind') or {}).get('speed') or 0

    if humidity > HUMIDITY_THRESHOLD:
        alerts.append({
            'type': 'high_humidity',
            'message': 'High humidity detected. Monitor crops for fungal diseases.',
            'severity': 'warning',
        })

    if temperature > HEAT_THRESHOLD:
        alerts.append({
            'type': 'heat_wave',
            'message': 'Extreme heat warning. Increase irrigation frequency.',
            'severity': 'high',
        })

    if wind_speed > WIND_THRESHOLD:
        alerts.append({
            'type': 'strong_wind',
            'message': 'Strong winds expected. Secure crop supports.',
            'severity': 'medium',
        })

    if any('rain' in _main_condition(item)[0] for item in items[:NEXT_24H_ITEMS]):
        alerts.append({
            'type': 'rain_forecast',
            'message': 'Rain expected in next 24 hours. Adjust irrigation schedule.',
            'severity': 'info',
        })

    return alerts


def build_weather_report(current, forecast):
    items = forecast.get('list', [])
    main = current.get('main', {})
    icon, description = _main_condition(current)
    wind_speed = (current.get('wind') or {}).get('speed') or 0

    return {
        'current': {
            'location': current.get('name'),
            'temperature': round_half_up(main.get('temp', 0)),
            'condition': description,
            'humidity': main.get('humidity'),
            'windSpeed': round_half_up(wind_speed * 3.6),
            'pressure': main.get('pressure'),
            'icon': icon,
        },
        'forecast': build_daily_forecast(items),
        'alerts': derive_alerts(current, items),
    }
