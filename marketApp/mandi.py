"""
Simulated mandi (APMC market) prices.

Prices are a fixed base per commodity scaled by a state multiplier and a
district multiplier. Unknown states and districts fall back to 1.0.
"""
from backend.utils import round_half_up

DEFAULT_STATE = 'Maharashtra'
DEFAULT_DISTRICT = 'Pune'

STATE_MULTIPLIERS = {
    'Maharashtra': 1.0,
    'Punjab': 1.15,
    'Haryana': 1.12,
    'Uttar Pradesh': 0.95,
    'Rajasthan': 0.98,
    'Karnataka': 1.05,
    'Tamil Nadu': 1.08,
    'Andhra Pradesh': 1.03,
}

DISTRICT_MULTIPLIERS = {
    'Maharashtra': {'Mumbai': 1.2, 'Pune': 1.0, 'Nashik': 0.9, 'Kolhapur': 0.85, 'Akola': 0.8},
    'Punjab': {'Ludhiana': 1.1, 'Amritsar': 1.0, 'Jalandhar': 0.95, 'Patiala': 0.9},
    'Haryana': {'Gurugram': 1.15, 'Faridabad': 1.1, 'Karnal': 0.9, 'Hisar': 0.85},
    'Uttar Pradesh': {'Lucknow': 1.0, 'Kanpur': 0.95, 'Agra': 0.9, 'Meerut': 0.92},
    'Rajasthan': {'Jaipur': 1.0, 'Jodhpur': 0.9, 'Kota': 0.85, 'Udaipur': 0.88},
    'Karnataka': {'Bangalore': 1.1, 'Mysore': 0.95, 'Hubli': 0.9, 'Mangalore': 1.05},
    'Tamil Nadu': {'Chennai': 1.1, 'Coimbatore': 1.0, 'Madurai': 0.9, 'Salem': 0.85},
    'Andhra Pradesh': {'Visakhapatnam': 1.05, 'Vijayawada': 1.0, 'Guntur': 0.95, 'Tirupati': 0.9},
}

# District names are unique across states, so the lookup ignores the state.
_DISTRICT_LOOKUP = {
    district: multiplier
    for districts in DISTRICT_MULTIPLIERS.values()
    for district, multiplier in districts.items()
}

BASE_COMMODITIES = [
    {'name': 'Wheat', 'variety': 'HD-2967', 'base_price': 2215, 'unit': 'per quintal', 'trend': 'up', 'change': '+2.5%'},
    {'name': 'Rice', 'variety': 'Common', 'base_price': 3975, 'unit': 'per quintal', 'trend': 'stable', 'change': '0%'},
    {'name': 'Onion', 'variety': 'Red', 'base_price': 1325, 'unit': 'per quintal', 'trend': 'down', 'change': '-5.2%'},
    {'name': 'Tomato', 'variety': 'Hybrid', 'base_price': 1000, 'unit': 'per quintal', 'trend': 'up', 'change': '+12.5%'},
    {'name': 'Cotton', 'variety': 'Kapas', 'base_price': 7000, 'unit': 'per quintal', 'trend': 'up', 'change': '+3.8%'},
    {'name': 'Sugarcane', 'variety': 'Common', 'base_price': 330, 'unit': 'per quintal', 'trend': 'stable', 'change': '+0.5%'},
]

STATE_COMMODITIES = {
    'Punjab': [
        {'name': 'Basmati Rice', 'variety': 'Pusa-1121', 'base_price': 4500, 'unit': 'per quintal', 'trend': 'up', 'change': '+5.2%'},
    ],
    'Maharashtra': [
        {'name': 'Grapes', 'variety': 'Thompson Seedless', 'base_price': 8000, 'unit': 'per quintal', 'trend': 'up', 'change': '+8.5%'},
    ],
    'Karnataka': [
        {'name': 'Coffee', 'variety': 'Arabica', 'base_price': 12000, 'unit': 'per quintal', 'trend': 'stable', 'change': '+1.2%'},
    ],
    'Tamil Nadu': [
        {'name': 'Coconut', 'variety': 'Hybrid', 'base_price': 2500, 'unit': 'per 1000 nuts', 'trend': 'up', 'change': '+6.8%'},
    ],
}


def price_multiplier(state, district):
    return STATE_MULTIPLIERS.get(state, 1.0) * _DISTRICT_LOOKUP.get(district, 1.0)


def get_location_specific_prices(state, district, today):
    multiplier = price_multiplier(state, district)
    commodities = BASE_COMMODITIES + STATE_COMMODITIES.get(state, [])

    prices = []
    for commodity in commodities:
        modal_price = round_half_up(commodity['base_price'] * multiplier)
        prices.append({
            'commodity': commodity['name'],
            'variety': commodity['variety'],
            'market': f"{district} APMC",
            'minPrice': round_half_up(modal_price * 0.85),
            'maxPrice': round_half_up(modal_price * 1.15),
            'modalPrice': modal_price,
            'unit': commodity['unit'],
            'date': today.isoformat(),
            'trend': commodity['trend'],
            'change': commodity['change'],
        })
    return prices


def change_value(price):
    """'+12.5%' -> 12.5"""
    return float(price['change'].rstrip('%'))


def build_market_insights(prices):
    gainers = [price for price in prices if price['trend'] == 'up']
    losers = [price for price in prices if price['trend'] == 'down']

    return {
        'topGainers': sorted(gainers, key=change_value, reverse=True)[:3],
        'topLosers': sorted(losers, key=change_value)[:3],
        'marketSummary': {
            'totalCommodities': len(prices),
            'trending': len(gainers),
            'declining': len(losers),
            'stable': len([price for price in prices if price['trend'] == 'stable']),
        },
    }
