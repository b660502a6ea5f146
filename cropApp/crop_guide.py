"""
Static cultivation guide for the crops farmers pick as their primary crops.

Seasons follow the Indian cropping calendar: Kharif (monsoon, April-September)
and Rabi (winter, October-March).
"""

KHARIF = 'Kharif (Monsoon Season)'
RABI = 'Rabi (Winter Season)'

CROP_GUIDE = {
    'Wheat': {
        'name': 'Wheat',
        'seasons': ['Rabi (October-April)', 'Winter'],
        'planting_time': 'October-December',
        'harvest_time': 'March-April',
        'water_requirement': 'Medium (450-650mm)',
        'soil_type': ['Loamy', 'Clay Loam', 'Sandy Loam'],
        'temperature': '15-25°C during growth, 21-26°C during grain filling',
        'spacing': '20-22.5 cm between rows',
        'fertilizer': ['NPK 120:60:40 kg/ha', 'Urea', 'DAP', 'Muriate of Potash'],
        'diseases': ['Rust', 'Smut', 'Bunt', 'Powdery Mildew'],
        'pests': ['Aphids', 'Termites', 'Army Worm'],
        'best_practices': [
            'Use certified seeds for better yield',
            'Ensure proper field preparation with deep plowing',
            'Maintain optimal soil moisture during grain filling',
            'Apply fertilizers in split doses',
            'Practice crop rotation with legumes',
            'Monitor for pest and disease outbreaks regularly',
        ],
        'yield': '25-30 quintals per hectare',
        'market_price': '₹2000-2200 per quintal',
        'irrigation_frequency': 'Every 15-20 days',
        'irrigation_method': ['Furrow irrigation', 'Sprinkler', 'Drip (advanced)'],
    },
    'Rice': {
        'name': 'Rice',
        'seasons': ['Kharif (June-November)', 'Monsoon'],
        'planting_time': 'June-July',
        'harvest_time': 'October-November',
        'water_requirement': 'High (1200-1300mm)',
        'soil_type': ['Clay', 'Clay Loam', 'Silty Clay'],
        'temperature': '25-35°C during growth',
        'spacing': '20x15 cm for transplanting',
        'fertilizer': ['NPK 100:50:50 kg/ha', 'Urea', 'Single Super Phosphate'],
        'diseases': ['Blast', 'Bacterial Leaf Blight', 'Sheath Blight'],
        'pests': ['Brown Plant Hopper', 'Stem Borer', 'Leaf Folder'],
        'best_practices': [
            'Prepare nursery 25-30 days before transplanting',
            'Maintain 2-3 cm standing water in field',
            'Transplant 25-30 day old seedlings',
            'Apply organic matter to improve soil health',
            'Practice SRI (System of Rice Intensification) for better yield',
            'Ensure proper drainage during harvest',
        ],
        'yield': '40-50 quintals per hectare',
        'market_price': '₹2100-2300 per quintal',
        'irrigation_frequency': 'Continuous flooding (2-3 cm water)',
        'irrigation_method': ['Flood irrigation', 'Controlled flooding', 'AWD (Alternate Wetting and Drying)'],
    },
    'Cotton': {
        'name': 'Cotton',
        'seasons': ['Kharif (April-October)', 'Summer'],
        'planting_time': 'April-May',
        'harvest_time': 'October-February (multiple picks)',
        'water_requirement': 'Medium (600-800mm)',
        'soil_type': ['Black Cotton Soil', 'Alluvial', 'Sandy Loam'],
        'temperature': '21-30°C optimal',
        'spacing': '90x45 cm or 67.5x30 cm',
        'fertilizer': ['NPK 80:40:40 kg/ha', 'Urea', 'DAP', 'MOP'],
        'diseases': ['Wilt', 'Leaf Curl Virus', 'Boll Rot'],
        'pests': ['Bollworm', 'Aphids', 'Thrips', 'White Fly'],
        'best_practices': [
            'Use Bt cotton varieties for bollworm resistance',
            'Practice deep summer plowing',
            'Maintain proper plant population',
            'Regular monitoring for pink bollworm',
            'Use pheromone traps for pest management',
            'Ensure proper picking schedule for quality',
        ],
        'yield': '15-20 quintals per hectare',
        'market_price': '₹5500-6500 per quintal',
        'irrigation_frequency': 'Every 10-15 days',
        'irrigation_method': ['Drip irrigation', 'Furrow irrigation', 'Sprinkler'],
    },
    'Tomato': {
        'name': 'Tomato',
        'seasons': ['Rabi (October-March)', 'Summer (February-June)'],
        'planting_time': 'Nursery: August-September (Rabi), January (Summer)',
        'harvest_time': '90-120 days after transplanting',
        'water_requirement': 'Medium-High (600-800mm)',
        'soil_type': ['Well-drained Loamy', 'Sandy Loam'],
        'temperature': '20-25°C optimal, max 32°C',
        'spacing': '60x45 cm or 75x45 cm',
        'fertilizer': ['NPK 150:100:100 kg/ha', 'Compost', 'Calcium'],
        'diseases': ['Early Blight', 'Late Blight', 'Leaf Curl Virus', 'Wilt'],
        'pests': ['Fruit Borer', 'Aphids', 'Whitefly', 'Thrips'],
        'best_practices': [
            'Use disease-resistant varieties',
            'Ensure proper staking and support',
            'Maintain consistent soil moisture',
            'Apply mulching to conserve moisture',
            'Regular pruning of suckers',
            'Harvest at proper maturity stage',
        ],
        'yield': '250-400 quintals per hectare',
        'market_price': '₹800-1500 per quintal',
        'irrigation_frequency': 'Every 3-5 days',
        'irrigation_method': ['Drip irrigation', 'Sprinkler', 'Basin irrigation'],
    },
    'Onion': {
        'name': 'Onion',
        'seasons': ['Rabi (November-April)', 'Kharif (June-November)'],
        'planting_time': 'October-November (Rabi), June-July (Kharif)',
        'harvest_time': '120-150 days after transplanting',
        'water_requirement': 'Medium (500-700mm)',
        'soil_type': ['Well-drained Loamy', 'Sandy Loam', 'Alluvial'],
        'temperature': '15-25°C for bulb development',
        'spacing': '15x10 cm',
        'fertilizer': ['NPK 100:50:50 kg/ha', 'FYM', 'Sulphur'],
        'diseases': ['Purple Blotch', 'Downy Mildew', 'Neck Rot'],
        'pests': ['Thrips', 'Cutworm', 'Onion Fly'],
        'best_practices': [
            'Use quality transplants (6-8 weeks old)',
            'Ensure proper field drainage',
            'Apply sulphur for better bulb quality',
            'Stop irrigation 15-20 days before harvest',
            'Proper curing after harvest',
            'Grade according to size for better price',
        ],
        'yield': '200-300 quintals per hectare',
        'market_price': '₹1000-2000 per quintal',
        'irrigation_frequency': 'Every 7-10 days',
        'irrigation_method': ['Furrow irrigation', 'Drip irrigation', 'Sprinkler'],
    },
    'Potato': {
        'name': 'Potato',
        'seasons': ['Rabi (October-March)', 'Winter'],
        'planting_time': 'October-November',
        'harvest_time': 'January-March',
        'water_requirement': 'Medium (500-700mm)',
        'soil_type': ['Sandy Loam', 'Loamy', 'Well-drained'],
        'temperature': '15-20°C optimal',
        'spacing': '60x20 cm',
        'fertilizer': ['NPK 180:120:100 kg/ha', 'FYM', 'Potash'],
        'diseases': ['Late Blight', 'Early Blight', 'Black Scurf'],
        'pests': ['Aphids', 'Cut Worm', 'Potato Tuber Moth'],
        'best_practices': [
            'Use certified disease-free seed tubers',
            'Ensure proper earthing up',
            'Maintain ridge and furrow system',
            'Regular monitoring for late blight',
            'Harvest when skin is firm',
            'Proper storage to prevent greening',
        ],
        'yield': '200-250 quintals per hectare',
        'market_price': '₹800-1200 per quintal',
        'irrigation_frequency': 'Every 7-10 days',
        'irrigation_method': ['Furrow irrigation', 'Sprinkler', 'Drip irrigation'],
    },
}


def current_season(month):
    """Kharif runs April through September, everything else is Rabi."""
    if 4 <= month <= 9:
        return KHARIF
    return RABI


def season_recommendation(crop_info, month):
    season = current_season(month)
    marker = 'Kharif' if season == KHARIF else 'Rabi'
    is_optimal = any(marker in crop_season for crop_season in crop_info['seasons'])

    return {
        'current_season': season,
        'is_optimal': is_optimal,
        'message': (
            "Optimal time for this crop!"
            if is_optimal
            else "Consider planting during recommended season"
        ),
    }


def get_crop_guide(name):
    """Case-insensitive lookup; returns None for crops without a guide."""
    for crop_name, info in CROP_GUIDE.items():
        if crop_name.lower() == (name or '').strip().lower():
            return info
    return None


def guide_with_recommendation(crop_info, month):
    return {
        **crop_info,
        'recommendation': season_recommendation(crop_info, month),
    }
