"""Static catalogue of central and state government schemes for farmers."""

MINISTRY_OF_AGRICULTURE = 'Ministry of Agriculture & Farmers Welfare'

SCHEMES = [
    {
        'id': 1,
        'name': 'PM-KISAN Samman Nidhi',
        'description': 'Direct income support to small and marginal farmers',
        'category': 'Financial Support',
        'eligibility': 'Small and marginal farmers with cultivable land',
        'benefits': '₹6,000 per year in three installments',
        'applicationProcess': 'Online application through PM-KISAN portal',
        'deadline': 'Ongoing',
        'authority': MINISTRY_OF_AGRICULTURE,
        'status': 'active',
        'link': 'https://pmkisan.gov.in',
    },
    {
        'id': 2,
        'name': 'Crop Insurance Scheme (PMFBY)',
        'description': 'Comprehensive insurance coverage for crops',
        'category': 'Insurance',
        'eligibility': 'All farmers (loanee and non-loanee)',
        'benefits': 'Premium subsidy up to 90% for small farmers',
        'applicationProcess': 'Through banks or CSCs',
        'deadline': 'Before sowing season',
        'authority': MINISTRY_OF_AGRICULTURE,
        'status': 'active',
        'link': 'https://pmfby.gov.in',
    },
    {
        'id': 3,
        'name': 'Soil Health Card Scheme',
        'description': 'Free soil testing and nutrient management advice',
        'category': 'Soil Management',
        'eligibility': 'All farmers',
        'benefits': 'Free soil testing and fertilizer recommendations',
        'applicationProcess': 'Contact local agriculture office',
        'deadline': 'Ongoing',
        'authority': 'State Agriculture Department',
        'status': 'active',
        'link': 'https://soilhealth.dac.gov.in',
    },
    {
        'id': 4,
        'name': 'MGNREGA',
        'description': 'Rural employment guarantee scheme',
        'category': 'Employment',
        'eligibility': 'Rural households willing to do manual work',
        'benefits': '100 days guaranteed employment per year',
        'applicationProcess': 'Apply at Gram Panchayat',
        'deadline': 'Ongoing',
        'authority': 'Ministry of Rural Development',
        'status': 'active',
        'link': 'https://nrega.nic.in',
    },
    {
        'id': 5,
        'name': 'Kisan Credit Card',
        'description': 'Easy access to credit for farming needs',
        'category': 'Credit',
        'eligibility': 'Farmers with land records',
        'benefits': 'Flexible credit up to ₹3 lakhs at 4% interest',
        'applicationProcess': 'Apply at any bank branch',
        'deadline': 'Ongoing',
        'authority': 'Banking System',
        'status': 'active',
        'link': 'https://www.india.gov.in/spotlight/kisan-credit-card-kcc',
    },
    {
        'id': 6,
        'name': 'National Agriculture Market (e-NAM)',
        'description': 'Online trading platform for agricultural commodities',
        'category': 'Marketing',
        'eligibility': 'All farmers and traders',
        'benefits': 'Better price discovery and transparent trading',
        'applicationProcess': 'Online registration on e-NAM portal',
        'deadline': 'Ongoing',
        'authority': MINISTRY_OF_AGRICULTURE,
        'status': 'active',
        'link': 'https://enam.gov.in',
    },
]

ALL_CATEGORIES = 'All'

SCHEME_CATEGORIES = [
    'Financial Support',
    'Insurance',
    'Credit',
    'Soil Management',
    'Employment',
    'Marketing',
]


def filter_schemes(search=None, category=None):
    schemes = SCHEMES

    if category and category != ALL_CATEGORIES:
        schemes = [scheme for scheme in schemes if scheme['category'] == category]

    if search and search.strip():
        term = search.strip().lower()
        schemes = [
            scheme for scheme in schemes
            if term in scheme['name'].lower()
            or term in scheme['description'].lower()
            or term in scheme['category'].lower()
        ]

    return schemes


def get_scheme(scheme_id):
    for scheme in SCHEMES:
        if scheme['id'] == scheme_id:
            return scheme
    return None


def category_stats():
    return [
        {
            'name': category,
            'count': len([scheme for scheme in SCHEMES if scheme['category'] == category]),
        }
        for category in SCHEME_CATEGORIES
    ]
