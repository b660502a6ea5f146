from django.db.models import Q

SORT_ORDERING = {
    'price-low': ['price', '-created_at', '-id'],
    'price-high': ['-price', '-created_at', '-id'],
    'newest': ['-created_at', '-id'],
}


def _is_unset(value):
    return not value or value == 'all'


def filter_listings(queryset, search=None, category=None, region=None, sort_by=None):
    """Narrow active listings by search text, category and region, then sort them."""
    queryset = queryset.filter(is_active=True)

    if search and search.strip():
        term = search.strip()
        queryset = queryset.filter(
            Q(title__icontains=term) |
            Q(description__icontains=term) |
            Q(crop_type__icontains=term)
        )

    if not _is_unset(category):
        queryset = queryset.filter(category=category)

    if not _is_unset(region):
        queryset = queryset.filter(region=region)

    return queryset.order_by(*SORT_ORDERING.get(sort_by, SORT_ORDERING['newest']))
