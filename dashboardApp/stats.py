from decimal import Decimal

from django.db.models import Sum

from cropApp.models import Crop
from financeApp.models import RevenueRecord
from irrigationApp.models import IrrigationSchedule
from weatherApp.models import WeatherAlert

IRRIGATION_PERCENT_PER_SCHEDULE = 20


def compute_dashboard_stats(user, today):
    """Headline numbers for the farmer's dashboard."""
    active_crops = Crop.objects.filter(user=user, status='planted').count()
    active_schedules = IrrigationSchedule.objects.filter(user=user, is_active=True).count()

    season_start = today.replace(month=1, day=1)
    season_revenue = RevenueRecord.objects.filter(
        user=user, sale_date__gte=season_start
    ).aggregate(total=Sum('total_amount'))['total'] or Decimal('0')

    active_alerts = WeatherAlert.objects.filter(user=user, is_read=False).count()

    return {
        'activeCrops': active_crops,
        'irrigationStatus': min(100, active_schedules * IRRIGATION_PERCENT_PER_SCHEDULE),
        'seasonRevenue': season_revenue,
        'activeAlerts': active_alerts,
    }
