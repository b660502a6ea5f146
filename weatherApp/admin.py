from django.contrib import admin
from .models import WeatherAlert


@admin.register(WeatherAlert)
class WeatherAlertAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'alert_type', 'severity', 'is_read', 'created_at']
    list_filter = ['alert_type', 'severity', 'is_read']
    search_fields = ['message', 'user__email']
    readonly_fields = ['created_at']
