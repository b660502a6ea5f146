from django.contrib import admin
from .models import IrrigationSchedule


@admin.register(IrrigationSchedule)
class IrrigationScheduleAdmin(admin.ModelAdmin):
    list_display = ['id', 'field_name', 'user', 'schedule_time', 'duration_minutes', 'frequency', 'is_active', 'last_irrigated']
    list_filter = ['frequency', 'is_active']
    search_fields = ['field_name', 'user__email']
    readonly_fields = ['last_irrigated', 'created_at', 'updated_at']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user', 'crop')
