from django.contrib import admin
from .models import Crop


@admin.register(Crop)
class CropAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'crop_name', 'variety', 'status', 'planting_date', 'expected_harvest_date']
    list_filter = ['status', 'crop_name', 'planting_date']
    search_fields = ['crop_name', 'variety', 'location_field', 'user__email']
    readonly_fields = ['created_at', 'updated_at']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user')
