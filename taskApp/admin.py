from django.contrib import admin
from .models import Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ['id', 'title', 'user', 'crop_name', 'due_date', 'priority', 'status']
    list_filter = ['status', 'priority', 'due_date']
    search_fields = ['title', 'description', 'crop_name', 'user__email']
    readonly_fields = ['created_at', 'updated_at']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user')
