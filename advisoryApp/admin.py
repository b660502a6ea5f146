from django.contrib import admin
from .models import ExpertQuery, PestReport


@admin.register(ExpertQuery)
class ExpertQueryAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'category', 'status', 'answered_by', 'created_at', 'answered_at']
    list_filter = ['status', 'category']
    search_fields = ['question', 'expert_response', 'user__email']
    readonly_fields = ['created_at']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user', 'answered_by')


@admin.register(PestReport)
class PestReportAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'crop', 'pest_name', 'severity', 'status', 'created_at']
    list_filter = ['severity', 'status']
    search_fields = ['user_description', 'user__email']
    readonly_fields = ['ai_identification', 'created_at', 'updated_at']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user', 'crop')
