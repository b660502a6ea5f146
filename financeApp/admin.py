from django.contrib import admin
from .models import Expense, RevenueRecord


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'category', 'amount', 'expense_date', 'crop']
    list_filter = ['category', 'expense_date']
    search_fields = ['description', 'user__email']
    date_hierarchy = 'expense_date'

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user', 'crop')


@admin.register(RevenueRecord)
class RevenueRecordAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'crop', 'quantity_sold', 'price_per_unit', 'total_amount', 'sale_date']
    list_filter = ['sale_date']
    search_fields = ['buyer_name', 'market_location', 'user__email']
    readonly_fields = ['total_amount', 'created_at']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user', 'crop')
