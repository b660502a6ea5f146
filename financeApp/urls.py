from django.urls import path
from . import views

urlpatterns = [
    # Expenses
    path('expenses/create/', views.create_expense, name='create_expense'),
    path('expenses/my-expenses/', views.get_user_expenses, name='get_user_expenses'),
    path('expenses/update/<int:expense_id>/', views.update_expense, name='update_expense'),
    path('expenses/delete/<int:expense_id>/', views.delete_expense, name='delete_expense'),
    path('expenses/categories/', views.get_expense_categories, name='get_expense_categories'),
    path('expenses/summary/', views.get_expense_summary, name='get_expense_summary'),

    # Revenue
    path('revenue/create/', views.create_revenue, name='create_revenue'),
    path('revenue/my-revenue/', views.get_user_revenue, name='get_user_revenue'),
    path('revenue/delete/<int:revenue_id>/', views.delete_revenue, name='delete_revenue'),
    path('revenue/summary/', views.get_revenue_summary, name='get_revenue_summary'),
]
