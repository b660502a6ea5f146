from django.urls import path
from . import views

urlpatterns = [
    # Expert consultation
    path('submit/', views.submit_query, name='submit_query'),
    path('my-queries/', views.get_user_queries, name='get_user_queries'),
    path('queries/<int:query_id>/', views.get_query_by_id, name='get_query_by_id'),
    path('answer/<int:query_id>/', views.answer_query, name='answer_query'),
    path('pending/', views.get_pending_queries, name='get_pending_queries'),
    path('delete/<int:query_id>/', views.delete_query, name='delete_query'),

    # Pest identification
    path('identify/', views.identify_pest, name='identify_pest'),
    path('reports/', views.get_user_reports, name='get_user_reports'),
    path('reports/<int:report_id>/', views.get_report_by_id, name='get_report_by_id'),
    path('reports/status/<int:report_id>/', views.update_report_status, name='update_report_status'),
    path('reports/delete/<int:report_id>/', views.delete_report, name='delete_report'),
]
