from django.urls import path
from . import views

urlpatterns = [
    path('current/', views.get_current_weather, name='get_current_weather'),
    path('alerts/', views.get_user_alerts, name='get_user_alerts'),
    path('alerts/read/<int:alert_id>/', views.mark_alert_read, name='mark_alert_read'),
    path('alerts/read-all/', views.mark_all_alerts_read, name='mark_all_alerts_read'),
    path('alerts/delete/<int:alert_id>/', views.delete_alert, name='delete_alert'),
]
