from django.urls import path
from . import views

urlpatterns = [
    path('create/', views.create_schedule, name='create_schedule'),
    path('my-schedules/', views.get_user_schedules, name='get_user_schedules'),
    path('running/', views.get_running_schedules, name='get_running_schedules'),
    path('<int:schedule_id>/', views.get_schedule_by_id, name='get_schedule_by_id'),
    path('update/<int:schedule_id>/', views.update_schedule, name='update_schedule'),
    path('toggle/<int:schedule_id>/', views.toggle_schedule, name='toggle_schedule'),
    path('delete/<int:schedule_id>/', views.delete_schedule, name='delete_schedule'),
]
