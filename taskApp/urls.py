from django.urls import path
from . import views

urlpatterns = [
    path('create/', views.create_task, name='create_task'),
    path('my-tasks/', views.get_user_tasks, name='get_user_tasks'),
    path('<int:task_id>/', views.get_task_by_id, name='get_task_by_id'),
    path('update/<int:task_id>/', views.update_task, name='update_task'),
    path('status/<int:task_id>/', views.update_task_status, name='update_task_status'),
    path('delete/<int:task_id>/', views.delete_task, name='delete_task'),
]
