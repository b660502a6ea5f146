from django.urls import path
from . import views

urlpatterns = [
    path('schemes/', views.get_schemes, name='get_schemes'),
    path('schemes/categories/', views.get_scheme_categories, name='get_scheme_categories'),
    path('schemes/<int:scheme_id>/', views.get_scheme_detail, name='get_scheme_detail'),
    path('videos/', views.get_videos, name='get_videos'),
]
