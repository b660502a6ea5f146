from django.urls import path
from . import views

urlpatterns = [
    path('translations/<str:lang>/', views.get_translations, name='get_translations'),
    path('translate/', views.translate_keys, name='translate_keys'),
    path('preference/', views.update_language_preference, name='update_language_preference'),
]
