# urls.py
from django.urls import path
from . import views

urlpatterns = [
    # Main CRUD operations
    path('create/', views.create_crop, name='create_crop'),
    path('my-crops/', views.get_user_crops, name='get_user_crops'),
    path('<int:crop_id>/', views.get_crop_by_id, name='get_crop_by_id'),
    path('update/<int:crop_id>/', views.update_crop, name='update_crop'),
    path('delete/<int:crop_id>/', views.delete_crop, name='delete_crop'),

    # Cultivation guide
    path('guide/', views.list_crop_guides, name='list_crop_guides'),
    path('guide/my-crops/', views.get_my_crop_guides, name='get_my_crop_guides'),
    path('guide/<str:crop_name>/', views.get_crop_guide_detail, name='get_crop_guide_detail'),
]
