from django.urls import path
from .views import (
    register_user,
    login_user,
    logout_user,
    get_logged_in_user,
    get_profile,
    update_profile,
    update_settings,
)

urlpatterns = [
    path('register/', register_user, name='register_user'),
    path('login/', login_user, name='login_user'),
    path('logout/', logout_user, name='logout_user'),
    path('user/', get_logged_in_user, name='get-logged-in-user'),

    # Farm profile & preferences
    path('profile/', get_profile, name='get_profile'),
    path('profile/update/', update_profile, name='update_profile'),
    path('settings/', update_settings, name='update_settings'),
]
