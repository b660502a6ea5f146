# userApp/apps.py
from django.apps import AppConfig


class UserappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'userApp'
    verbose_name = 'Users & Profiles'

    def ready(self):
        import userApp.signals  # noqa: F401
