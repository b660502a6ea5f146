# userApp/signals.py
from django.db.models.signals import post_save
from django.dispatch import receiver
from .models import CustomUser, Profile


@receiver(post_save, sender=CustomUser)
def create_profile_for_new_user(sender, instance, created, **kwargs):
    """
    Every account gets an empty farm profile on creation.
    """
    if created:
        Profile.objects.get_or_create(user=instance)
