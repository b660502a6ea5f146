from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.utils.timezone import now


LANGUAGE_CHOICES = [
    ('en', 'English'),
    ('hi', 'Hindi'),
    ('pu', 'Punjabi'),
    ('mr', 'Marathi'),
    ('ta', 'Tamil'),
    ('te', 'Telugu'),
]

CROP_OPTIONS = [
    'Wheat', 'Rice', 'Cotton', 'Sugarcane', 'Maize', 'Soybean',
    'Tomato', 'Onion', 'Potato', 'Chili', 'Groundnut', 'Sunflower',
]

NOTIFICATION_KEYS = [
    'weather_alerts',
    'task_reminders',
    'market_updates',
    'expert_responses',
    'irrigation_alerts',
]


def default_notifications():
    return {key: True for key in NOTIFICATION_KEYS}


class CustomUserManager(BaseUserManager):
    def create_user(self, email, password=None, role='farmer', phone_number=None, **extra_fields):
        if not email:
            raise ValueError("The email must be provided")
        if role not in [choice[0] for choice in CustomUser.ROLE_CHOICES]:
            raise ValueError("Invalid role selected")

        user = self.model(
            email=self.normalize_email(email),
            role=role,
            phone_number=phone_number or None,
            **extra_fields
        )
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        if not password:
            raise ValueError("The password must be provided for superuser")

        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        return self.create_user(email, password=password, role='admin', **extra_fields)

    def create_expert(self, email, password=None, **extra_fields):
        return self.create_user(email, password=password, role='expert', **extra_fields)


class CustomUser(AbstractBaseUser, PermissionsMixin):
    ROLE_CHOICES = [
        ('farmer', 'Farmer'),
        ('expert', 'Agricultural Expert'),
        ('admin', 'Admin'),
    ]

    email = models.EmailField(unique=True)
    phone_number = models.CharField(max_length=15, unique=True, null=True, blank=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default='farmer')
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    created_at = models.DateTimeField(default=now)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    objects = CustomUserManager()

    def __str__(self):
        return self.email

    @property
    def is_expert(self):
        return self.role in ('expert', 'admin')


class Profile(models.Model):
    """Farm profile and app preferences, one per user."""
    user = models.OneToOneField(CustomUser, on_delete=models.CASCADE, related_name='profile')
    full_name = models.CharField(max_length=150, blank=True)
    farm_name = models.CharField(max_length=150, blank=True)
    phone = models.CharField(max_length=20, blank=True)
    location = models.CharField(max_length=150, blank=True, help_text="City used for weather, e.g. 'Pune,IN'")
    farm_size = models.FloatField(null=True, blank=True, help_text="Farm size in acres")
    primary_crops = models.JSONField(default=list, blank=True)
    language = models.CharField(max_length=2, choices=LANGUAGE_CHOICES, default='en')
    notifications = models.JSONField(default=default_notifications, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.full_name or self.user.email


def get_user_profile(user):
    """Return the user's profile, creating it for accounts that predate profiles."""
    profile, _ = Profile.objects.get_or_create(user=user)
    return profile
