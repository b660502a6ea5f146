import re
import logging

from django.contrib.auth.hashers import check_password
from django.db import IntegrityError, transaction
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from .models import CustomUser, get_user_profile
from .serializers import UserSerializer, ProfileSerializer, SettingsSerializer

logger = logging.getLogger(__name__)


def is_valid_password(password):
    """Validate password complexity."""
    if len(password) < 8:
        return "Password must be at least 8 characters long."
    if not any(char.isdigit() for char in password):
        return "Password must include at least one number."
    if not any(char.isupper() for char in password):
        return "Password must include at least one uppercase letter."
    if not any(char.islower() for char in password):
        return "Password must include at least one lowercase letter."
    if not re.search(r"[!@#$%^&*(),.?\":{}|<>]", password):
        return "Password must include at least one special character (!@#$%^&* etc.)."
    return None


def is_valid_email(email):
    """Validate email format."""
    email_regex = r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$"
    if not re.match(email_regex, email):
        return "Invalid email format."
    return None


def token_pair_for(user):
    refresh = RefreshToken.for_user(user)
    return {
        "refresh": str(refresh),
        "access": str(refresh.access_token),
    }


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def register_user(request):
    email = (request.data.get('email') or '').strip()
    password = request.data.get('password')
    confirm_password = request.data.get('confirmPassword')
    full_name = (request.data.get('full_name') or '').strip()

    # Basic validations
    if not email:
        return Response({"error": "Email is required."}, status=status.HTTP_400_BAD_REQUEST)

    email_error = is_valid_email(email)
    if email_error:
        return Response({"error": email_error}, status=status.HTTP_400_BAD_REQUEST)

    if CustomUser.objects.filter(email__iexact=email).exists():
        return Response({"error": "A user with this email already exists."}, status=status.HTTP_400_BAD_REQUEST)

    if not password or not confirm_password:
        return Response({"error": "Password and confirm password are required."}, status=status.HTTP_400_BAD_REQUEST)

    if password != confirm_password:
        return Response({"error": "Passwords do not match."}, status=status.HTTP_400_BAD_REQUEST)

    password_error = is_valid_password(password)
    if password_error:
        return Response({"error": password_error}, status=status.HTTP_400_BAD_REQUEST)

    try:
        with transaction.atomic():
            user = CustomUser.objects.create_user(email=email, password=password)
            if full_name:
                profile = get_user_profile(user)
                profile.full_name = full_name
                profile.save()
    except IntegrityError:
        return Response({"error": "A user with this email already exists."}, status=status.HTTP_400_BAD_REQUEST)

    logger.info("Registered user %s", user.id)
    return Response(
        {
            "message": "User registered successfully.",
            "user": UserSerializer(user).data,
            "token": token_pair_for(user),
        },
        status=status.HTTP_201_CREATED
    )


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login_user(request):
    email = (request.data.get('email') or '').strip()
    password = request.data.get('password')

    if not email or not password:
        return Response({"error": "Email and password are required."}, status=status.HTTP_400_BAD_REQUEST)

    user = CustomUser.objects.filter(email__iexact=email).first()
    if not user:
        logger.warning("Login attempt for unknown email")
        return Response({"error": "No user found with this email."}, status=status.HTTP_401_UNAUTHORIZED)

    # Manually check password so inactive accounts get a specific message
    if not check_password(password, user.password):
        return Response({"error": "Invalid password."}, status=status.HTTP_401_UNAUTHORIZED)

    if not user.is_active:
        return Response({"error": "This account is inactive."}, status=status.HTTP_401_UNAUTHORIZED)

    return Response({
        **UserSerializer(user).data,
        "token": token_pair_for(user),
        "message": "Login successful."
    }, status=status.HTTP_200_OK)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout_user(request):
    refresh = request.data.get('refresh')
    if not refresh:
        return Response({"error": "Refresh token is required."}, status=status.HTTP_400_BAD_REQUEST)

    try:
        RefreshToken(refresh).blacklist()
    except TokenError as e:
        return Response({"error": f"Invalid refresh token: {e}"}, status=status.HTTP_400_BAD_REQUEST)

    return Response({"message": "Logged out successfully."}, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_logged_in_user(request):
    return Response(UserSerializer(request.user).data, status=status.HTTP_200_OK)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_profile(request):
    profile = get_user_profile(request.user)
    return Response(
        {
            'message': 'Profile retrieved successfully',
            'data': ProfileSerializer(profile).data
        },
        status=status.HTTP_200_OK
    )


@api_view(['PUT', 'PATCH'])
@permission_classes([IsAuthenticated])
def update_profile(request):
    """Save the farm profile (created on first save if missing)."""
    profile = get_user_profile(request.user)
    partial = request.method == 'PATCH'
    serializer = ProfileSerializer(profile, data=request.data, partial=partial)

    if serializer.is_valid():
        serializer.save()
        logger.info("Profile saved for user %s", request.user.id)
        return Response(
            {
                'message': 'Profile saved successfully',
                'data': serializer.data
            },
            status=status.HTTP_200_OK
        )

    logger.warning("Profile validation error for user %s: %s", request.user.id, serializer.errors)
    return Response(
        {
            'error': 'Invalid data provided',
            'details': serializer.errors
        },
        status=status.HTTP_400_BAD_REQUEST
    )


@api_view(['PUT', 'PATCH'])
@permission_classes([IsAuthenticated])
def update_settings(request):
    """Update language and notification preferences."""
    profile = get_user_profile(request.user)
    serializer = SettingsSerializer(profile, data=request.data, partial=True)

    if serializer.is_valid():
        serializer.save()
        return Response(
            {
                'message': 'Settings updated successfully',
                'data': serializer.data
            },
            status=status.HTTP_200_OK
        )

    return Response(
        {
            'error': 'Invalid data provided',
            'details': serializer.errors
        },
        status=status.HTTP_400_BAD_REQUEST
    )
