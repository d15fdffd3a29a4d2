"""Core app views.

Contains:
- health: Health check endpoint
- LoginView: JWT token obtain with user info
- RefreshView: JWT token refresh
- MeView: Current authenticated user info
"""

import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from rest_framework_simplejwt.tokens import RefreshToken

from clinic_backend.core.serializers import (
    LoginSerializer,
    RefreshSerializer,
    UserMeSerializer,
)

logger = logging.getLogger(__name__)


def health(request):
    """Health check endpoint - no authentication required."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1;')
    except DatabaseError:
        logger.exception('Health check database query failed')
        return JsonResponse({'status': 'error', 'detail': 'database unavailable'}, status=503)

    return JsonResponse({'status': 'ok'})


class LoginView(APIView):
    """Obtain JWT access and refresh tokens.

    POST /api/auth/login/
    Body: {"username": "...", "password": "..."}
    Returns: {"user": {...}, "access": "...", "refresh": "..."}
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = LoginSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)

        user = serializer.validated_data['user']
        refresh = RefreshToken.for_user(user)
        logger.info('User %s logged in', user.pk)

        return Response(
            {
                'user': UserMeSerializer(user).data,
                'access': str(refresh.access_token),
                'refresh': str(refresh),
            },
            status=status.HTTP_200_OK,
        )


class RefreshView(APIView):
    """Refresh JWT access token.

    POST /api/auth/refresh/
    Body: {"refresh": "..."}
    Returns: {"access": "..."}
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = RefreshSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        refresh = RefreshToken(serializer.validated_data['refresh'])

        return Response(
            {
                'access': str(refresh.access_token),
            },
            status=status.HTTP_200_OK,
        )


class MeView(APIView):
    """Get current authenticated user info.

    GET /api/auth/me/
    """

    permission_classes = [IsAuthenticated]

    def get(self, request, *args, **kwargs):
        serializer = UserMeSerializer(request.user)
        return Response(serializer.data, status=status.HTTP_200_OK)
