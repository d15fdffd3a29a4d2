"""Serializers for the core app: current user and JWT authentication."""

from rest_framework import serializers

from clinic_backend.core.models import User


class UserMeSerializer(serializers.ModelSerializer):
    """Serializer for the /auth/me/ endpoint."""

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'first_name',
            'last_name',
            'is_active',
        ]
        read_only_fields = fields


class LoginSerializer(serializers.Serializer):
    """Serializer for user login.

    Validates credentials and returns the authenticated user.
    """

    username = serializers.CharField(required=True)
    password = serializers.CharField(required=True, write_only=True)

    def validate(self, attrs):
        from django.contrib.auth import authenticate

        username = attrs.get('username')
        password = attrs.get('password')

        if not username or not password:
            raise serializers.ValidationError('Username and password are required.')

        user = authenticate(
            request=self.context.get('request'),
            username=username,
            password=password,
        )

        # ModelBackend returns None for inactive users as well
        if user is None:
            raise serializers.ValidationError('Invalid credentials.')

        if not user.is_active:
            raise serializers.ValidationError('User account is disabled.')

        attrs['user'] = user
        return attrs


class RefreshSerializer(serializers.Serializer):
    """Serializer for token refresh."""

    refresh = serializers.CharField(required=True)

    def validate_refresh(self, value):
        from rest_framework_simplejwt.exceptions import TokenError
        from rest_framework_simplejwt.tokens import RefreshToken

        try:
            RefreshToken(value)
        except TokenError as e:
            raise serializers.ValidationError(f'Invalid or expired refresh token: {e}')
        return value
