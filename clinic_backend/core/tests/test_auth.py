"""Tests for Authentication endpoints.

Tests cover:
- Login (POST /api/auth/login/)
- Refresh (POST /api/auth/refresh/)
- Me (GET /api/auth/me/)
- Health (GET /api/health/)
"""

from __future__ import annotations

from django.test import TestCase

from rest_framework import status
from rest_framework.test import APIClient

from clinic_backend.core.models import User


class AuthenticationTest(TestCase):
    """Tests for /api/auth/ endpoints."""

    def setUp(self):
        self.user = User.objects.create_user(
            username="staff_auth_test",
            email="staff_auth@example.com",
            password="SecurePass123!",
        )
        self.inactive_user = User.objects.create_user(
            username="inactive_auth_test",
            email="inactive_auth@example.com",
            password="SecurePass123!",
            is_active=False,
        )

        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"

    def _login(self, username="staff_auth_test", password="SecurePass123!"):
        return self.client.post(
            "/api/auth/login/",
            {"username": username, "password": password},
            format="json",
        )

    # ========== LOGIN TESTS ==========

    def test_login_success_returns_tokens_and_user(self):
        """Successful login returns access, refresh tokens and user info."""
        response = self._login()

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn("access", response.data)
        self.assertIn("refresh", response.data)

        user_data = response.data["user"]
        self.assertEqual(user_data["id"], self.user.id)
        self.assertEqual(user_data["username"], "staff_auth_test")
        self.assertEqual(user_data["email"], "staff_auth@example.com")

    def test_login_wrong_password_returns_422(self):
        response = self._login(password="WrongPassword!")

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertNotIn("access", response.data)
        self.assertIn("non_field_errors", response.data["errors"])

    def test_login_wrong_username_returns_422(self):
        response = self._login(username="nonexistent_user")

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)

    def test_login_inactive_user_returns_422(self):
        response = self._login(username="inactive_auth_test")

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)

    def test_login_missing_fields_returns_422(self):
        response = self.client.post("/api/auth/login/", {"username": "staff_auth_test"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertIn("password", response.data["errors"])

        response = self.client.post("/api/auth/login/", {"password": "SecurePass123!"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertIn("username", response.data["errors"])

    # ========== REFRESH TESTS ==========

    def test_refresh_success_returns_new_access_token(self):
        refresh_token = self._login().data["refresh"]

        response = self.client.post("/api/auth/refresh/", {"refresh": refresh_token}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["access"])

    def test_refresh_invalid_token_returns_422(self):
        response = self.client.post("/api/auth/refresh/", {"refresh": "invalid_token_here"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)
        self.assertIn("refresh", response.data["errors"])

    def test_refresh_missing_token_returns_422(self):
        response = self.client.post("/api/auth/refresh/", {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_422_UNPROCESSABLE_ENTITY)

    # ========== ME ENDPOINT TESTS ==========

    def test_me_with_valid_token_returns_user(self):
        access_token = self._login().data["access"]

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {access_token}")
        response = self.client.get("/api/auth/me/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["id"], self.user.id)
        self.assertEqual(response.data["username"], "staff_auth_test")

    def test_me_without_token_returns_401(self):
        response = self.client.get("/api/auth/me/")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_me_with_invalid_token_returns_401(self):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer invalid_token_here")
        response = self.client.get("/api/auth/me/")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_access_token_opens_patient_endpoints(self):
        access_token = self._login().data["access"]

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {access_token}")
        response = self.client.get("/api/patients/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"], [])

    def test_health_endpoint_no_auth_required(self):
        response = self.client.get("/api/health/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()["status"], "ok")
