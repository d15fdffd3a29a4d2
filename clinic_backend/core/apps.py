"""
Core App Configuration
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """App configuration for users and authentication."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'clinic_backend.core'
    verbose_name = 'Core (Users & Authentication)'
