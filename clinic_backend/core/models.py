from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Staff account allowed to use the patient API.

    Extends Django's AbstractUser with a unique email address.
    Any authenticated user may act on any patient.
    """

    email = models.EmailField('email address', blank=True, unique=True)

    class Meta:
        db_table = 'core_user'
        ordering = ['username']
        verbose_name = 'User'
        verbose_name_plural = 'Users'
