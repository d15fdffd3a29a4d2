"""
Development settings for the clinic backend (SQLite).

Usage:
    export DJANGO_SETTINGS_MODULE=clinic_backend.settings_dev
    python manage.py runserver

manage.py uses this module by default.
"""

from .settings import *

# ---------------------------------------------------------
# DEVELOPMENT SETTINGS (SQLITE)
# ---------------------------------------------------------

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '[::1]', '*']

# ---------------------------------------------------------
# DATABASES: SQLite for local development
# ---------------------------------------------------------

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'dev.sqlite3',
        'OPTIONS': {
            'timeout': 20,
        },
    },
}

# ---------------------------------------------------------
# INSTALLED_APPS / MIDDLEWARE: CORS for local frontends
# ---------------------------------------------------------

INSTALLED_APPS = INSTALLED_APPS + ['corsheaders']

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',  # must come before CommonMiddleware
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

# ---------------------------------------------------------
# REST FRAMEWORK: browsable API and session auth for DEV
# ---------------------------------------------------------

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'rest_framework_simplejwt.authentication.JWTAuthentication',
        'rest_framework.authentication.SessionAuthentication',
    ),
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
        'rest_framework.renderers.BrowsableAPIRenderer',
    ),
}

SIMPLE_JWT = {
    **SIMPLE_JWT,
    'ACCESS_TOKEN_LIFETIME': timedelta(hours=2),
}

# ---------------------------------------------------------
# CORS
# ---------------------------------------------------------

CORS_ALLOW_ALL_ORIGINS = True  # DEV only
CORS_ALLOW_CREDENTIALS = True

CSRF_TRUSTED_ORIGINS = [
    'http://localhost:3000',
    'http://127.0.0.1:3000',
    'http://localhost:8000',
    'http://127.0.0.1:8000',
]

# ---------------------------------------------------------
# LOGGING: verbose for development
# ---------------------------------------------------------

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {asctime} {module}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'django.db.backends': {
            'handlers': ['console'],
            'level': 'WARNING',  # DEBUG shows SQL queries
            'propagate': False,
        },
        'clinic_backend': {
            'handlers': ['console'],
            'level': 'DEBUG',
            'propagate': False,
        },
    },
}

# ---------------------------------------------------------
# CELERY: no broker locally, tasks run synchronously
# ---------------------------------------------------------

CELERY_BROKER_URL = None
CELERY_RESULT_BACKEND = None
CELERY_TASK_ALWAYS_EAGER = True

# ---------------------------------------------------------
# EMAIL: console backend
# ---------------------------------------------------------

EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'
