"""
Django settings for the cookify project.

Firebase credentials and client behaviour are read from the environment so
the same settings module serves local development, CI and deployment.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_truthy(name, default="false"):
    return os.getenv(name, default).lower() in ("1", "true", "yes")


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-cookify-dev-key")

DEBUG = _env_truthy("DJANGO_DEBUG", "true")

ALLOWED_HOSTS = [host for host in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if host]


INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'rest_framework',
    'recipes',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'cookify.urls'

WSGI_APPLICATION = 'cookify.wsgi.application'

# Records live in Firestore; the local database only backs Django internals.
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'UTC'

USE_I18N = True

USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# Firebase

FIREBASE_SERVICE_ACCOUNT_FILE = os.getenv("FIREBASE_SERVICE_ACCOUNT_FILE")

FIREBASE_API_KEY = os.getenv("FIREBASE_API_KEY")

FIREBASE_AUTH_TIMEOUT = float(os.getenv("FIREBASE_AUTH_TIMEOUT", "10"))


# Cookify

COOKIFY_DEEP_LINK_BASE = os.getenv("COOKIFY_DEEP_LINK_BASE", "https://cookify-84195.web.app/recipe/")

COOKIFY_DOWNLOAD_URL = os.getenv(
    "COOKIFY_DOWNLOAD_URL",
    "https://github.com/Tapo4ek-png/cookify/releases/tag/release",
)


REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'recipes.authentication.FirebaseAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'UNAUTHENTICATED_USER': None,
}


LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{asctime} {levelname} {name}: {message}',
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
        'level': 'WARNING',
    },
    'loggers': {
        'recipes': {
            'handlers': ['console'],
            'level': os.getenv('COOKIFY_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}
