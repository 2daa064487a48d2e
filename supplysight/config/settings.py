"""
Django settings for the SupplySight inventory dashboard API.

All state lives in process memory (see supplysight.catalog.store), so no
database is configured. Values that differ between environments are read
from environment variables.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'django-insecure-supplysight-dev-key')

DEBUG = os.getenv('DJANGO_DEBUG', 'true').lower() == 'true'

ALLOWED_HOSTS = [h.strip() for h in os.getenv('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',') if h.strip()]


INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'rest_framework',
    'supplysight.core',
    'supplysight.catalog',
    'supplysight.locations',
    'supplysight.reports',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'supplysight.config.urls'

WSGI_APPLICATION = 'supplysight.config.wsgi.application'

DATABASES = {}

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'supplysight',
    }
}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = False
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# Django REST Framework
REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
    ],
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'UNAUTHENTICATED_USER': None,
    'EXCEPTION_HANDLER': 'supplysight.core.exceptions.api_exception_handler',
    'TEST_REQUEST_DEFAULT_FORMAT': 'json',
}


# SupplySight
# Dotted path of the CatalogStore implementation backing every query and mutation
SUPPLYSIGHT_CATALOG_STORE = os.getenv(
    'SUPPLYSIGHT_CATALOG_STORE', 'supplysight.catalog.store.InMemoryCatalogStore'
)
SUPPLYSIGHT_PAGE_SIZE = int(os.getenv('SUPPLYSIGHT_PAGE_SIZE', '10'))
SUPPLYSIGHT_WAREHOUSE_CACHE_TTL = int(os.getenv('SUPPLYSIGHT_WAREHOUSE_CACHE_TTL', '600'))  # 10 minutes


# Logging
LOG_LEVEL = os.getenv('SUPPLYSIGHT_LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} - {name} - {levelname} - {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'supplysight': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
    },
}
