"""
Django settings for the DVS landmark service.
Ocular landmark extraction for eye disease screening photos.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# Load environment variables explicitly from backend_django/.env
load_dotenv(BASE_DIR / '.env')

# Helpers to parse env
def _csv_env(name: str, default_list: list[str] | None = None) -> list[str]:
    raw = os.getenv(name, '').strip()
    if not raw:
        return default_list or []
    return [x.strip() for x in raw.split(',') if x.strip()]

def _bool_env(name: str, default: bool) -> bool:
    return str(os.getenv(name, '1' if default else '0')).strip().lower() in ('1', 'true', 'yes')

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv('SECRET_KEY', 'django-insecure-dvs-secret-key-change-in-production')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = _bool_env('DEBUG', True)

_default_hosts = ['localhost', '127.0.0.1', '0.0.0.0', 'testserver']
ALLOWED_HOSTS = _csv_env('ALLOWED_HOSTS', _default_hosts)

# Application definition
INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',

    # Third party apps
    'rest_framework',

    # Local apps
    'dvs_app',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'dvs_django.urls'

WSGI_APPLICATION = 'dvs_django.wsgi.application'

# No patient records are stored; the database only backs django.contrib.auth
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

# REST Framework Configuration
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
        'rest_framework.parsers.MultiPartParser',
    ],
    'UNAUTHENTICATED_USER': None,
}

# Internationalization
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# Media files (uploaded photos)
MEDIA_URL = '/media/'
MEDIA_ROOT = os.getenv('DVS_MEDIA_ROOT', os.path.join(BASE_DIR, 'media'))

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# File Upload Settings
FILE_UPLOAD_MAX_MEMORY_SIZE = 10 * 1024 * 1024  # 10MB
DATA_UPLOAD_MAX_MEMORY_SIZE = 10 * 1024 * 1024   # 10MB

# Logging Configuration
DVS_LOG_LEVEL = os.getenv('DVS_LOG_LEVEL', 'INFO').strip().upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'level': DVS_LOG_LEVEL,
            'class': 'logging.StreamHandler',
            'formatter': 'plain',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': True,
        },
        'dvs_app': {
            'handlers': ['console'],
            'level': DVS_LOG_LEVEL,
            'propagate': False,
        },
    },
}
