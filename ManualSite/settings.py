import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "insecure-development-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "manual",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "ManualSite.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": ["django.template.context_processors.request"]},
    }
]

DATABASES = {}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

STATIC_URL = "static/"
USE_TZ = True
TIME_ZONE = "UTC"

# Reference manual sources
MANUAL_REFERENCE_PATH = os.environ.get("MANUAL_REFERENCE_PATH", str(BASE_DIR / "docs" / "reference.md"))
MANUAL_CATEGORY_PATH = os.environ.get("MANUAL_CATEGORY_PATH", str(BASE_DIR / "docs" / "categories.md"))
MANUAL_HIGHLIGHT_LANGUAGE = "basil"
MANUAL_COMMENT_MARKERS = ("REM",)
MANUAL_CACHE_TIMEOUT = 60 * 60
MANUAL_TITLE = "Basil Language Reference"

CELERY_BROKER_URL = os.environ.get("CELERY_BROKER_URL", "redis://localhost:6379/0")
CELERY_TASK_ALWAYS_EAGER = os.environ.get("CELERY_TASK_ALWAYS_EAGER", "0") == "1"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"console": {"class": "logging.StreamHandler"}},
    "loggers": {
        "manual": {"handlers": ["console"], "level": os.environ.get("MANUAL_LOG_LEVEL", "INFO")},
    },
}
