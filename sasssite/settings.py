"""
Django settings for the Sass documentation site.

Only the pieces the template helpers need are configured here: templates,
logging and the SASSDOC_* options consumed by ``sassdoc.conf``.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "sasssite-insecure-build-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"

ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    "sassdoc",
]

DATABASES = {}

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
    },
]

USE_TZ = True

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "{levelname} {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "sassdoc": {
            "handlers": ["console"],
            "level": os.environ.get("SASSDOC_LOG_LEVEL", "INFO"),
        },
    },
}

# Documentation site configuration

SASSDOC_TITLE_PREFIX = "Sass: "
SASSDOC_DEFAULT_TITLE = "Syntactically Awesome Style Sheets"

# Latest released version of each implementation, or absent if unreleased.
SASSDOC_VERSIONS = {
    "dart": "1.80.6",
    "libsass": "3.6.6",
    "ruby": "3.7.4",
}

SASSDOC_NAV = [
    {
        "name": "Documentation",
        "directory": "documentation/",
    },
    {
        "name": "Community",
        "pages": [
            {"title": "Code of Conduct", "path": "/code-of-conduct"},
            {"title": "Community Guidelines", "path": "/community-guidelines"},
        ],
    },
]
