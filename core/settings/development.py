"""
Development settings for the travel_proxy project.

Local runserver with the debug toolbar, the browsable API and verbose
structlog console output. Amadeus credentials still come from .env.
"""

from .base import *

DEBUG = True

ALLOWED_HOSTS = [*APP_SETTINGS.allowed_hosts, "0.0.0.0"]  # noqa: S104

# The landing page and external front-ends call the API from other ports
CORS_ALLOW_ALL_ORIGINS = True

INSTALLED_APPS = [
    *INSTALLED_APPS,
    "debug_toolbar",
]

MIDDLEWARE = [
    "debug_toolbar.middleware.DebugToolbarMiddleware",
    *MIDDLEWARE,
]

INTERNAL_IPS = ["127.0.0.1"]

REST_FRAMEWORK["DEFAULT_RENDERER_CLASSES"] = [
    "rest_framework.renderers.JSONRenderer",
    "rest_framework.renderers.BrowsableAPIRenderer",
]

LOG_LEVEL = "DEBUG"
LOG_JSON = False

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django.server": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "django.template": {
            "level": "INFO",
        },
    },
}
