"""
Test settings for the travel_proxy project.

No test reaches Amadeus: upstream calls are patched at the service
seams, so credentials from the environment are irrelevant here.
"""

from .base import *

SECRET_KEY = "test-secret-key-not-for-production"  # noqa: S105

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost"]

CORS_ALLOW_ALL_ORIGINS = True

LOG_LEVEL = "WARNING"
LOG_JSON = False

# structlog output is asserted with structlog.testing.capture_logs instead
LOGGING = {
    "version": 1,
    "disable_existing_loggers": True,
    "handlers": {
        "null": {
            "class": "logging.NullHandler",
        },
    },
    "root": {
        "handlers": ["null"],
        "level": "WARNING",
    },
}
