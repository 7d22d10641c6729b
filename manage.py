#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Amadeus credentials and settings overrides live in .env; real
# environment variables win over the file
load_dotenv(Path(__file__).resolve().parent / ".env", override=False)

from django.core.management import execute_from_command_line


def main() -> None:
    """Run administrative tasks with the settings module of ENVIRONMENT."""
    environment = os.environ.get("ENVIRONMENT", "development")
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", f"core.settings.{environment}")
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
