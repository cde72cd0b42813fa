"""
macrokit - Dialect dispatch and naming policies for SQL macros
Copyright © 2025 Ilona Tag

This file is part of macrokit.

macrokit is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as
published by the Free Software Foundation, either version 3 of
the License, or (at your option) any later version.

macrokit is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with macrokit. If not, see <https://www.gnu.org/licenses/>.

Contact: <https://github.com/elevata-labs/macrokit>.
"""

from pathlib import Path

from utils.env import env_bool, env_str

"""
Django settings for macrokit.

The project only uses Django for its app registry and management
commands; no database or HTTP layer is configured.
"""

BASE_DIR = Path(__file__).resolve().parent.parent
REPO_DIR = BASE_DIR.parent

SECRET_KEY = env_str("MACROS_SECRET_KEY", "macrokit-insecure-local-key")
DEBUG = env_bool("MACROS_DEBUG", False)
ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
  "macros",
]

DATABASES: dict = {}

USE_TZ = True
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

MACROS_PROFILES_PATH = env_str(
  "MACROS_PROFILES_PATH",
  str(REPO_DIR / "config" / "macros_profiles.yaml"),
)

LOGGING = {
  "version": 1,
  "disable_existing_loggers": False,
  "formatters": {
    "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
  },
  "handlers": {
    "console": {
      "class": "logging.StreamHandler",
      "formatter": "simple",
    },
  },
  "loggers": {
    "macros": {
      "handlers": ["console"],
      "level": env_str("MACROS_LOG_LEVEL", "WARNING"),
      "propagate": True,
    },
  },
}
