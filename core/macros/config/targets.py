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

from __future__ import annotations

import logging
from typing import Optional

import yaml
from django.conf import settings

from macros.config import profiles
from macros.constants import FALLBACK_DIALECT
from macros.errors import ConfigurationError
from macros.naming.policy import NamingContext
from utils.env import env_str

"""
Caller-side resolution of the target dialect, environment and default
schema. These values are handed to the rendering / naming code as plain
arguments.
"""

logger = logging.getLogger(__name__)


def _active_profile(profiles_path: Optional[str] = None) -> Optional[profiles.Profile]:
  """
  Return the active profile, or None if no profiles file is available.

  Raises:
      ConfigurationError: the file exists but names an undefined profile
        or cannot be parsed.
  """
  path = profiles_path or getattr(settings, "MACROS_PROFILES_PATH", None)
  try:
    return profiles.load_profile(path)
  except FileNotFoundError as exc:
    logger.debug("No profile available: %s", exc)
    return None
  except KeyError as exc:
    raise ConfigurationError(exc.args[0] if exc.args else str(exc)) from exc
  except yaml.YAMLError as exc:
    raise ConfigurationError(f"Cannot parse profiles file {path}: {exc}") from exc


def resolve_dialect_name(explicit: Optional[str] = None, profiles_path: Optional[str] = None) -> str:
  """
  Resolve the target dialect from (in order):

  1. explicit argument
  2. environment variable MACROS_SQL_DIALECT
  3. active profile.default_dialect
  4. hard fallback 'default' (fallback templates)
  """
  if explicit:
    return explicit.strip().lower()

  env_name = env_str("MACROS_SQL_DIALECT")
  if env_name:
    return env_name.strip().lower()

  profile = _active_profile(profiles_path)
  if profile is not None and profile.default_dialect:
    return profile.default_dialect.strip().lower()

  return FALLBACK_DIALECT


def resolve_environment(explicit: Optional[str] = None, profiles_path: Optional[str] = None) -> Optional[str]:
  """
  Resolve the environment name: explicit argument, MACROS_ENVIRONMENT,
  active profile.environment, otherwise None.
  """
  if explicit:
    return explicit

  env_name = env_str("MACROS_ENVIRONMENT")
  if env_name:
    return env_name

  profile = _active_profile(profiles_path)
  if profile is not None and profile.environment:
    return profile.environment

  return None


def resolve_default_schema(explicit: Optional[str] = None, profiles_path: Optional[str] = None) -> str:
  """
  Resolve the project default schema: explicit argument,
  MACROS_DEFAULT_SCHEMA, active profile.default_schema.

  Raises:
      ConfigurationError: if none of them yields a schema.
  """
  if explicit and explicit.strip():
    return explicit.strip()

  env_schema = env_str("MACROS_DEFAULT_SCHEMA")
  if env_schema and env_schema.strip():
    return env_schema.strip()

  profile = _active_profile(profiles_path)
  if profile is not None and profile.default_schema and profile.default_schema.strip():
    return profile.default_schema.strip()

  raise ConfigurationError(
    "No default schema specified. Pass one explicitly, set "
    "MACROS_DEFAULT_SCHEMA, or configure default_schema in the active profile."
  )


def build_naming_context(
  default_schema: Optional[str] = None,
  environment: Optional[str] = None,
  custom_name: Optional[str] = None,
  profiles_path: Optional[str] = None,
) -> NamingContext:
  """Assemble a NamingContext from explicit values, env vars and the active profile."""
  return NamingContext(
    default_schema=resolve_default_schema(default_schema, profiles_path),
    environment=resolve_environment(environment, profiles_path),
    custom_name=custom_name,
  )
