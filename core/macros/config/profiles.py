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

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from django.conf import settings

from macros.errors import ConfigurationError
from utils.env import env_str

"""
Profile loading for macrokit.

Profiles hold the project-wide values a caller hands to the engine:
- the target SQL dialect (warehouse)
- the default schema used by the naming policy
- the environment name ('prod', 'dev', ...)

The rendering and naming code never reads profiles itself.
"""

PROFILES_FILENAME = "macros_profiles.yaml"
PROFILE_KEYS = ("default_dialect", "default_schema", "environment")


@dataclass
class Profile:
  name: str

  # Dialect used for expression rendering (unless env override)
  default_dialect: Optional[str]

  # Project default schema (dbt: target.schema, Dataform: defaultSchema)
  default_schema: Optional[str]

  # Environment name (dbt: target.name, Dataform: --vars environment)
  environment: Optional[str]


def _find_profiles_path(explicit_path: str | None = None) -> Path:
  """
  Return the profiles file: explicit_path, else settings.MACROS_PROFILES_PATH
  (which defaults to <repo>/config/macros_profiles.yaml).
  """
  raw = explicit_path or getattr(settings, "MACROS_PROFILES_PATH", None)
  if not raw:
    raise FileNotFoundError(
      f"No {PROFILES_FILENAME} configured. "
      "Provide an explicit path or set MACROS_PROFILES_PATH."
    )

  path = Path(raw)
  if not path.is_file():
    raise FileNotFoundError(f"{PROFILES_FILENAME} not found at {path}.")
  return path


def _clean(value: Any) -> Optional[str]:
  if value is None:
    return None
  cleaned = str(value).strip()
  return cleaned or None


def load_profile(profiles_path: Optional[str] = None) -> Profile:
  """
  Load and return the current active profile.

  The active profile is MACROS_PROFILE, else the `active_profile` key,
  else 'dev'. Blank values count as unset.

  Raises:
      FileNotFoundError: no profiles file.
      KeyError: the active profile is not defined in the file.
      ConfigurationError: a profile entry is not a mapping or uses unknown keys.
  """
  path = _find_profiles_path(profiles_path)

  with open(path, "r") as f:
    data = yaml.safe_load(f) or {}

  active = env_str("MACROS_PROFILE") or _clean(data.get("active_profile")) or "dev"
  profiles: Dict[str, Any] = data.get("profiles") or {}

  if active not in profiles:
    available = ", ".join(sorted(profiles)) if profiles else "(none)"
    raise KeyError(
      f"Active profile '{active}' not found in {path}. "
      f"Available profiles: {available}."
    )

  entry = profiles[active] or {}
  if not isinstance(entry, dict):
    raise ConfigurationError(f"Profile '{active}' in {path} must be a mapping.")

  unknown = sorted(set(entry) - set(PROFILE_KEYS))
  if unknown:
    raise ConfigurationError(
      f"Profile '{active}' in {path} has unknown keys: {', '.join(unknown)}. "
      f"Allowed keys: {', '.join(PROFILE_KEYS)}."
    )

  return Profile(name=active, **{key: _clean(entry.get(key)) for key in PROFILE_KEYS})
