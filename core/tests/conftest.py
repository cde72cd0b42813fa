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

import pytest

from macros.naming import NamingContext
from macros.rendering import build_default_registry


@pytest.fixture
def registry():
  """Fresh registry with all built-in operations; safe to extend in a test."""
  return build_default_registry()


@pytest.fixture(autouse=True)
def clear_macros_env(monkeypatch):
  """Ensure caller-side env overrides are clean by default."""
  for key in (
    "MACROS_PROFILE",
    "MACROS_SQL_DIALECT",
    "MACROS_ENVIRONMENT",
    "MACROS_DEFAULT_SCHEMA",
  ):
    monkeypatch.delenv(key, raising=False)
  yield


# -------------------------------------------------------------------
# Naming contexts
# -------------------------------------------------------------------
@pytest.fixture
def prod_context():
  return NamingContext(default_schema="analytics", environment="prod")


@pytest.fixture
def dev_context():
  return NamingContext(default_schema="analytics", environment="dev")


# -------------------------------------------------------------------
# Profiles
# -------------------------------------------------------------------
PROFILES_YAML = """
active_profile: dev
profiles:
  dev:
    default_dialect: Postgres
    default_schema: analytics
    environment: dev
  prod:
    default_dialect: bigquery
    default_schema: warehouse
    environment: prod
  empty: {}
"""


@pytest.fixture
def profiles_file(tmp_path):
  """Write a small macros_profiles.yaml and return its path as string."""
  path = tmp_path / "macros_profiles.yaml"
  path.write_text(PROFILES_YAML)
  return str(path)


@pytest.fixture
def profiles_setting(settings, profiles_file):
  """Point settings.MACROS_PROFILES_PATH at the test profiles file."""
  settings.MACROS_PROFILES_PATH = profiles_file
  return profiles_file


@pytest.fixture
def no_profiles(settings, tmp_path, monkeypatch):
  """Make sure no profiles file can be found anywhere."""
  from macros.config import profiles as profiles_mod

  settings.MACROS_PROFILES_PATH = str(tmp_path / "missing.yaml")

  def _missing(explicit_path=None):
    raise FileNotFoundError("macros_profiles.yaml not found (test)")

  monkeypatch.setattr(profiles_mod, "_find_profiles_path", _missing)
  return settings
