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
from typing import Optional

from macros.constants import (
  CLASSIFICATION_ALIASES,
  MODEL_LIKE,
  PROD_ENVIRONMENT,
  SEED_LIKE,
)
from macros.errors import ConfigurationError


@dataclass(frozen=True)
class NamingContext:
  default_schema: str
  environment: Optional[str] = None
  custom_name: Optional[str] = None


def normalize_classification(classification: Optional[str]) -> str:
  """
  Map a resource classification onto seed-like / model-like.
  dbt resource types are accepted ('seed', 'model', 'snapshot', ...);
  anything unrecognized is model-like.
  """
  cleaned = (classification or "").strip().lower()
  if cleaned in (SEED_LIKE, MODEL_LIKE):
    return cleaned
  return CLASSIFICATION_ALIASES.get(cleaned, MODEL_LIKE)


def _clean_custom_name(custom_name: Optional[str]) -> Optional[str]:
  if custom_name is None:
    return None
  cleaned = custom_name.strip()
  return cleaned or None


def resolve_name(
  classification: Optional[str],
  custom_name: Optional[str],
  context: NamingContext,
) -> Optional[str]:
  """
  Compute the final schema name of a resource.

  The rules are evaluated in order, first match wins:
    1. seed-like: the trimmed custom name, or None when it is absent/blank.
       Seeds never fall back to the default schema here; the caller decides.
    2. no custom name: context.default_schema
    3. environment 'prod': <default_schema>_<custom_name>
    4. otherwise: context.default_schema

  The default schema is returned exactly as configured; only the custom
  name is trimmed.

  `custom_name` takes precedence over context.custom_name.

  Raises:
      ConfigurationError: context.default_schema is empty or missing.
  """
  default_schema = getattr(context, "default_schema", None)
  if not (default_schema or "").strip():
    raise ConfigurationError(
      "No default schema configured. The naming policy cannot build a "
      "schema name without one."
    )

  if custom_name is None:
    custom_name = context.custom_name
  name = _clean_custom_name(custom_name)

  if normalize_classification(classification) == SEED_LIKE:
    return name

  if name is None:
    return default_schema

  if context.environment == PROD_ENVIRONMENT:
    return f"{default_schema}_{name}"

  return default_schema
