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
from typing import Dict

from macros.constants import (
  FALLBACK_DIALECT,
  OP_CAST_TO_STRING,
  OP_CENTS_TO_DOLLARS,
  OP_CONCAT,
  OP_DATE_ADD,
  OP_DATE_TRUNCATE,
  OP_HASH_MD5,
)
from macros.rendering.registry import OperationRegistry
from macros.rendering.templates import RenderFunc, normalize_unit


@dataclass(frozen=True)
class OperationSpec:
  name: str
  arity: int
  # dialect -> template; must contain FALLBACK_DIALECT
  templates: Dict[str, RenderFunc]


# ---------------------------------------------------------------------------
# cents-to-dollars(x)
# ---------------------------------------------------------------------------

def _cents_to_dollars_bigquery(x: str) -> str:
  return f"round(cast(({x} / 100) as numeric), 2)"


def _cents_to_dollars_postgres(x: str) -> str:
  return f"({x}::numeric(16,2) / 100)"


def _cents_to_dollars_sqlserver(x: str) -> str:
  return f"cast({x} / 100 as numeric(16,2))"


def _cents_to_dollars_default(x: str) -> str:
  return f"({x} / 100)::numeric(16,2)"


# ---------------------------------------------------------------------------
# date-truncate(unit, x)
# ---------------------------------------------------------------------------

def _date_truncate_bigquery(unit: str, x: str) -> str:
  # BigQuery: DATE_TRUNC(expression, PART), part is a keyword
  return f"DATE_TRUNC({x}, {normalize_unit(unit).upper()})"


def _date_truncate_default(unit: str, x: str) -> str:
  return f"DATE_TRUNC('{normalize_unit(unit).lower()}', {x})"


# ---------------------------------------------------------------------------
# date-add(unit, n, x)
# ---------------------------------------------------------------------------

def _date_add_bigquery(unit: str, n: str, x: str) -> str:
  return f"DATE_ADD({x}, INTERVAL {n} {normalize_unit(unit).upper()})"


def _date_add_postgres(unit: str, n: str, x: str) -> str:
  return f"({x} + ((interval '1 {normalize_unit(unit).lower()}') * ({n})))"


def _date_add_default(unit: str, n: str, x: str) -> str:
  return f"DATEADD({normalize_unit(unit).lower()}, {n}, {x})"


# ---------------------------------------------------------------------------
# cast-to-string(x)
# ---------------------------------------------------------------------------

def _cast_to_string_bigquery(x: str) -> str:
  return f"CAST({x} AS STRING)"


def _cast_to_string_sqlserver(x: str) -> str:
  return f"CAST({x} AS VARCHAR(8000))"


def _cast_to_string_default(x: str) -> str:
  return f"CAST({x} AS VARCHAR)"


# ---------------------------------------------------------------------------
# hash-md5(x)
# ---------------------------------------------------------------------------

def _hash_md5_bigquery(x: str) -> str:
  # MD5 returns BYTES in BigQuery
  return f"TO_HEX(MD5({x}))"


def _hash_md5_sqlserver(x: str) -> str:
  return f"LOWER(CONVERT(VARCHAR(32), HASHBYTES('MD5', {x}), 2))"


def _hash_md5_default(x: str) -> str:
  return f"MD5({x})"


# ---------------------------------------------------------------------------
# concat(a, b)
# ---------------------------------------------------------------------------

def _concat_function(a: str, b: str) -> str:
  return f"CONCAT({a}, {b})"


def _concat_default(a: str, b: str) -> str:
  # ANSI || (Postgres, Redshift, DuckDB)
  return f"({a} || {b})"


BUILTIN_OPERATIONS: Dict[str, OperationSpec] = {
  OP_CENTS_TO_DOLLARS: OperationSpec(
    name=OP_CENTS_TO_DOLLARS,
    arity=1,
    templates={
      FALLBACK_DIALECT: _cents_to_dollars_default,
      "bigquery": _cents_to_dollars_bigquery,
      "postgres": _cents_to_dollars_postgres,
      "sqlserver": _cents_to_dollars_sqlserver,
    },
  ),
  OP_DATE_TRUNCATE: OperationSpec(
    name=OP_DATE_TRUNCATE,
    arity=2,
    templates={
      FALLBACK_DIALECT: _date_truncate_default,
      "bigquery": _date_truncate_bigquery,
    },
  ),
  OP_DATE_ADD: OperationSpec(
    name=OP_DATE_ADD,
    arity=3,
    templates={
      FALLBACK_DIALECT: _date_add_default,
      "bigquery": _date_add_bigquery,
      "postgres": _date_add_postgres,
    },
  ),
  OP_CAST_TO_STRING: OperationSpec(
    name=OP_CAST_TO_STRING,
    arity=1,
    templates={
      FALLBACK_DIALECT: _cast_to_string_default,
      "bigquery": _cast_to_string_bigquery,
      "sqlserver": _cast_to_string_sqlserver,
    },
  ),
  OP_HASH_MD5: OperationSpec(
    name=OP_HASH_MD5,
    arity=1,
    templates={
      FALLBACK_DIALECT: _hash_md5_default,
      "bigquery": _hash_md5_bigquery,
      "sqlserver": _hash_md5_sqlserver,
    },
  ),
  OP_CONCAT: OperationSpec(
    name=OP_CONCAT,
    arity=2,
    templates={
      FALLBACK_DIALECT: _concat_default,
      "bigquery": _concat_function,
      "sqlserver": _concat_function,
      "snowflake": _concat_function,
    },
  ),
}


def build_default_registry() -> OperationRegistry:
  """Build a fresh registry holding all built-in operations."""
  registry = OperationRegistry()
  for spec in BUILTIN_OPERATIONS.values():
    registry.declare_operation(spec.name, spec.arity, spec.templates[FALLBACK_DIALECT])
    for dialect, render in spec.templates.items():
      if dialect == FALLBACK_DIALECT:
        continue
      registry.register(spec.name, dialect, render)
  return registry
