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

"""
Registry extension: new pairs are added by registration only and never
change the results for pairs that already exist.
"""

import pytest

from macros.errors import TemplateConflictError, UnknownOperationError
from macros.rendering import get_default_registry, resolve


def _snapshot(registry, dialects):
  result = {}
  for operation in registry.operations():
    operands = [f"x{i}" for i in range(registry.arity(operation))]
    for dialect in dialects:
      result[(operation, dialect)] = registry.resolve(operation, dialect, operands)
  return result


def test_registering_new_dialect_keeps_other_results(registry):
  dialects = ["bigquery", "postgres", "sqlserver", "redshift", "unknown-dialect", None]
  before = _snapshot(registry, dialects)

  registry.register("cents-to-dollars", "snowflake", lambda x: f"({x} / 100)::number(16,2)")
  registry.register("date-truncate", "sqlserver", lambda unit, x: f"DATETRUNC({unit}, {x})")

  assert _snapshot(registry, dialects) == {
    **before,
    ("date-truncate", "sqlserver"): "DATETRUNC(x0, x1)",
  }
  assert registry.resolve("cents-to-dollars", "snowflake", ["price"]) == "(price / 100)::number(16,2)"


def test_registration_on_copy_does_not_touch_default_registry(registry):
  registry.register("cents-to-dollars", "snowflake", lambda x: f"snowflake({x})")

  assert not get_default_registry().supports("cents-to-dollars", "snowflake")
  assert resolve("cents-to-dollars", "snowflake", ["price"]) == "(price / 100)::numeric(16,2)"


def test_copy_is_independent(registry):
  clone = registry.copy()
  clone.register("hash-md5", "postgres", lambda x: f"md5({x}::text)")

  assert clone.supports("hash-md5", "postgres")
  assert not registry.supports("hash-md5", "postgres")


def test_existing_template_cannot_be_replaced(registry):
  with pytest.raises(TemplateConflictError):
    registry.register("cents-to-dollars", "postgres", lambda x: x)

  # alias resolves to an already registered dialect
  with pytest.raises(TemplateConflictError):
    registry.register("cents-to-dollars", "fabric", lambda x: x)

  assert registry.resolve("cents-to-dollars", "postgres", ["price"]) == "(price::numeric(16,2) / 100)"


def test_fallback_cannot_be_replaced(registry):
  with pytest.raises(TemplateConflictError):
    registry.register("cents-to-dollars", "default", lambda x: x)

  with pytest.raises(TemplateConflictError):
    registry.declare_operation("cents-to-dollars", 1, lambda x: x)


def test_register_for_undeclared_operation_raises(registry):
  with pytest.raises(UnknownOperationError):
    registry.register("percent-of", "bigquery", lambda x, y: f"{x} / {y}")


def test_declare_new_operation_is_total(registry):
  registry.declare_operation("percent-of", 2, lambda part, total: f"(100.0 * {part} / {total})")
  registry.register("percent-of", "bigquery", lambda part, total: f"SAFE_DIVIDE(100 * {part}, {total})")

  assert "percent-of" in registry
  assert registry.arity("percent-of") == 2
  assert registry.resolve("percent-of", "bigquery", ["a", "b"]) == "SAFE_DIVIDE(100 * a, b)"
  assert registry.resolve("percent-of", "postgres", ["a", "b"]) == "(100.0 * a / b)"


def test_dialect_template_inherits_operation_arity(registry):
  template = registry.register("date-add", "snowflake", lambda unit, n, x: f"DATEADD({unit}, {n}, {x})")
  assert template.arity == 3
  assert template.dialect == "snowflake"
  assert not template.is_fallback


def test_supports_ignores_fallback(registry):
  assert registry.supports("cents-to-dollars", "bigquery")
  assert registry.supports("cents-to-dollars", "Synapse")
  assert not registry.supports("cents-to-dollars", "redshift")
  assert not registry.supports("cents-to-dollars", None)


def test_template_for_returns_fallback(registry):
  template = registry.template_for("date-truncate", "postgres")
  assert template.is_fallback
  assert template.operation == "date-truncate"


def test_introspection_lists(registry):
  assert registry.operations() == [
    "cast-to-string",
    "cents-to-dollars",
    "concat",
    "date-add",
    "date-truncate",
    "hash-md5",
  ]
  assert registry.dialects("cents-to-dollars") == ["bigquery", "postgres", "sqlserver"]
  assert registry.dialects("date-truncate") == ["bigquery"]
  assert "default" not in registry.dialects()


def test_negative_arity_rejected(registry):
  with pytest.raises(ValueError):
    registry.declare_operation("broken", -1, lambda: "")


def test_dialects_cache_tracks_registration(registry):
  assert "duckdb" not in registry.dialects()

  registry.register("concat", "duckdb", lambda a, b: f"concat({a}, {b})")

  assert "duckdb" in registry.dialects()
  assert "duckdb" not in get_default_registry().dialects()


def test_registration_does_not_mutate_earlier_lookups(registry):
  """A template dict obtained before a registration stays unchanged."""
  before = registry._templates_for("cents-to-dollars")

  registry.register("cents-to-dollars", "snowflake", lambda x: f"snowflake({x})")

  assert "snowflake" not in before
  assert registry.supports("cents-to-dollars", "snowflake")


def test_concurrent_resolve_and_register(registry):
  """Lookups stay correct while other threads register new dialects."""
  from concurrent.futures import ThreadPoolExecutor

  expected = {
    dialect: registry.resolve("cents-to-dollars", dialect, ["price"])
    for dialect in ("bigquery", "postgres", "sqlserver", "redshift")
  }

  def _register(i):
    registry.register("hash-md5", f"dialect_{i}", lambda x, i=i: f"md5_{i}({x})")

  def _resolve(i):
    return [
      registry.resolve("cents-to-dollars", dialect, ["price"]) == sql
      for dialect, sql in expected.items()
    ] + [bool(registry.resolve("hash-md5", f"dialect_{i}", ["id"]))]

  with ThreadPoolExecutor(max_workers=8) as pool:
    registrations = [pool.submit(_register, i) for i in range(200)]
    lookups = [pool.submit(_resolve, i) for i in range(200)]
    for future in registrations:
      future.result()
    results = [future.result() for future in lookups]

  assert all(all(r) for r in results)
  assert len([d for d in registry.dialects() if d.startswith("dialect_")]) == 200
  for i in range(200):
    assert registry.resolve("hash-md5", f"dialect_{i}", ["id"]) == f"md5_{i}(id)"
