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

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from macros.constants import (
  DIALECT_CHOICES,
  OP_CAST_TO_STRING,
  OP_CENTS_TO_DOLLARS,
  OP_CONCAT,
  OP_DATE_ADD,
  OP_DATE_TRUNCATE,
  OP_HASH_MD5,
)
from macros.rendering import get_default_registry
from macros.rendering.registry import OperationRegistry

# Small synthetic operands per built-in operation
SAMPLE_OPERANDS: Dict[str, List[str]] = {
  OP_CENTS_TO_DOLLARS: ["amount_cents"],
  OP_DATE_TRUNCATE: ["day", "ordered_at"],
  OP_DATE_ADD: ["day", "1", "ordered_at"],
  OP_CAST_TO_STRING: ["id"],
  OP_HASH_MD5: ["id"],
  OP_CONCAT: ["id", "sku"],
}


def sample_operands(registry: OperationRegistry, operation: str) -> List[str]:
  """Known sample operands, or col_1..col_n for operations without samples."""
  arity = registry.arity(operation)
  sample = SAMPLE_OPERANDS.get(operation)
  if sample is not None and len(sample) == arity:
    return list(sample)
  return [f"col_{i}" for i in range(1, arity + 1)]


@dataclass
class OperationDiagnostics:
  """Snapshot of how one operation renders across dialects."""

  operation: str
  arity: int
  sample_operands: List[str]
  registered_dialects: List[str]

  # dialect -> rendered sample (fallback rendering under "default")
  samples: Dict[str, str]

  def to_dict(self) -> Dict[str, Any]:
    """Return a JSON-serializable representation."""
    return asdict(self)


def known_dialects(registry: Optional[OperationRegistry] = None) -> List[str]:
  """Dialects listed in DIALECT_CHOICES plus any registered elsewhere."""
  registry = registry or get_default_registry()
  names = {name for name, _label in DIALECT_CHOICES}
  names.update(registry.dialects())
  return sorted(names)


def collect_operation_diagnostics(
  operation: str,
  registry: Optional[OperationRegistry] = None,
  dialects: Optional[List[str]] = None,
) -> OperationDiagnostics:
  registry = registry or get_default_registry()
  operands = sample_operands(registry, operation)
  names = dialects if dialects is not None else known_dialects(registry)

  samples = {"default": registry.resolve(operation, None, operands)}
  for name in names:
    samples[name] = registry.resolve(operation, name, operands)

  return OperationDiagnostics(
    operation=operation,
    arity=registry.arity(operation),
    sample_operands=operands,
    registered_dialects=registry.dialects(operation),
    samples=samples,
  )


def snapshot_all_operations(
  registry: Optional[OperationRegistry] = None,
) -> Dict[str, OperationDiagnostics]:
  """Build diagnostics for all declared operations, keyed by operation name."""
  registry = registry or get_default_registry()
  return {
    operation: collect_operation_diagnostics(operation, registry)
    for operation in registry.operations()
  }
