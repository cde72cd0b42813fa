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

from typing import Optional, Sequence

from macros.rendering.operations import build_default_registry
from macros.rendering.registry import OperationRegistry
from macros.rendering.templates import ExpressionTemplate, normalize_dialect

"""
Dialect expression resolution.

Callers pass the dialect explicitly; nothing in here looks at profiles,
settings or environment variables.
"""

_DEFAULT_REGISTRY: OperationRegistry = build_default_registry()


def get_default_registry() -> OperationRegistry:
  return _DEFAULT_REGISTRY


def resolve(
  operation: str,
  dialect: Optional[str],
  operands: Sequence[str],
  registry: Optional[OperationRegistry] = None,
) -> str:
  """
  Render the SQL expression for `operation` in `dialect`.

    resolve("cents-to-dollars", "postgres", ["price"])
    -> "(price::numeric(16,2) / 100)"

  Raises:
      UnknownOperationError: operation is not declared.
      ArityError: len(operands) differs from the operation's arity.
  """
  if registry is None:
    registry = _DEFAULT_REGISTRY
  return registry.resolve(operation, dialect, operands)


__all__ = [
  "ExpressionTemplate",
  "OperationRegistry",
  "build_default_registry",
  "get_default_registry",
  "normalize_dialect",
  "resolve",
]
