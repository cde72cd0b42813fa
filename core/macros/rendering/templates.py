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
from typing import Callable, Optional, Sequence

from macros.constants import DIALECT_ALIASES, FALLBACK_DIALECT
from macros.errors import ArityError

RenderFunc = Callable[..., str]


@dataclass(frozen=True)
class ExpressionTemplate:
  """
  One SQL expression template for an (operation, dialect) pair.

  `render` receives the operands positionally and returns the SQL text.
  Operands are used as given; no quoting or escaping happens here.
  """
  operation: str
  dialect: str
  arity: int
  render: RenderFunc

  @property
  def is_fallback(self) -> bool:
    return self.dialect == FALLBACK_DIALECT

  def apply(self, operands: Sequence[str]) -> str:
    if isinstance(operands, (str, bytes)):
      raise TypeError(
        f"Operands for {self.operation!r} must be a sequence of strings, "
        f"not a single {type(operands).__name__}."
      )
    operands = list(operands)
    if len(operands) != self.arity:
      raise ArityError(self.operation, self.arity, len(operands))
    return self.render(*operands)


def normalize_dialect(tag: Optional[str]) -> str:
  """
  Normalize a warehouse/dialect tag.

    normalize_dialect(" BigQuery ") -> "bigquery"
    normalize_dialect("fabric")     -> "sqlserver"
    normalize_dialect(None)         -> "default"
  """
  cleaned = (tag or "").strip().lower()
  if not cleaned:
    return FALLBACK_DIALECT
  return DIALECT_ALIASES.get(cleaned, cleaned)


def normalize_unit(unit: str) -> str:
  """Strip whitespace and surrounding single quotes from a date part ('day' -> day)."""
  return (unit or "").strip().strip("'").strip()
