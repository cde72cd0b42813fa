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

from typing import Iterable

from django.core.exceptions import ImproperlyConfigured


class MacroError(Exception):
  """Base class for all errors raised by macrokit."""


class ArityError(MacroError, ValueError):
  """Operand count does not match the declared arity of an operation."""

  def __init__(self, operation: str, expected: int, actual: int) -> None:
    self.operation = operation
    self.expected = expected
    self.actual = actual
    super().__init__(
      f"Operation {operation!r} expects {expected} operand(s), got {actual}."
    )


class UnknownOperationError(MacroError, KeyError):
  """No templates (not even a fallback) are registered for an operation."""

  def __init__(self, operation: str, available: Iterable[str] = ()) -> None:
    self.operation = operation
    self.available = sorted(available)
    listing = ", ".join(self.available) or "(none)"
    self.message = (
      f"Unknown operation: {operation!r}. "
      f"Available operations: {listing}."
    )
    super().__init__(self.message)

  def __str__(self) -> str:
    # KeyError would repr() the message otherwise
    return self.message


class TemplateConflictError(MacroError, ValueError):
  """A template for the (operation, dialect) pair is already registered."""

  def __init__(self, operation: str, dialect: str) -> None:
    self.operation = operation
    self.dialect = dialect
    super().__init__(
      f"A template for operation {operation!r} and dialect {dialect!r} "
      "is already registered. Existing templates cannot be replaced."
    )


class ConfigurationError(MacroError, ImproperlyConfigured):
  """The naming policy has no usable default schema."""
