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
import threading
from typing import Dict, FrozenSet, List, Optional, Sequence

from macros.constants import DIALECT_CHOICES, FALLBACK_DIALECT
from macros.errors import TemplateConflictError, UnknownOperationError
from macros.rendering.templates import (
  ExpressionTemplate,
  RenderFunc,
  normalize_dialect,
)

"""
Template registry keyed by (operation, dialect).

Every operation is declared together with its fallback template, so the
lookup is total: a dialect without its own template renders the fallback.
Templates are only ever added. Registering a pair twice is an error, which
keeps the output for already supported dialects stable when a new dialect
is added.
"""

logger = logging.getLogger(__name__)

_KNOWN_DIALECTS = frozenset(name for name, _label in DIALECT_CHOICES)


class OperationRegistry:

  def __init__(self) -> None:
    # operation -> dialect -> template (always contains FALLBACK_DIALECT)
    self._templates: Dict[str, Dict[str, ExpressionTemplate]] = {}
    # dialects with at least one explicit template, replaced on register
    self._dialects: FrozenSet[str] = frozenset()
    # serializes writers; lookups read the current snapshots without locking
    self._lock = threading.Lock()

  # ---------------------------------------------------------------------------
  # Registration
  # ---------------------------------------------------------------------------

  def declare_operation(self, operation: str, arity: int, fallback: RenderFunc) -> ExpressionTemplate:
    """Declare a new operation with its fixed arity and fallback template."""
    if arity < 0:
      raise ValueError(f"Arity of {operation!r} must not be negative, got {arity}.")

    template = ExpressionTemplate(
      operation=operation,
      dialect=FALLBACK_DIALECT,
      arity=arity,
      render=fallback,
    )
    with self._lock:
      if operation in self._templates:
        raise TemplateConflictError(operation, FALLBACK_DIALECT)
      self._templates = {**self._templates, operation: {FALLBACK_DIALECT: template}}
    return template

  def register(self, operation: str, dialect: str, render: RenderFunc) -> ExpressionTemplate:
    """Add a dialect-specific template to an already declared operation."""
    key = normalize_dialect(dialect)

    with self._lock:
      by_dialect = self._templates_for(operation)
      if key in by_dialect:
        raise TemplateConflictError(operation, key)

      template = ExpressionTemplate(
        operation=operation,
        dialect=key,
        arity=by_dialect[FALLBACK_DIALECT].arity,
        render=render,
      )
      # replace the per-operation dict, never mutate it in place
      self._templates = {**self._templates, operation: {**by_dialect, key: template}}
      self._dialects = self._dialects | {key}
    return template

  def copy(self) -> "OperationRegistry":
    """Return an independent registry holding the same templates."""
    clone = OperationRegistry()
    clone._templates = dict(self._templates)
    clone._dialects = self._dialects
    return clone

  # ---------------------------------------------------------------------------
  # Lookup
  # ---------------------------------------------------------------------------

  def _templates_for(self, operation: str) -> Dict[str, ExpressionTemplate]:
    try:
      return self._templates[operation]
    except KeyError:
      raise UnknownOperationError(operation, self._templates) from None

  def template_for(self, operation: str, dialect: Optional[str]) -> ExpressionTemplate:
    """
    Return the template for (operation, dialect), or the fallback template
    if the dialect has no template of its own.
    """
    by_dialect = self._templates_for(operation)
    key = normalize_dialect(dialect)

    template = by_dialect.get(key)
    if template is not None:
      return template

    if key != FALLBACK_DIALECT:
      if key in self._dialects or key in _KNOWN_DIALECTS:
        logger.debug("No %r template for dialect %r, using fallback.", operation, key)
      else:
        logger.warning("Unknown dialect %r, using fallback template for %r.", key, operation)

    return by_dialect[FALLBACK_DIALECT]

  def resolve(self, operation: str, dialect: Optional[str], operands: Sequence[str]) -> str:
    """Render `operation` for `dialect` with the given positional operands."""
    return self.template_for(operation, dialect).apply(operands)

  def supports(self, operation: str, dialect: Optional[str]) -> bool:
    """True if the dialect has an explicitly registered template (fallback does not count)."""
    key = normalize_dialect(dialect)
    if key == FALLBACK_DIALECT:
      return False
    return key in self._templates_for(operation)

  def arity(self, operation: str) -> int:
    return self._templates_for(operation)[FALLBACK_DIALECT].arity

  def operations(self) -> List[str]:
    return sorted(self._templates)

  def dialects(self, operation: Optional[str] = None) -> List[str]:
    """
    Dialects with explicit templates, either for one operation or across
    the whole registry. The fallback key is never included.
    """
    if operation is None:
      return sorted(self._dialects)
    keys = set(self._templates_for(operation))
    keys.discard(FALLBACK_DIALECT)
    return sorted(keys)

  def __contains__(self, operation: object) -> bool:
    return operation in self._templates
