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

from typing import Any

from django.core.management.base import BaseCommand, CommandError

from macros.errors import MacroError
from macros.rendering import get_default_registry, normalize_dialect
from macros.rendering.diagnostics import collect_operation_diagnostics, known_dialects


class Command(BaseCommand):
  help = (
    "Show which dialects have their own template per operation, with a\n"
    "sample rendering for every dialect.\n\n"
    "Examples:\n"
    "  python manage.py macros_dialect_check\n"
    "  python manage.py macros_dialect_check --dialect postgres\n"
  )

  def add_arguments(self, parser) -> None:
    parser.add_argument(
      "--dialect",
      dest="dialect_name",
      type=str,
      default=None,
      help="Optional dialect name to restrict diagnostics, e.g. 'bigquery', 'postgres', 'sqlserver'.",
    )

  def _print_header(self, title: str) -> None:
    self.stdout.write("")
    self.stdout.write(self.style.MIGRATE_HEADING(title))
    self.stdout.write(self.style.HTTP_INFO("-" * len(title)))

  def handle(self, *args: Any, **options: Any) -> None:
    registry = get_default_registry()
    dialect_name: str | None = options.get("dialect_name")

    if dialect_name:
      dialect_names = [normalize_dialect(dialect_name)]
    else:
      dialect_names = known_dialects(registry)

    operations = registry.operations()
    if not operations:
      self.stdout.write(self.style.WARNING("No operations are registered."))
      return

    self._print_header("Operation diagnostics")

    for operation in operations:
      try:
        diag = collect_operation_diagnostics(operation, registry, dialect_names)
      except MacroError as exc:
        raise CommandError(str(exc)) from exc

      self.stdout.write("")
      self.stdout.write(self.style.HTTP_INFO(
        f"Operation: {diag.operation} (arity {diag.arity}, operands: {', '.join(diag.sample_operands)})"
      ))
      for name, sql in diag.samples.items():
        if name == "default":
          status = "BASE"
        elif name in diag.registered_dialects:
          status = "OK"
        else:
          status = "FALLBACK"
        self.stdout.write(f"  {name:<12} {status:<8}  {sql}")

    self.stdout.write("")
    self.stdout.write(self.style.SUCCESS("Dialect check finished."))
