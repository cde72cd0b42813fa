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

from macros.config.targets import build_naming_context
from macros.constants import MODEL_LIKE
from macros.errors import MacroError
from macros.naming import resolve_name


class Command(BaseCommand):
  help = (
    "Resolve the schema name of a resource with the naming policy.\n\n"
    "Examples:\n"
    "  python manage.py macros_schema_name marketing --environment prod\n"
    "  python manage.py macros_schema_name raw_data --classification seed\n"
  )

  def add_arguments(self, parser) -> None:
    parser.add_argument("custom_name", nargs="?", default=None, help="Optional custom schema name.")
    parser.add_argument(
      "--classification",
      type=str,
      default=MODEL_LIKE,
      help="Resource classification: 'seed-like' / 'model-like' (dbt names like 'seed' work too).",
    )
    parser.add_argument("--environment", type=str, default=None, help="Environment name, e.g. 'prod'.")
    parser.add_argument("--default-schema", dest="default_schema", type=str, default=None)

  def handle(self, *args: Any, **options: Any) -> None:
    try:
      context = build_naming_context(
        default_schema=options.get("default_schema"),
        environment=options.get("environment"),
      )
      name = resolve_name(options["classification"], options.get("custom_name"), context)
    except MacroError as exc:
      raise CommandError(str(exc)) from exc

    if name is None:
      # Seed-like resource without a custom name; the caller picks the schema
      self.stdout.write(self.style.WARNING("No schema name resolved (seed-like resource without custom name)."))
      return

    self.stdout.write(name)
