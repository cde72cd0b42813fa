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

from macros.config.targets import resolve_dialect_name
from macros.errors import MacroError
from macros.rendering import resolve


class Command(BaseCommand):
  help = (
    "Render the SQL expression of one operation.\n\n"
    "The dialect is taken from --dialect, MACROS_SQL_DIALECT or the active\n"
    "profile, in that order.\n\n"
    "Examples:\n"
    "  python manage.py macros_render cents-to-dollars amount --dialect postgres\n"
    "  python manage.py macros_render date-truncate day ordered_at\n"
  )

  def add_arguments(self, parser) -> None:
    parser.add_argument("operation", type=str, help="Operation name, e.g. 'cents-to-dollars'.")
    parser.add_argument("operands", nargs="*", help="Positional operands (identifiers or literals).")
    parser.add_argument(
      "--dialect",
      dest="dialect_name",
      type=str,
      default=None,
      help="Target dialect; overrides env and profile.",
    )

  def handle(self, *args: Any, **options: Any) -> None:
    try:
      dialect = resolve_dialect_name(options.get("dialect_name"))
      sql = resolve(options["operation"], dialect, options.get("operands") or [])
    except MacroError as exc:
      raise CommandError(str(exc)) from exc

    self.stdout.write(sql)
