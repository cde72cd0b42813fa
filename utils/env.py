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

import os
from typing import Optional

"""
Environment variable helpers used by settings and caller-side config.
Empty values count as unset.
"""

def env_str(key: str, default: Optional[str] = None) -> Optional[str]:
  """Get env var as stripped string, or default when unset/blank."""
  val = os.getenv(key)
  if val is None or not val.strip():
    return default
  return val.strip()

def env_bool(key: str, default: bool = False) -> bool:
  """Get env var as boolean ('1', 'true', 'yes', 'on')."""
  val = env_str(key)
  return default if val is None else val.lower() in ("1", "true", "yes", "on")
