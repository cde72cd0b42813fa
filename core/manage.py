#!/usr/bin/env python
import os
import sys
from pathlib import Path


def main():
  """Run administrative tasks."""
  root = Path(__file__).resolve().parent
  # 'utils' lives next to core/
  sys.path.insert(0, str(root.parent))
  os.environ.setdefault("DJANGO_SETTINGS_MODULE", "macrokit_site.settings")
  from django.core.management import execute_from_command_line
  execute_from_command_line(sys.argv)


if __name__ == "__main__":
  main()
