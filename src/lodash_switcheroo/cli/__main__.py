"""
Main Entry Point for lodash-switcheroo CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `lodash_switcheroo.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from lodash_switcheroo import __version__
from lodash_switcheroo.cli import commands
from lodash_switcheroo.config import parse_cli_list
from lodash_switcheroo.enums import FunctionCategory
from lodash_switcheroo.utils.console import set_verbose


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="lodash-switcheroo: Native JavaScript rewrites for lodash calls")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: FIX ---
  cmd_fix = subparsers.add_parser("fix", help="Rewrite one lodash call to native JavaScript")
  cmd_fix.add_argument("expression", help="The call to rewrite, e.g. '_.isNil(value)'")
  cmd_fix.add_argument(
    "--include",
    action="append",
    default=None,
    help="Only rewrite these functions (repeatable or comma-separated; overrides config)",
  )
  cmd_fix.add_argument(
    "--exclude",
    action="append",
    default=None,
    help="Never rewrite these functions (repeatable or comma-separated; overrides config)",
  )
  cmd_fix.add_argument(
    "--allow-unsafe",
    action="store_true",
    default=None,
    help="Also rewrite functions whose native form changes behaviour (Overrides config)",
  )
  cmd_fix.add_argument(
    "--plugin-path",
    type=Path,
    action="append",
    default=None,
    dest="plugin_paths",
    help="Directory with extra handler modules (repeatable)",
  )

  # --- Command: LIST ---
  cmd_list = subparsers.add_parser("list", help="Show the native alternatives table")
  cmd_list.add_argument(
    "--category",
    choices=[c.value for c in FunctionCategory],
    default=None,
    help="Only show one category",
  )

  # --- Command: CLASSIFY ---
  cmd_cls = subparsers.add_parser("classify", help="Show how a target pattern is rewritten")
  cmd_cls.add_argument("pattern", help="A native pattern (e.g. 'Array.isArray') or a lodash function name")
  cmd_cls.add_argument("--function", dest="function_name", default=None, help="Lodash function the pattern belongs to")

  args = parser.parse_args(argv)
  set_verbose(args.verbose)

  if args.command == "fix":
    return commands.handle_fix(
      args.expression,
      include=parse_cli_list(args.include),
      exclude=parse_cli_list(args.exclude),
      allow_unsafe=args.allow_unsafe,
      plugin_paths=args.plugin_paths,
    )

  elif args.command == "list":
    return commands.handle_list(args.category)

  elif args.command == "classify":
    return commands.handle_classify(args.pattern, function_name=args.function_name)

  return 0


if __name__ == "__main__":
  sys.exit(main())
