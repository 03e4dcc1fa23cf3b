"""
Fix Command Handler.

This module implements the logic for the `lodash-switcheroo fix` command:

1. Configuration loading (pyproject.toml plus CLI overrides).
2. External handler discovery (`plugin_paths`).
3. Rewriting the expression via the `AutofixEngine`.
"""

from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError
from rich.markup import escape

from lodash_switcheroo.config import RuntimeConfig
from lodash_switcheroo.core.engine import AutofixEngine
from lodash_switcheroo.semantics.manager import SemanticsManager
from lodash_switcheroo.utils.console import console, log_error, log_success


def handle_fix(
  expression: str,
  include: Optional[List[str]] = None,
  exclude: Optional[List[str]] = None,
  allow_unsafe: Optional[bool] = None,
  plugin_paths: Optional[List[Path]] = None,
  search_path: Optional[Path] = None,
) -> int:
  """
  Handles the 'fix' command execution.

  Args:
      expression: A single lodash call, e.g. `_.map(xs, fn)`.
      include: Only rewrite these functions.
      exclude: Never rewrite these functions.
      allow_unsafe: Also rewrite entries marked exclude_by_default.
      plugin_paths: Extra handler directories.
      search_path: Directory to start the pyproject.toml search from.

  Returns:
      int: Exit code (0 when rewritten, 1 otherwise).
  """
  try:
    config = RuntimeConfig.load(
      include=include,
      exclude=exclude,
      allow_unsafe=allow_unsafe,
      plugin_paths=plugin_paths,
      search_path=search_path,
    )
  except ValidationError as e:
    log_error(f"Invalid configuration: {e.errors()[0]['msg']}")
    return 1

  engine = AutofixEngine(semantics=SemanticsManager(), config=config)
  result = engine.run(expression)

  if not result.success:
    for err in result.errors:
      log_error(escape(err))
    return 1

  log_success(f"[code]{result.function_name}[/code] -> {escape(result.target_pattern)}")
  console.print(result.code, markup=False, highlight=False)
  return 0
