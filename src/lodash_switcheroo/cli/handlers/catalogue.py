"""
Catalogue Command Handlers.

Implements `lodash-switcheroo list` (the native alternatives table) and
`lodash-switcheroo classify` (the pattern kind the router would use).
"""

from typing import Optional

from rich.markup import escape

from lodash_switcheroo.cli.catalogue import CatalogueTable
from lodash_switcheroo.core.classifier import classify_pattern, is_fixed_param_prototype_method
from lodash_switcheroo.core.hooks import get_hook
from lodash_switcheroo.enums import FunctionCategory, PatternKind
from lodash_switcheroo.semantics.manager import SemanticsManager
from lodash_switcheroo.utils.console import console, log_error, log_info


def handle_list(category: Optional[str] = None) -> int:
  """
  Handles the 'list' command.

  Args:
      category: Restrict the listing to one FunctionCategory value.

  Returns:
      int: Exit code.
  """
  semantics = SemanticsManager()
  CatalogueTable(semantics).render(FunctionCategory(category) if category else None)
  return 0


def handle_classify(pattern: str, function_name: Optional[str] = None) -> int:
  """
  Handles the 'classify' command.

  A bare function name known to the catalogue (e.g. `groupBy`) is resolved to
  its target pattern first.

  Args:
      pattern: A target pattern (`Array.prototype.map`) or catalogue function name.
      function_name: Source function name, needed to recognize conversions.

  Returns:
      int: Exit code (1 when the pattern is empty).
  """
  semantics = SemanticsManager()
  resolved = semantics.get_target_pattern(pattern)
  if resolved is not None:
    function_name = function_name or pattern
    pattern = resolved

  kind = classify_pattern(pattern, function_name)
  if kind is None:
    log_error("Empty pattern")
    return 1

  label = kind.value
  if kind is PatternKind.PROTOTYPE_METHOD and is_fixed_param_prototype_method(pattern):
    label += " (fixed parameters)"
  console.print(f"[code]{escape(pattern)}[/code]: {label}")

  if function_name and get_hook(function_name):
    log_info(f"'{function_name}' is rewritten by a specialized handler first")
  return 0
