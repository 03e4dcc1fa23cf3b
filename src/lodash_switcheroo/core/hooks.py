"""
Specialized Handler Registry and Dynamic Loader.

Some lodash functions cannot be rewritten by the generic strategies because
their native form depends on the argument shape (`groupBy(xs, "type")` needs
an accessor arrow, `get(obj, "a.b")` becomes optional chaining). Those are
handled by hooks keyed by the source function name:

    @register_hook("groupBy")
    def transform_group_by(call_info: CallInfo) -> Optional[Fix]:
        ...

A hook returns a `Fix`, or None to decline, in which case the router falls
back to the generic strategies.

The built-in hooks live in `lodash_switcheroo.plugins` and are imported on the
first lookup. Extra directories of `.py` files can be loaded with
`load_plugins(extra_dirs=[...])`.
"""

import importlib.util
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from lodash_switcheroo.core.types import CallInfo, Fix
from lodash_switcheroo.utils.console import log_warning

HookFunction = Callable[[CallInfo], Optional[Fix]]

# Global Registry
_HOOKS: Dict[str, HookFunction] = {}
_PLUGINS_LOADED = False


def register_hook(*triggers: str) -> Callable[[HookFunction], HookFunction]:
  """
  Decorator to register a function as the specialized handler of one or more
  lodash functions.

  Args:
      *triggers: Source function names (e.g. "drop", "dropRight").
  """

  def decorator(func: HookFunction) -> HookFunction:
    for trigger in triggers:
      _HOOKS[trigger] = func
    return func

  return decorator


def get_hook(trigger: str) -> Optional[HookFunction]:
  """
  Retrieves the handler for a function name.
  Lazily loads the built-in plugins on first use.
  """
  if not _PLUGINS_LOADED:
    load_plugins()
  return _HOOKS.get(trigger)


def list_hooks() -> List[str]:
  """Names of all functions with a specialized handler, sorted."""
  if not _PLUGINS_LOADED:
    load_plugins()
  return sorted(_HOOKS)


def clear_hooks() -> None:
  """Resets the internal hook registry. Primarily for testing."""
  global _PLUGINS_LOADED
  _HOOKS.clear()
  _PLUGINS_LOADED = False


def load_plugins(extra_dirs: Optional[List[Path]] = None) -> int:
  """
  Imports the built-in plugin package and any user plugin directories.

  Args:
      extra_dirs: Additional directories whose `.py` files register hooks.

  Returns:
      int: Number of modules loaded from `extra_dirs` plus the number of
      built-in hooks registered.
  """
  global _PLUGINS_LOADED
  total_loaded = 0

  if not _PLUGINS_LOADED:
    from lodash_switcheroo import plugins

    # Re-registers after clear_hooks(); import alone is a no-op once cached.
    plugins.register_all()
    _PLUGINS_LOADED = True
    total_loaded += len(_HOOKS)

  for ex_dir in extra_dirs or []:
    ex_dir = Path(ex_dir)
    if ex_dir.exists() and ex_dir.is_dir():
      total_loaded += _import_from_dir(ex_dir)
    else:
      log_warning(f"Plugin directory not found: {ex_dir}")

  return total_loaded


def _import_from_dir(directory: Path) -> int:
  """Imports every python file of a directory as an anonymous module."""
  count = 0
  for item in sorted(directory.glob("*.py")):
    if item.name == "__init__.py":
      continue
    unique_name = f"lodash_switcheroo_plugin_{item.stem}_{item.stat().st_ino}"
    spec = importlib.util.spec_from_file_location(unique_name, item)
    if not spec or not spec.loader:
      log_warning(f"Cannot load plugin {item.name}")
      continue
    mod = importlib.util.module_from_spec(spec)
    sys.modules[unique_name] = mod
    try:
      spec.loader.exec_module(mod)
    except (ImportError, SyntaxError) as e:
      del sys.modules[unique_name]
      log_warning(f"Failed to load plugin {item.name}: {e}")
      continue
    count += 1
  return count
