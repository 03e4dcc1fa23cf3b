"""
Built-in Specialized Handlers.

Every module in this package registers its handlers with
`lodash_switcheroo.core.hooks.register_hook` at import time. Dropping a new
file here is enough to make its handlers visible to the router.
"""

import importlib
import pkgutil
import sys
from pathlib import Path

_pkg_dir = Path(__file__).parent


def _module_names():
  for _, module_name, _ in pkgutil.iter_modules([str(_pkg_dir)]):
    if not module_name.startswith("_"):
      yield f"{__name__}.{module_name}"


def register_all() -> None:
  """
  Imports every plugin module, reloading the ones already imported so that
  their decorators run again against a cleared registry.
  """
  for qualified in _module_names():
    if qualified in sys.modules:
      importlib.reload(sys.modules[qualified])
    else:
      importlib.import_module(qualified)
