"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- A `make_call` fixture that locates the call in a snippet like `map(xs, fn)`.
- A `run_hook` fixture that applies one specialized handler.
- Global hook registry isolation so that tests registering handlers do not leak.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'lodash_switcheroo' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from lodash_switcheroo.core.engine import build_call_info  # noqa: E402
from lodash_switcheroo.core.hooks import clear_hooks, get_hook  # noqa: E402
from lodash_switcheroo.utils.console import reset_console  # noqa: E402


@pytest.fixture
def make_call():
  """
  Builds a `CallInfo` for the first call in a snippet.

  The callee starts at `offset` (default: first non-`!`, non-space character)
  and ends at the first `(`.
  """

  def _make(text: str, offset: int = None):
    if offset is None:
      offset = len(text) - len(text.lstrip(" !"))
    callee_end = text.index("(", offset)
    return build_call_info(text, offset, callee_end)

  return _make


@pytest.fixture
def run_hook(make_call):
  """Runs the registered handler of `name` on a snippet; returns the fix text or None."""

  def _run(name: str, snippet: str):
    fix = get_hook(name)(make_call(snippet))
    return fix.text if fix else None

  return _run


@pytest.fixture(autouse=True)
def isolate_hook_registry():
  """
  Every test starts with an empty registry; the built-in plugins are reloaded
  lazily on the first lookup.
  """
  clear_hooks()
  yield
  clear_hooks()


@pytest.fixture(autouse=True)
def restore_console():
  """Undo `set_console` redirections made by a test."""
  yield
  reset_console()
