"""
Tests for the Cloning handlers.
"""

from lodash_switcheroo.core.hooks import get_hook


def test_clone(run_hook):
  assert run_hook("clone", "clone(obj)") == "{...obj}"
  assert run_hook("clone", "clone(a || b)") == "{...(a || b)}"


def test_clone_deep(run_hook):
  assert run_hook("cloneDeep", "cloneDeep(state)") == "structuredClone(state)"
  assert run_hook("cloneDeep", "cloneDeep(a ?? b)") == "structuredClone(a ?? b)"


def test_cloning_requires_one_argument(run_hook):
  assert run_hook("clone", "clone()") is None
  assert run_hook("clone", "clone(a, b)") is None
  assert run_hook("cloneDeep", "cloneDeep(a, customizer)") is None


def test_cloning_handlers_are_registered():
  assert get_hook("clone") is not None
  assert get_hook("cloneDeep") is not None
