"""
Tests for the Specialized Handler Registry and Dynamic Loader.
"""

import pytest

from lodash_switcheroo.core import hooks
from lodash_switcheroo.core.hooks import clear_hooks, get_hook, list_hooks, load_plugins, register_hook


@pytest.fixture
def plugin_dir(tmp_path):
  """A directory with one valid handler module, one broken module and an `__init__.py`."""
  directory = tmp_path / "custom_handlers"
  directory.mkdir()
  (directory / "__init__.py").touch()
  (directory / "kebab.py").write_text(
    """
from lodash_switcheroo.core.hooks import register_hook
from lodash_switcheroo.core.strategies import make_fix


@register_hook("kebabCase")
def transform_kebab_case(call_info):
  return make_fix(call_info, "kebab")
""",
    encoding="utf-8",
  )
  (directory / "broken.py").write_text("def oops(:\n", encoding="utf-8")
  return directory


def test_register_hook_multiple_triggers():
  @register_hook("first", "head")
  def transform(call_info):
    return None

  assert get_hook("first") is transform
  assert get_hook("head") is transform


def test_builtin_plugins_load_lazily():
  assert not hooks._PLUGINS_LOADED
  assert get_hook("groupBy") is not None
  assert hooks._PLUGINS_LOADED


def test_builtins_survive_clear_hooks():
  assert get_hook("chunk") is not None
  clear_hooks()
  assert hooks._HOOKS == {}
  assert get_hook("chunk") is not None


def test_list_hooks_is_sorted():
  names = list_hooks()
  assert names == sorted(names)
  for name in ("pick", "omit", "merge", "clamp", "times", "stubArray", "delay"):
    assert name in names


def test_unknown_hook():
  assert get_hook("map") is None


def test_load_plugins_from_directory(plugin_dir):
  builtin_count = len(list_hooks())
  clear_hooks()

  loaded = load_plugins(extra_dirs=[plugin_dir])
  assert loaded == builtin_count + 1
  assert get_hook("kebabCase") is not None
  assert get_hook("groupBy") is not None


def test_missing_plugin_directory_is_skipped(tmp_path):
  load_plugins()
  assert load_plugins(extra_dirs=[tmp_path / "missing"]) == 0
