"""
Tests for the Stub, Identity and Scheduling handlers.
"""

import pytest

from lodash_switcheroo.core.hooks import get_hook
from lodash_switcheroo.plugins.stubs import STUB_VALUES


@pytest.mark.parametrize("name, value", sorted(STUB_VALUES.items()))
def test_stubs_ignore_arguments(run_hook, name, value):
  assert run_hook(name, f"{name}()") == value
  assert run_hook(name, f"{name}(1, 2)") == value


def test_negated_stub(make_call):
  fix = get_hook("stubTrue")(make_call("!stubTrue()"))
  assert fix.range == (0, 11)
  assert fix.text == "!(true)"


def test_identity(run_hook):
  assert run_hook("identity", "identity(x)") == "x"
  assert run_hook("identity", "identity()") is None
  assert run_hook("identity", "identity(a, b)") is None


@pytest.mark.parametrize(
  "name, snippet, expected",
  [
    ("delay", "delay(fn, 100)", "setTimeout(fn, 100)"),
    ("delay", "delay(fn, 100, a, b)", "setTimeout(fn, 100, a, b)"),
    ("defer", "defer(fn)", "setTimeout(fn, 0)"),
    ("defer", "defer(fn, a)", "setTimeout(fn, 0, a)"),
  ],
)
def test_scheduling(run_hook, name, snippet, expected):
  assert run_hook(name, snippet) == expected


def test_scheduling_declines(run_hook):
  assert run_hook("delay", "delay(fn)") is None
  assert run_hook("defer", "defer()") is None
