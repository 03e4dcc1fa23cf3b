"""
Tests for the Numeric handlers.
"""

import pytest


@pytest.mark.parametrize(
  "name, snippet, expected",
  [
    ("add", "add(1, 2)", "1 + 2"),
    ("subtract", "subtract(a, b - c)", "a - (b - c)"),
    ("multiply", "multiply(x + 1, 2)", "(x + 1) * 2"),
    ("divide", "divide(total, items.length)", "total / items.length"),
    ("clamp", "clamp(15, 0, 10)", "Math.min(Math.max(15, 0), 10)"),
    ("inRange", "inRange(x, 0, 10)", "x >= 0 && x < 10"),
    ("inRange", "inRange(a + b, 0, n)", "(a + b) >= 0 && (a + b) < n"),
    ("random", "random(5)", "Math.floor(Math.random() * 6)"),
    ("random", "random(1, 5)", "Math.floor(Math.random() * 5) + 1"),
    ("random", "random(10, 5)", "Math.floor(Math.random() * 6) + 5"),
    ("random", "random(-3)", "Math.floor(Math.random() * 4) - 3"),
    ("random", "random(2.5)", "Math.random() * 2.5"),
    ("random", "random(1, 2.5)", "Math.random() * (2.5 - 1) + 1"),
  ],
)
def test_numeric_rewrites(run_hook, name, snippet, expected):
  assert run_hook(name, snippet) == expected


@pytest.mark.parametrize(
  "name, snippet",
  [
    ("add", "add(1)"),
    ("divide", "divide(1, 2, 3)"),
    ("clamp", "clamp(15, 10)"),
    ("inRange", "inRange(x, 10)"),
    ("random", "random()"),
    ("random", "random(1, 2, true)"),
    ("random", "random(n)"),
    ("random", "random(0, items.length)"),
  ],
)
def test_numeric_declines(run_hook, name, snippet):
  assert run_hook(name, snippet) is None


def test_negated_arithmetic_is_parenthesized(make_call):
  from lodash_switcheroo.core.hooks import get_hook

  fix = get_hook("add")(make_call("!add(a, b)"))
  assert fix.range == (0, 10)
  assert fix.text == "!(a + b)"
