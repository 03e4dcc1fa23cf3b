"""
Tests for the Sequence Generator handlers.
"""

import pytest


@pytest.mark.parametrize(
  "name, snippet, expected",
  [
    ("times", "times(3)", "Array.from({length: 3}, (_, i) => i)"),
    ("times", "times(3, makeItem)", "Array.from({length: 3}, (_, i) => makeItem(i))"),
    ("times", "times(3, i => i * 2)", "Array.from({length: 3}, (_, i) => (i => i * 2)(i))"),
    ("range", "range(5)", "Array.from({length: 5}, (_, i) => i)"),
    ("range", "range(2, 5)", "Array.from({length: 5 - 2}, (_, i) => 2 + i)"),
    ("range", "range(1, n + 1)", "Array.from({length: (n + 1) - 1}, (_, i) => 1 + i)"),
    ("rangeRight", "rangeRight(3)", "Array.from({length: 3}, (_, i) => 3 - i - 1)"),
    ("rangeRight", "rangeRight(2, 5)", "Array.from({length: 5 - 2}, (_, i) => 5 - i - 1)"),
  ],
)
def test_generator_rewrites(run_hook, name, snippet, expected):
  assert run_hook(name, snippet) == expected


@pytest.mark.parametrize(
  "name, snippet",
  [
    ("times", "times()"),
    ("range", "range(0, 10, 2)"),
    ("rangeRight", "rangeRight()"),
  ],
)
def test_generator_declines(run_hook, name, snippet):
  assert run_hook(name, snippet) is None
