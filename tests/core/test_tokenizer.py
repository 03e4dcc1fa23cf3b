"""
Tests for the Argument Tokenizer.

Verifies:
1. Top-level comma detection across nesting and literal modes.
2. Argument splitting (including trailing commas).
3. Parenthesis matching and its "no match" convention.
4. Pattern helpers (method name, fixed params, array-like receivers).
"""

import pytest
from hypothesis import HealthCheck, given, settings, strategies as st

from lodash_switcheroo.core.tokenizer import (
  BRACKETS_AND_COMMAS,
  MAX_NESTING_DEPTH,
  extract_fixed_params,
  extract_method_name,
  find_closing_parenthesis,
  find_first_top_level_comma,
  is_array_like_object,
  is_quoted_string,
  iter_code,
  split_top_level_arguments,
)


@pytest.mark.parametrize(
  "text, expected",
  [
    ("a, b", 1),
    ("func(a, b, c)", -1),
    ("func(a, {b: c, d: e}), second", 21),
    ("func(a, {b: c}), second", 15),
    ("[1, 2], x", 6),
    ('"hello, world", fn', 14),
    ("'it\\'s, fine', x", 13),
    ("`a, b`, c", 6),
    ("`a ${f(x, y)} b`, z", 16),
    ("`${ {a: 1, b: 2}.a }`, z", 21),
    ("single", -1),
    ("", -1),
  ],
)
def test_find_first_top_level_comma(text, expected):
  assert find_first_top_level_comma(text) == expected


def test_find_first_top_level_comma_rejects_non_strings():
  assert find_first_top_level_comma(None) == -1
  assert find_first_top_level_comma(42) == -1


def test_iter_code_skips_literal_contents():
  text = "a + 'b, c' + `d${e}`"
  structural = "".join(ch for _, ch in iter_code(text))
  assert structural == "a +  + "


def test_iter_code_only_yields_matching_characters():
  assert list(iter_code("f(a, 'b,c')", BRACKETS_AND_COMMAS)) == [(1, "("), (3, ","), (10, ")")]


@pytest.mark.parametrize(
  "text, expected",
  [
    ("a, b", ["a", "b"]),
    ("  xs  ,  fn  ", ["xs", "fn"]),
    ("f(a, b), [1, 2], {x: 1, y: 2}", ["f(a, b)", "[1, 2]", "{x: 1, y: 2}"]),
    ("a, ", ["a"]),
    (", a", ["", "a"]),
    ("a,, b", ["a", "", "b"]),
    ("", []),
    ("   ", []),
  ],
)
def test_split_top_level_arguments(text, expected):
  assert split_top_level_arguments(text) == expected


@pytest.mark.parametrize(
  "text, open_index, expected",
  [
    ("map(xs, f(y))", 3, 12),
    ("f(')')", 1, 5),
    ("f(`)${g(1)}`)", 1, 12),
    ("f(a", 1, 1),
    ("abc", 0, 0),
    ("f()", 10, 10),
    ("f()", -1, -1),
  ],
)
def test_find_closing_parenthesis(text, open_index, expected):
  assert find_closing_parenthesis(text, open_index) == expected


@pytest.mark.parametrize(
  "pattern, expected",
  [
    ("Array.prototype.map", "map"),
    ("Array.prototype.at[0]", "at"),
    ("String.prototype.padStart", "padStart"),
    ("Array.prototype.", None),
    ("Array.prototype", None),
    ("Object.keys", None),
    ("", None),
    (None, None),
  ],
)
def test_extract_method_name(pattern, expected):
  assert extract_method_name(pattern) == expected


def test_extract_fixed_params():
  assert extract_fixed_params("Array.prototype.at[-1]") == "-1"
  assert extract_fixed_params("Array.prototype.slice[0, 2]") == "0, 2"
  assert extract_fixed_params("Array.prototype.map") is None
  assert extract_fixed_params("") is None


@pytest.mark.parametrize(
  "text",
  [
    "arguments",
    "document.querySelectorAll('.item')",
    "root.el.getElementsByClassName('x')",
    "el.children",
    "node.childNodes",
    "input.files",
  ],
)
def test_is_array_like_object_known_shapes(text):
  assert is_array_like_object(text)


@pytest.mark.parametrize("text", ["items", "users.list", "getChildren()", "", "   ", None])
def test_is_array_like_object_other_shapes(text):
  assert not is_array_like_object(text)


def test_is_quoted_string():
  assert is_quoted_string('"id"')
  assert is_quoted_string("'first-name'")
  assert not is_quoted_string("'a' + 'b'")
  assert not is_quoted_string("id")
  assert not is_quoted_string("'")


@given(st.text(alphabet="ab,()[]{}'\"`$\\ ", max_size=40))
@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
def test_comma_split_is_stable_under_rejoin(text):
  """
  Re-joining the two segments around the reported comma and scanning again
  finds the same comma, and the splitter agrees on the first segment.
  """
  idx = find_first_top_level_comma(text)
  if idx == -1:
    assert split_top_level_arguments(text) == ([text.strip()] if text.strip() else [])
    return

  assert text[idx] == ","
  head, tail = text[:idx], text[idx + 1 :]
  assert find_first_top_level_comma(head + "," + tail) == idx
  assert find_first_top_level_comma(head) == -1
  assert split_top_level_arguments(text)[0] == head.strip()


def test_excessive_nesting_is_treated_as_unparseable():
  deep = "(" * (MAX_NESTING_DEPTH + 1) + ")" * (MAX_NESTING_DEPTH + 1)
  assert find_first_top_level_comma(deep + ", x") == -1
  assert split_top_level_arguments(deep + ", x") == []
  assert find_closing_parenthesis(deep, 0) == 0

  shallow = "(" * 10 + ")" * 10
  assert find_first_top_level_comma(shallow + ", x") == 20
  assert find_closing_parenthesis(shallow, 0) == 19
