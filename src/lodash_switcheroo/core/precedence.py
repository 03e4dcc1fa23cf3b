"""
Operator Precedence Analysis on Raw Expression Text.

When an argument is spliced in front of a `.method(...)` suffix, or into an
operator template, its own top-level operators may bind differently than they
did as a standalone argument (`a || b` + `.map(fn)` is `a || b.map(fn)`).
These helpers decide when a fragment has to be parenthesized. They reuse the
literal-aware scanning of `lodash_switcheroo.core.tokenizer` and only inspect
characters at nesting depth zero.
"""

import re

from lodash_switcheroo.core.tokenizer import CLOSERS, OPENERS, iter_code

_LOW_PRECEDENCE_PAIRS = ("||", "&&", "??")
_NOT_ASSIGNMENT_PREFIX = ("=", "!", "<", ">")
_SHIFT_CHARS = ("<", ">")
_OPERATOR_CHARS = frozenset("+-*/%<>=!&|^~?:,")
_NUMBER_RE = re.compile(r"^-?\d{1,30}(?:\.\d{1,30})?$")

# Characters each scan needs to see; everything else is skipped.
_PRECEDENCE_CHARS = re.compile(r"[()\[\]{}|&?=]")
_OPERAND_CHARS = re.compile(r"[()\[\]{}+\-*/%<>=!&|^~?:,\s]")


def _is_assignment(text: str, i: int) -> bool:
  """`text[i]` is an `=` not followed by `=`; `<<=`, `>>=` and `>>>=` count, `<=` / `>=` do not."""
  prev_ch = text[i - 1] if i > 0 else ""
  if prev_ch in _SHIFT_CHARS:
    return i > 1 and text[i - 2] in _SHIFT_CHARS
  return prev_ch not in _NOT_ASSIGNMENT_PREFIX


def needs_parentheses(text: str) -> bool:
  """
  Checks whether an expression must be wrapped before it becomes a method receiver.

  Triggers, at nesting depth zero and outside literals:
  - logical `||` / `&&` and nullish `??`
  - the ternary `?` (not optional chaining `?.`)
  - assignment `=`, `+=`, `>>=`, ... (not `==`, `===`, `!=`, `<=`, `>=`)

  Comparison operators alone do not trigger wrapping.

  Args:
      text (str): Raw expression.

  Returns:
      bool: True if the expression has to be parenthesized.
  """
  if not text or not isinstance(text, str):
    return False
  trimmed = text.strip()
  if not trimmed:
    return False

  depth = 0
  for i, ch in iter_code(trimmed, _PRECEDENCE_CHARS):
    if ch in OPENERS:
      depth += 1
      continue
    if ch in CLOSERS:
      depth -= 1
      continue
    if depth != 0:
      continue

    prev_ch = trimmed[i - 1] if i > 0 else ""
    next_ch = trimmed[i + 1 : i + 2]

    if ch + next_ch in _LOW_PRECEDENCE_PAIRS:
      return True
    if ch == "?" and next_ch != "." and prev_ch != "?":
      return True
    if ch == "=" and next_ch != "=" and _is_assignment(trimmed, i):
      return True

  return False


def wrap_if_needed(text: str) -> str:
  """Returns `(text)` when `needs_parentheses(text)`, else `text` unchanged."""
  return f"({text})" if needs_parentheses(text) else text


def is_atomic_expression(text: str) -> bool:
  """
  Checks whether an expression can be used as an operand of any infix operator.

  Atomic means a numeric literal, or an identifier / member / call / literal
  chain with no operator characters or whitespace at depth zero
  (`getValue()`, `obj.items[0]`, `"x"`).

  Args:
      text (str): Raw expression.

  Returns:
      bool: True if no wrapping is required in operator position.
  """
  trimmed = text.strip()
  if not trimmed:
    return False
  if _NUMBER_RE.match(trimmed):
    return True

  depth = 0
  for _, ch in iter_code(trimmed, _OPERAND_CHARS):
    if ch in OPENERS:
      depth += 1
    elif ch in CLOSERS:
      depth -= 1
    elif depth == 0 and (ch in _OPERATOR_CHARS or ch.isspace()):
      return False
  return True


def wrap_operand(text: str) -> str:
  """Returns `text` parenthesized unless it is an atomic expression."""
  stripped = text.strip()
  return stripped if is_atomic_expression(stripped) else f"({stripped})"
