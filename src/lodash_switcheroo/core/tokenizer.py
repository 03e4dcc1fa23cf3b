"""
Low-level Scanning Primitives for Call Arguments.

This module operates on the raw text found between the parentheses of a
located call expression. It does not parse JavaScript; it only tracks enough
lexical state to tell structural characters apart from characters that live
inside string or template literals:

1.  **Literal Modes**: single-quoted, double-quoted and backtick strings.
    Backslash escapes never terminate a literal.
2.  **Interpolations**: inside a template, `${ ... }` regions are tracked with
    their own brace depth so that the closing backtick is only recognized
    outside of them.
3.  **Nesting**: round, square and curly depths are counted independently by
    the callers that need them, up to `MAX_NESTING_DEPTH`.

Literals and runs of uninteresting code are skipped with bounded regular
expressions, so scanning time is linear in the input length.
"""

import re
from typing import Iterator, List, Optional, Tuple

OPENERS = {"(": 0, "[": 1, "{": 2}
CLOSERS = {")": 0, "]": 1, "}": 2}
QUOTES = ("'", '"', "`")

# Deeper argument lists are treated as unparseable.
MAX_NESTING_DEPTH = 256

BRACKETS_AND_COMMAS = re.compile(r"[()\[\]{},]")
PARENTHESES = re.compile(r"[()]")

_QUOTE_RE = re.compile(r"['\"`]")
_STRING_END_RE = {
  "'": re.compile(r"\\.|'", re.S),
  '"': re.compile(r'\\.|"', re.S),
}
_TEMPLATE_TOKEN_RE = re.compile(r"\\.|`|\$\{", re.S)
_BRACE_RE = re.compile(r"[{}]")

_PROTOTYPE_RE = re.compile(r"^[A-Za-z_$][\w$]{0,49}\.prototype\.([A-Za-z_$][\w$]{0,49})(?:\[[^\]]{1,20}\])?$")
_FIXED_PARAMS_RE = re.compile(r"\[([^\]]{1,20})\]$")

# Receivers known to be array-like without Array.prototype methods.
_ARRAY_LIKE_PROPERTIES = ("children", "childNodes", "classList", "style", "files")
_ARRAY_LIKE_PROPERTY_RE = re.compile(r"\.(?:" + "|".join(_ARRAY_LIKE_PROPERTIES) + r")$")
_DOM_COLLECTION_RE = re.compile(
  r"^[A-Za-z_$][\w$]{0,49}(?:\.[A-Za-z_$][\w$]{0,49}){0,10}\.(?:querySelectorAll|getElementsBy\w{1,50})\s{0,5}\("
)


def _skip_literal(text: str, start: int) -> int:
  """Returns the index just past the literal opened at `start` (or `len(text)`)."""
  quote = text[start]
  if quote != "`":
    for match in _STRING_END_RE[quote].finditer(text, start + 1):
      if match.group() == quote:
        return match.end()
    return len(text)

  pos = start + 1
  interpolation = 0
  while True:
    if interpolation:
      match = _BRACE_RE.search(text, pos)
      if not match:
        return len(text)
      interpolation += 1 if match.group() == "{" else -1
    else:
      match = _TEMPLATE_TOKEN_RE.search(text, pos)
      if not match:
        return len(text)
      if match.group() == "`":
        return match.end()
      if match.group() == "${":
        interpolation = 1
    pos = match.end()


def iter_code(text: str, only: Optional[re.Pattern] = None) -> Iterator[Tuple[int, str]]:
  """
  Yields the characters of `text` that lie outside string and template literals.

  Quote delimiters themselves, literal contents, and template interpolations
  are skipped entirely.

  Args:
      text (str): Raw source fragment.
      only (Pattern, optional): Single-character pattern; when given, only
          matching characters are yielded.

  Yields:
      Tuple[int, str]: (index, character) pairs for structural characters.
  """
  pos = 0
  length = len(text)
  while pos < length:
    quote = _QUOTE_RE.search(text, pos)
    end = quote.start() if quote else length

    if only is None:
      for i in range(pos, end):
        yield i, text[i]
    else:
      for match in only.finditer(text, pos, end):
        yield match.start(), match.group()

    if not quote:
      return
    pos = _skip_literal(text, end)


def find_first_top_level_comma(text: str) -> int:
  """
  Finds the first comma that separates two top-level arguments.

  A comma is top-level only when the round, square and curly depths are all
  zero and it is not inside a string or template literal.

  Args:
      text (str): The raw argument list (without the enclosing parentheses).

  Returns:
      int: Index of the comma, or -1 if there is none (or input is empty/not a
      string, or nested deeper than `MAX_NESTING_DEPTH`).

  Example:
      >>> find_first_top_level_comma("func(a, {b: c}), second")
      15
  """
  if not text or not isinstance(text, str):
    return -1

  depths = [0, 0, 0]
  for i, ch in iter_code(text, BRACKETS_AND_COMMAS):
    if ch in OPENERS:
      depths[OPENERS[ch]] += 1
      if depths[OPENERS[ch]] > MAX_NESTING_DEPTH:
        return -1
    elif ch in CLOSERS:
      depths[CLOSERS[ch]] -= 1
    elif depths == [0, 0, 0]:
      return i
  return -1


def split_top_level_arguments(text: str) -> List[str]:
  """
  Splits an argument list on its top-level commas.

  Segments are stripped. A single trailing empty segment (trailing comma)
  is dropped.

  Args:
      text (str): The raw argument list.

  Returns:
      List[str]: The arguments, in order. Empty input, or input nested deeper
      than `MAX_NESTING_DEPTH`, gives an empty list.
  """
  if not text or not isinstance(text, str) or not text.strip():
    return []

  args = []
  depths = [0, 0, 0]
  segment_start = 0
  for i, ch in iter_code(text, BRACKETS_AND_COMMAS):
    if ch in OPENERS:
      depths[OPENERS[ch]] += 1
      if depths[OPENERS[ch]] > MAX_NESTING_DEPTH:
        return []
    elif ch in CLOSERS:
      depths[CLOSERS[ch]] -= 1
    elif depths == [0, 0, 0]:
      args.append(text[segment_start:i].strip())
      segment_start = i + 1
  args.append(text[segment_start:].strip())

  if len(args) > 1 and args[-1] == "":
    args.pop()
  return args


def find_closing_parenthesis(text: str, open_index: int) -> int:
  """
  Finds the `)` matching the `(` located at `open_index`.

  Parentheses inside string and template literals are ignored.

  Args:
      text (str): Full source text.
      open_index (int): Index of a known opening parenthesis.

  Returns:
      int: Index of the matching `)`. If `text[open_index]` is not `(`, the
      parenthesis is never closed, or nesting exceeds `MAX_NESTING_DEPTH`,
      `open_index` itself is returned, so callers must treat
      `result == open_index` as "no match".
  """
  if not isinstance(text, str) or open_index < 0 or open_index >= len(text):
    return open_index
  if text[open_index] != "(":
    return open_index

  depth = 0
  for i, ch in iter_code(text[open_index:], PARENTHESES):
    if ch == "(":
      depth += 1
      if depth > MAX_NESTING_DEPTH:
        return open_index
    else:
      depth -= 1
      if depth == 0:
        return open_index + i
  return open_index



def extract_method_name(pattern: str) -> Optional[str]:
  """
  Extracts the method from a prototype pattern.

  Examples:
      >>> extract_method_name("Array.prototype.map")
      'map'
      >>> extract_method_name("Array.prototype.at[0]")
      'at'
      >>> extract_method_name("Array.prototype.") is None
      True

  Args:
      pattern (str): Target pattern string.

  Returns:
      Optional[str]: The method name, or None for any other shape.
  """
  if not pattern or not isinstance(pattern, str):
    return None
  match = _PROTOTYPE_RE.match(pattern)
  return match.group(1) if match else None


def extract_fixed_params(pattern: str) -> Optional[str]:
  """
  Extracts the fixed parameter encoding from a pattern such as `Array.prototype.at[-1]`.

  Args:
      pattern (str): Target pattern string.

  Returns:
      Optional[str]: The raw parameter text ("-1"), or None.
  """
  if not pattern or not isinstance(pattern, str):
    return None
  match = _FIXED_PARAMS_RE.search(pattern)
  return match.group(1) if match else None


def is_array_like_object(text: str) -> bool:
  """
  Checks whether an expression is a well-known array-like (but non-Array) receiver.

  This is literal pattern matching on a short list of shapes (`arguments`,
  DOM collections returned by `querySelectorAll` / `getElementsBy*`, and
  `.children`-style properties). Array-like values outside the list are not
  detected.

  Args:
      text (str): Receiver expression.

  Returns:
      bool: True if the receiver needs an `Array.from(...)` wrap.
  """
  if not text or not isinstance(text, str):
    return False
  trimmed = text.strip()
  if not trimmed:
    return False

  if trimmed == "arguments":
    return True
  if _ARRAY_LIKE_PROPERTY_RE.search(trimmed):
    return True
  return bool(_DOM_COLLECTION_RE.match(trimmed))


def is_quoted_string(text: str) -> bool:
  """True if `text` is exactly one single- or double-quoted string literal."""
  if len(text) < 2 or text[0] not in ("'", '"') or text[-1] != text[0]:
    return False
  # `"a" + "b"` has structural characters between its literals.
  return next(iter_code(text), None) is None


def unquote(text: str) -> str:
  """Strips the enclosing quotes of a string literal."""
  return text[1:-1]
