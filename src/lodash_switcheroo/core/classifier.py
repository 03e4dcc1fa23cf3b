"""
Target Pattern Classifier.

Derives the structural kind of a target pattern purely from its shape:

- ``Date.now``                  -> zero-parameter static call (allow-listed)
- ``Object.keys``               -> static method
- ``Number`` (from ``toNumber``) -> constructor conversion
- ``Array.prototype.map``       -> prototype method
- ``Array.prototype.at[0]``     -> prototype method with fixed parameters
- anything else                 -> expression template (``value === null``)

The predicates are mutually exclusive when applied in the priority order of
`classify_pattern`. The zero-parameter check comes first because its shape is
a strict subset of the static-method shape.
"""

import re
from typing import Optional, Tuple

from lodash_switcheroo.enums import PatternKind
from lodash_switcheroo.core.tokenizer import extract_method_name

ZERO_PARAM_STATIC_METHODS = frozenset({"Date.now", "Math.random"})

_STATIC_RE = re.compile(r"^([A-Z][\w$]{0,49})\.([A-Za-z_$][\w$]{0,49})$")
_CONSTRUCTOR_RE = re.compile(r"^[A-Z][\w$]{0,49}$")
_CONVERSION_NAME_RE = re.compile(r"^to[A-Z][A-Za-z]{0,30}$")
_FIXED_PARAM_PROTOTYPE_RE = re.compile(r"^[A-Za-z_$][\w$]{0,49}\.prototype\.[A-Za-z_$][\w$]{0,49}\[[^\]]{1,20}\]$")


def _is_pattern(value: object) -> bool:
  return isinstance(value, str) and bool(value)


def is_zero_param_static_method(pattern: str) -> bool:
  """True for allow-listed nullary natives such as `Date.now`."""
  return _is_pattern(pattern) and pattern in ZERO_PARAM_STATIC_METHODS and bool(_STATIC_RE.match(pattern))


def is_static_method(pattern: str) -> bool:
  """
  True for `Type.method` patterns (capitalized `Type`, no `prototype` segment).

  Templates such as `Object.fromEntries(value.map(...))` are not static methods;
  they are expressions.
  """
  if not _is_pattern(pattern):
    return False
  match = _STATIC_RE.match(pattern)
  return bool(match) and match.group(2) != "prototype"


def is_constructor_call(pattern: str, function_name: Optional[str]) -> bool:
  """
  True when the pattern is a bare capitalized identifier (`Number`, `String`)
  and the source call is a value conversion (`toNumber`, `toString`).
  """
  if not _is_pattern(pattern) or not function_name:
    return False
  return bool(_CONSTRUCTOR_RE.match(pattern)) and bool(_CONVERSION_NAME_RE.match(function_name))


def is_prototype_method(pattern: str) -> bool:
  """True for `Type.prototype.method`, with or without a fixed-parameter suffix."""
  return _is_pattern(pattern) and extract_method_name(pattern) is not None


def is_fixed_param_prototype_method(pattern: str) -> bool:
  """True for `Type.prototype.method[p1, p2]`."""
  return _is_pattern(pattern) and bool(_FIXED_PARAM_PROTOTYPE_RE.match(pattern))


def is_expression_alternative(pattern: str, function_name: Optional[str] = None) -> bool:
  """Default fallback: any pattern that has none of the structural shapes."""
  if not _is_pattern(pattern):
    return False
  return not (
    is_zero_param_static_method(pattern)
    or is_static_method(pattern)
    or is_constructor_call(pattern, function_name)
    or is_prototype_method(pattern)
  )


def classify_pattern(pattern: str, function_name: Optional[str] = None) -> Optional[PatternKind]:
  """
  Classifies a target pattern into its structural kind.

  Args:
      pattern (str): The target pattern (e.g. "Array.prototype.map").
      function_name (str, optional): Source function name, needed to recognize
          constructor conversions.

  Returns:
      Optional[PatternKind]: The kind, or None for empty/non-string patterns.
  """
  if not _is_pattern(pattern):
    return None
  if is_zero_param_static_method(pattern):
    return PatternKind.ZERO_PARAM_STATIC
  if is_static_method(pattern):
    return PatternKind.STATIC_METHOD
  if is_constructor_call(pattern, function_name):
    return PatternKind.CONSTRUCTOR
  if is_prototype_method(pattern):
    return PatternKind.PROTOTYPE_METHOD
  return PatternKind.EXPRESSION


def extract_static_method_info(pattern: str) -> Optional[Tuple[str, str]]:
  """
  Splits a static pattern into its object and method.

  Example:
      >>> extract_static_method_info("Math.max")
      ('Math', 'max')

  Returns:
      Optional[Tuple[str, str]]: (object, method), or None if not a static method.
  """
  if not is_static_method(pattern):
    return None
  match = _STATIC_RE.match(pattern)
  return match.group(1), match.group(2)
