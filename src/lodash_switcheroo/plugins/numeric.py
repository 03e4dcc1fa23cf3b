"""
Plugin: Numeric Helpers.

Arithmetic helpers become infix operators, with non-atomic operands
parenthesized so that `subtract(a, b - c)` stays `a - (b - c)`.
"""

import re
from typing import Callable, Optional

from lodash_switcheroo.core.hooks import register_hook
from lodash_switcheroo.core.precedence import wrap_operand
from lodash_switcheroo.core.strategies import make_fix
from lodash_switcheroo.core.types import CallInfo, Fix
from lodash_switcheroo.plugins._shared import arguments_of

_INTEGER_LITERAL_RE = re.compile(r"^-?\d{1,15}$")
_NUMERIC_LITERAL_RE = re.compile(r"^-?\d{1,15}(?:\.\d{1,15})?$")

ARITHMETIC_OPERATORS = {
  "add": "+",
  "subtract": "-",
  "multiply": "*",
  "divide": "/",
}


def _infix_transform(operator: str) -> Callable[[CallInfo], Optional[Fix]]:
  def transform(call_info: CallInfo) -> Optional[Fix]:
    args = arguments_of(call_info, 2)
    if not args:
      return None
    left, right = args
    return make_fix(call_info, f"{wrap_operand(left)} {operator} {wrap_operand(right)}")

  transform.__name__ = f"transform_infix_{operator}"
  return transform


for _name, _operator in ARITHMETIC_OPERATORS.items():
  register_hook(_name)(_infix_transform(_operator))


@register_hook("clamp")
def transform_clamp(call_info: CallInfo) -> Optional[Fix]:
  """`clamp(n, lower, upper)` -> `Math.min(Math.max(n, lower), upper)`. The two-argument form is declined."""
  args = arguments_of(call_info, 3)
  if not args:
    return None
  number, lower, upper = args
  return make_fix(call_info, f"Math.min(Math.max({number}, {lower}), {upper})")


@register_hook("inRange")
def transform_in_range(call_info: CallInfo) -> Optional[Fix]:
  """`inRange(n, start, end)` -> `n >= start && n < end`."""
  args = arguments_of(call_info, 3)
  if not args:
    return None
  number, start, end = (wrap_operand(arg) for arg in args)
  return make_fix(call_info, f"{number} >= {start} && {number} < {end}")


@register_hook("random")
def transform_random(call_info: CallInfo) -> Optional[Fix]:
  """
  Only numeric literal bounds are rewritten, since lodash picks an integer or
  a floating-point result from the bound values themselves:

  - ``random(5)``      -> ``Math.floor(Math.random() * 6)``
  - ``random(1, 5)``   -> ``Math.floor(Math.random() * 5) + 1``
  - ``random(2.5)``    -> ``Math.random() * 2.5``
  - ``random(1, 2.5)`` -> ``Math.random() * (2.5 - 1) + 1``

  Reversed bounds are swapped, as lodash does. `random(min, max, true)` and
  non-literal bounds are declined.
  """
  args = arguments_of(call_info, 1, 2)
  if not args or not all(_NUMERIC_LITERAL_RE.match(arg) for arg in args):
    return None
  if len(args) == 1:
    args = ["0", args[0]]
  low, high = sorted(args, key=float)

  if _INTEGER_LITERAL_RE.match(low) and _INTEGER_LITERAL_RE.match(high):
    lower = int(low)
    expression = f"Math.floor(Math.random() * {int(high) - lower + 1})"
    if lower > 0:
      expression += f" + {lower}"
    elif lower < 0:
      expression += f" - {-lower}"
    return make_fix(call_info, expression)

  if float(low) == 0:
    return make_fix(call_info, f"Math.random() * {high}")
  return make_fix(call_info, f"Math.random() * ({high} - {wrap_operand(low)}) + {low}")
