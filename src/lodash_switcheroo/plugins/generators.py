"""
Plugin: Sequence Generators.

- ``times(n, fn)``        -> ``Array.from({length: n}, (_, i) => fn(i))``
- ``range(end)``          -> ``Array.from({length: end}, (_, i) => i)``
- ``range(start, end)``   -> ``Array.from({length: end - start}, (_, i) => start + i)``
- ``rangeRight(...)``     -> same lengths, counting down from ``end - 1``

The `step` argument of `range` / `rangeRight` is not supported.
"""

from typing import Optional

from lodash_switcheroo.core.hooks import register_hook
from lodash_switcheroo.core.precedence import is_atomic_expression, wrap_operand
from lodash_switcheroo.core.strategies import make_fix
from lodash_switcheroo.core.types import CallInfo, Fix
from lodash_switcheroo.plugins._shared import arguments_of


@register_hook("times")
def transform_times(call_info: CallInfo) -> Optional[Fix]:
  args = arguments_of(call_info, 1, 2)
  if not args:
    return None
  if len(args) == 1:
    return make_fix(call_info, f"Array.from({{length: {args[0]}}}, (_, i) => i)")

  n, fn = args
  body = f"{fn}(i)" if is_atomic_expression(fn) else f"({fn})(i)"
  return make_fix(call_info, f"Array.from({{length: {n}}}, (_, i) => {body})")


@register_hook("range")
def transform_range(call_info: CallInfo) -> Optional[Fix]:
  args = arguments_of(call_info, 1, 2)
  if not args:
    return None
  if len(args) == 1:
    return make_fix(call_info, f"Array.from({{length: {args[0]}}}, (_, i) => i)")

  start, end = (wrap_operand(arg) for arg in args)
  return make_fix(call_info, f"Array.from({{length: {end} - {start}}}, (_, i) => {start} + i)")


@register_hook("rangeRight")
def transform_range_right(call_info: CallInfo) -> Optional[Fix]:
  args = arguments_of(call_info, 1, 2)
  if not args:
    return None
  if len(args) == 1:
    end = wrap_operand(args[0])
    return make_fix(call_info, f"Array.from({{length: {args[0]}}}, (_, i) => {end} - i - 1)")

  start, end = (wrap_operand(arg) for arg in args)
  return make_fix(call_info, f"Array.from({{length: {end} - {start}}}, (_, i) => {end} - i - 1)")
