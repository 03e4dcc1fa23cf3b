"""
Plugin: Chunking and Slicing.

All functions take exactly two arguments; lodash's implicit defaults
(`drop(xs)` meaning `drop(xs, 1)`) are not guessed.

- ``chunk(xs, size)``   -> ``Array.from({length: Math.ceil(xs.length / size)}, ...)``
- ``drop(xs, n)``       -> ``xs.slice(n)``
- ``dropRight(xs, n)``  -> ``xs.slice(0, -n)``
- ``take(xs, n)``       -> ``xs.slice(0, n)``
- ``takeRight(xs, n)``  -> ``xs.slice(-n)``
"""

from typing import Callable, Optional

from lodash_switcheroo.core.hooks import register_hook
from lodash_switcheroo.core.precedence import is_atomic_expression, wrap_if_needed, wrap_operand
from lodash_switcheroo.core.strategies import make_fix
from lodash_switcheroo.core.types import CallInfo, Fix
from lodash_switcheroo.plugins._shared import arguments_of


def negate(count: str) -> str:
  """`2` -> `-2`, `n - 1` -> `-(n - 1)`."""
  if is_atomic_expression(count) and not count.startswith("-"):
    return f"-{count}"
  return f"-({count})"


@register_hook("chunk")
def transform_chunk(call_info: CallInfo) -> Optional[Fix]:
  args = arguments_of(call_info, 2)
  if not args:
    return None
  items = wrap_if_needed(args[0])
  size = wrap_operand(args[1])
  return make_fix(
    call_info,
    f"Array.from({{length: Math.ceil({items}.length / {size})}}, (_, i) => {items}.slice(i * {size}, (i + 1) * {size}))",
  )


def _slice_transform(slice_args: Callable[[str], str]) -> Callable[[CallInfo], Optional[Fix]]:
  """Builds a handler emitting `xs.slice(<slice_args(n)>)`."""

  def transform(call_info: CallInfo) -> Optional[Fix]:
    args = arguments_of(call_info, 2)
    if not args:
      return None
    items, count = args
    return make_fix(call_info, f"{wrap_if_needed(items)}.slice({slice_args(count)})")

  return transform


transform_drop = register_hook("drop")(_slice_transform(lambda n: n))
transform_drop_right = register_hook("dropRight")(_slice_transform(lambda n: f"0, {negate(n)}"))
transform_take = register_hook("take")(_slice_transform(lambda n: f"0, {n}"))
transform_take_right = register_hook("takeRight")(_slice_transform(negate))
