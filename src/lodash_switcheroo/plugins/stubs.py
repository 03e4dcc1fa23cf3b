"""
Plugin: Stubs, Identity and Scheduling.

Stub functions are replaced by the constant they return; any arguments are
dropped. `identity(x)` is replaced by `x`.
"""

from typing import Callable, Optional

from lodash_switcheroo.core.hooks import register_hook
from lodash_switcheroo.core.strategies import make_fix
from lodash_switcheroo.core.types import CallInfo, Fix
from lodash_switcheroo.plugins._shared import arguments_of

STUB_VALUES = {
  "stubArray": "[]",
  "stubFalse": "false",
  "stubTrue": "true",
  "stubObject": "{}",
  "stubString": "''",
  "noop": "undefined",
}


def _constant_transform(value: str) -> Callable[[CallInfo], Optional[Fix]]:
  def transform(call_info: CallInfo) -> Optional[Fix]:
    return make_fix(call_info, value)

  transform.__name__ = f"transform_constant_{value}"
  return transform


for _name, _value in STUB_VALUES.items():
  register_hook(_name)(_constant_transform(_value))


@register_hook("identity")
def transform_identity(call_info: CallInfo) -> Optional[Fix]:
  args = arguments_of(call_info, 1)
  if not args:
    return None
  return make_fix(call_info, args[0])


@register_hook("delay")
def transform_delay(call_info: CallInfo) -> Optional[Fix]:
  """`delay(func, wait, ...args)` -> `setTimeout(func, wait, ...args)`."""
  args = arguments_of(call_info)
  if not args or len(args) < 2:
    return None
  return make_fix(call_info, f"setTimeout({', '.join(args)})")


@register_hook("defer")
def transform_defer(call_info: CallInfo) -> Optional[Fix]:
  """`defer(func, ...args)` -> `setTimeout(func, 0, ...args)`."""
  args = arguments_of(call_info)
  if not args:
    return None
  return make_fix(call_info, f"setTimeout({', '.join([args[0], '0', *args[1:]])})")
