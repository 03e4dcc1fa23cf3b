"""
Plugin: Cloning.

- ``clone(obj)``     -> ``{...obj}`` (shallow, own enumerable properties)
- ``cloneDeep(obj)`` -> ``structuredClone(obj)``
"""

from typing import Optional

from lodash_switcheroo.core.hooks import register_hook
from lodash_switcheroo.core.precedence import wrap_if_needed
from lodash_switcheroo.core.strategies import make_fix
from lodash_switcheroo.core.types import CallInfo, Fix
from lodash_switcheroo.plugins._shared import arguments_of


@register_hook("clone")
def transform_clone(call_info: CallInfo) -> Optional[Fix]:
  args = arguments_of(call_info, 1)
  if not args:
    return None
  return make_fix(call_info, f"{{...{wrap_if_needed(args[0])}}}")


@register_hook("cloneDeep")
def transform_clone_deep(call_info: CallInfo) -> Optional[Fix]:
  args = arguments_of(call_info, 1)
  if not args:
    return None
  # Already a complete call argument.
  return make_fix(call_info, f"structuredClone({args[0]})")
