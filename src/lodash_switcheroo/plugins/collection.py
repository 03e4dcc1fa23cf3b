"""
Plugin: Collection and Object Reshaping.

Functions whose native form is a pipeline rather than a single method:

- ``pick(obj, keys)``      -> ``Object.fromEntries(keys.map(k => [k, obj[k]]))``
- ``omit(obj, keys)``      -> ``Object.fromEntries(Object.entries(obj).filter(([k]) => !keys.includes(k)))``
- ``merge(a, b, ...)``     -> ``Object.assign({}, a, b, ...)``
- ``groupBy(xs, "type")``  -> ``Object.groupBy(xs, item => item.type)``
- ``countBy(xs, fn)``      -> ``xs.reduce(...)`` tally
- ``keyBy(xs, fn)``        -> ``Object.fromEntries(xs.map(item => [(fn)(item), item]))``
- ``orderBy(xs, fn)``      -> ``xs.toSorted((a, b) => (fn)(a) - (fn)(b))``
- ``sortBy(xs[, fn])``     -> ``xs.toSorted(...)``
- ``get(obj, "a.b")``      -> ``obj?.a?.b``
- ``has(obj, key)``        -> ``key in obj``
- ``uniq(xs)``             -> ``[...new Set(xs)]``
- ``compact(xs)``          -> ``xs.filter(Boolean)``

Keyed functions (`groupBy`, `countBy`, `keyBy`, `orderBy`) accept a string
property shorthand as iteratee and require exactly two arguments.
"""

from typing import Optional

from lodash_switcheroo.core.hooks import register_hook
from lodash_switcheroo.core.precedence import wrap_if_needed, wrap_operand
from lodash_switcheroo.core.strategies import make_fix
from lodash_switcheroo.core.tokenizer import is_quoted_string, unquote
from lodash_switcheroo.core.types import CallInfo, Fix
from lodash_switcheroo.plugins._shared import arguments_of, invoke, is_property_path, path_to_accessor


def _as_key_list(keys: str) -> str:
  # A single key is accepted by lodash; the native pipeline needs an array.
  return f"[{keys}]" if is_quoted_string(keys) else wrap_if_needed(keys)


@register_hook("pick")
def transform_pick(call_info: CallInfo) -> Optional[Fix]:
  args = arguments_of(call_info, 2)
  if not args:
    return None
  obj, keys = args
  return make_fix(call_info, f"Object.fromEntries({_as_key_list(keys)}.map(k => [k, {wrap_if_needed(obj)}[k]]))")


@register_hook("omit")
def transform_omit(call_info: CallInfo) -> Optional[Fix]:
  args = arguments_of(call_info, 2)
  if not args:
    return None
  obj, keys = args
  return make_fix(
    call_info,
    f"Object.fromEntries(Object.entries({obj}).filter(([k]) => !{_as_key_list(keys)}.includes(k)))",
  )


@register_hook("merge")
def transform_merge(call_info: CallInfo) -> Optional[Fix]:
  """Every source is kept, in order: `merge(a, b, c)` -> `Object.assign({}, a, b, c)`."""
  args = arguments_of(call_info)
  if not args:
    return None
  return make_fix(call_info, f"Object.assign({{}}, {', '.join(args)})")


@register_hook("groupBy")
def transform_group_by(call_info: CallInfo) -> Optional[Fix]:
  args = arguments_of(call_info, 2)
  if not args:
    return None
  items, iteratee = args
  return make_fix(call_info, f"Object.groupBy({items}, {path_to_accessor(iteratee)})")


@register_hook("countBy")
def transform_count_by(call_info: CallInfo) -> Optional[Fix]:
  args = arguments_of(call_info, 2)
  if not args:
    return None
  items, iteratee = args
  key_fn = path_to_accessor(iteratee)
  return make_fix(
    call_info,
    f"{wrap_if_needed(items)}.reduce((acc, item) => {{ const key = ({key_fn})(item); "
    f"acc[key] = (acc[key] || 0) + 1; return acc; }}, {{}})",
  )


@register_hook("keyBy")
def transform_key_by(call_info: CallInfo) -> Optional[Fix]:
  args = arguments_of(call_info, 2)
  if not args:
    return None
  items, iteratee = args
  key_fn = path_to_accessor(iteratee)
  return make_fix(call_info, f"Object.fromEntries({wrap_if_needed(items)}.map(item => [({key_fn})(item), item]))")


@register_hook("orderBy")
def transform_order_by(call_info: CallInfo) -> Optional[Fix]:
  """
  Ascending numeric order on one iteratee. Sort directions (third argument)
  are not supported and the call is left alone.
  """
  args = arguments_of(call_info, 2)
  if not args:
    return None
  items, iteratee = args
  key_fn = path_to_accessor(iteratee)
  return make_fix(call_info, f"{wrap_if_needed(items)}.toSorted((a, b) => ({key_fn})(a) - ({key_fn})(b))")


@register_hook("sortBy")
def transform_sort_by(call_info: CallInfo) -> Optional[Fix]:
  args = arguments_of(call_info, 1, 2)
  if not args:
    return None
  items = wrap_if_needed(args[0])
  if len(args) == 1:
    return make_fix(call_info, f"{items}.toSorted()")

  key_fn = path_to_accessor(args[1])
  return make_fix(call_info, f"{items}.toSorted((a, b) => {invoke(key_fn, 'a')} - {invoke(key_fn, 'b')})")


@register_hook("get")
def transform_get(call_info: CallInfo) -> Optional[Fix]:
  """
  Only literal dotted paths are rewritten. Array paths, bracket paths and
  default values have no direct optional-chaining form.
  """
  args = arguments_of(call_info, 2)
  if not args:
    return None
  obj, path = args
  if not is_quoted_string(path) or not is_property_path(unquote(path)):
    return None
  chain = unquote(path).replace(".", "?.")
  return make_fix(call_info, f"{wrap_if_needed(obj)}?.{chain}")


@register_hook("has")
def transform_has(call_info: CallInfo) -> Optional[Fix]:
  """Own-or-inherited key test. Deep paths (`"a.b"`, `["a", "b"]`) are declined."""
  args = arguments_of(call_info, 2)
  if not args:
    return None
  obj, key = args
  if key.startswith("[") or (is_quoted_string(key) and "." in key):
    return None
  return make_fix(call_info, f"{wrap_operand(key)} in {wrap_operand(obj)}")


@register_hook("uniq")
def transform_uniq(call_info: CallInfo) -> Optional[Fix]:
  args = arguments_of(call_info, 1)
  if not args:
    return None
  return make_fix(call_info, f"[...new Set({args[0]})]")


@register_hook("compact")
def transform_compact(call_info: CallInfo) -> Optional[Fix]:
  args = arguments_of(call_info, 1)
  if not args:
    return None
  return make_fix(call_info, f"{wrap_if_needed(args[0])}.filter(Boolean)")
