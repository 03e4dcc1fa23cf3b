"""
Argument helpers shared by the specialized handlers.
"""

import re
from typing import List, Optional

from lodash_switcheroo.core.strategies import is_function_literal
from lodash_switcheroo.core.tokenizer import is_quoted_string, split_top_level_arguments, unquote
from lodash_switcheroo.core.types import CallInfo

_PROPERTY_PATH_RE = re.compile(r"^[A-Za-z_$][\w$]{0,49}(?:\.[A-Za-z_$][\w$]{0,49}){0,20}$")


def arguments_of(call_info: CallInfo, *counts: int) -> Optional[List[str]]:
  """
  Splits the call's arguments, or returns None when their number is not one
  of `counts` (any non-zero number when `counts` is empty) or one is blank.
  """
  args = split_top_level_arguments(call_info.params)
  if not args or any(not arg for arg in args):
    return None
  if counts and len(args) not in counts:
    return None
  return args


def is_property_path(text: str) -> bool:
  """True for dotted identifier paths such as `user.address.city`."""
  return bool(_PROPERTY_PATH_RE.match(text))


def path_to_accessor(param: str) -> str:
  """
  Turns a string shorthand into an accessor arrow; other arguments pass through.

  `"prop"` gives `item => item.prop`, `"first-name"` gives `item => item["first-name"]`.
  """
  if not is_quoted_string(param):
    return param
  if is_property_path(unquote(param)):
    return f"item => item.{unquote(param)}"
  return f"item => item[{param}]"


def invoke(fn: str, arg: str) -> str:
  """Calls `fn` on `arg`, parenthesizing function literals: `(x => x.id)(item)`."""
  return f"({fn})({arg})" if is_function_literal(fn) else f"{fn}({arg})"
