"""
Transform Router.

Chooses the rewrite for one located call:

1.  A specialized handler registered for the source function name wins.
2.  If there is none, or it declines, the target pattern is classified and
    dispatched to the matching generic strategy in
    `lodash_switcheroo.core.strategies`. Catalogue templates that only a
    handler can bind (`iteratee`, `n`, ...) make that strategy decline too.

Any failure inside a handler or strategy results in "no fix", never in an
exception reaching the caller.
"""

import logging
from typing import Optional

from lodash_switcheroo.core import strategies
from lodash_switcheroo.core.classifier import classify_pattern, is_fixed_param_prototype_method
from lodash_switcheroo.core.hooks import get_hook
from lodash_switcheroo.core.types import CallInfo, Fix
from lodash_switcheroo.enums import PatternKind

logger = logging.getLogger(__name__)


def _dispatch(call_info: CallInfo, target_pattern: str, function_name: str) -> Optional[Fix]:
  handler = get_hook(function_name)
  if handler is not None:
    logger.debug("Routing %s to specialized handler %s", function_name, handler.__name__)
    fix = handler(call_info)
    if fix is not None:
      return fix
    logger.debug("Handler for %s declined, trying generic strategies", function_name)

  kind = classify_pattern(target_pattern, function_name)
  logger.debug("Routing %s (%r) as %s", function_name, target_pattern, kind)

  if kind is PatternKind.ZERO_PARAM_STATIC:
    return strategies.create_zero_param_static_fix(call_info, target_pattern)
  elif kind is PatternKind.STATIC_METHOD:
    return strategies.create_static_method_fix(call_info, target_pattern)
  elif kind is PatternKind.CONSTRUCTOR:
    return strategies.create_constructor_fix(call_info, target_pattern)
  elif kind is PatternKind.PROTOTYPE_METHOD:
    if is_fixed_param_prototype_method(target_pattern):
      return strategies.create_fixed_param_prototype_method_fix(call_info, target_pattern)
    return strategies.create_prototype_method_fix(call_info, target_pattern, function_name)
  elif kind is PatternKind.EXPRESSION:
    return strategies.create_expression_fix(call_info, target_pattern)
  return None


def create_autofix_routing(call_info: CallInfo, target_pattern: str, function_name: str) -> Optional[Fix]:
  """
  Produces the fix for one call, or None when no safe rewrite exists.

  Args:
      call_info (CallInfo): The located call.
      target_pattern (str): The catalogue's native alternative for the function.
      function_name (str): The lodash function name (e.g. "groupBy").

  Returns:
      Optional[Fix]: The replacement for the call's range, or None.
  """
  try:
    fix = _dispatch(call_info, target_pattern, function_name)
  except Exception as e:
    # Includes handlers loaded from external plugin directories.
    logger.debug("No fix for %s: %s", function_name, e)
    return None

  if fix is None:
    logger.debug("No fix for %s", function_name)
  return fix
