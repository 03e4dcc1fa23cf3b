"""
Orchestration Engine for Call-Site Rewrites.

This module provides the `AutofixEngine`, the glue between a located lodash
call and the transform router:

1.  **Gating**: the `RuntimeConfig` include/exclude lists and the catalogue's
    `exclude_by_default` flag decide whether a rewrite may be offered.
2.  **Lookup**: the `SemanticsManager` resolves the function name to its
    target pattern.
3.  **Call Extraction**: `build_call_info` matches the call's parentheses in
    the enclosing text.
4.  **Routing**: `create_autofix_routing` produces the `Fix` (or None).

`AutofixEngine.run` wraps the pipeline for one standalone expression such as
`_.map(users, u => u.id)` and reports the outcome as a `ConversionResult`.
"""

import re
from typing import Optional, Tuple

from lodash_switcheroo.config import RuntimeConfig
from lodash_switcheroo.core import hooks
from lodash_switcheroo.core.conversion_result import ConversionResult
from lodash_switcheroo.core.router import create_autofix_routing
from lodash_switcheroo.core.tokenizer import find_closing_parenthesis
from lodash_switcheroo.core.types import CallInfo, Fix
from lodash_switcheroo.semantics.manager import SemanticsManager

# Optional negation, optional namespace (`_.`, `lodash.`), then the function name.
_CALL_SITE_RE = re.compile(
  r"^\s{0,20}(?:!\s{0,20})?(?P<callee>(?:[A-Za-z_$][\w$]{0,49}\s{0,5}\.\s{0,5})?(?P<name>[A-Za-z_$][\w$]{0,49}))\s{0,20}\("
)


def build_call_info(full_text: str, call_start: int, callee_end: int) -> Optional[CallInfo]:
  """
  Locates the argument list that follows a callee.

  Args:
      full_text (str): The enclosing source text.
      call_start (int): Offset of the first character of the callee.
      callee_end (int): Offset just past the callee name.

  Returns:
      Optional[CallInfo]: The call, or None if no balanced `(...)` follows the
      callee (only whitespace may separate them).
  """
  open_index = callee_end
  while open_index < len(full_text) and full_text[open_index].isspace():
    open_index += 1

  close_index = find_closing_parenthesis(full_text, open_index)
  if close_index == open_index or call_start >= open_index:
    return None

  return CallInfo(
    call_start=call_start,
    call_end=close_index + 1,
    params=full_text[open_index + 1 : close_index],
    full_text=full_text,
  )


def apply_fix(text: str, fix: Fix) -> str:
  """Replaces `text[fix.range[0]:fix.range[1]]` with `fix.text`."""
  start, end = fix.range
  return text[:start] + fix.text + text[end:]


class AutofixEngine:
  """
  Turns located lodash calls into native rewrites.
  """

  def __init__(
    self,
    semantics: Optional[SemanticsManager] = None,
    config: Optional[RuntimeConfig] = None,
  ):
    """
    Initializes the Engine.

    Args:
        semantics (SemanticsManager, optional): The catalogue. Loads the packaged one if None.
        config (RuntimeConfig, optional): Gating options. Defaults to permissive.
    """
    self.semantics = semantics or SemanticsManager()
    self.config = config or RuntimeConfig()

    if self.config.plugin_paths:
      hooks.load_plugins(extra_dirs=self.config.plugin_paths)

  def refusal_reason(self, function_name: str) -> Optional[str]:
    """
    Explains why a function is never rewritten, or returns None if it may be.

    Args:
        function_name (str): The lodash function name.
    """
    if not self.config.is_allowed(function_name):
      return f"'{function_name}' is {self.config.blocked_reason()}"

    alternative = self.semantics.get_alternative(function_name)
    if alternative is None:
      return f"'{function_name}' has no native alternative"
    if alternative.exclude_by_default and not self.config.allow_unsafe:
      return f"'{function_name}' -> {alternative.native} is unsafe; enable allow_unsafe to rewrite it"
    return None

  def fix_call(self, full_text: str, call_start: int, callee_end: int, function_name: str) -> Optional[Fix]:
    """
    Produces the rewrite of one located call.

    Args:
        full_text (str): The enclosing source text.
        call_start (int): Offset of the callee (including any namespace such as `_.`).
        callee_end (int): Offset just past the callee.
        function_name (str): The lodash function name, resolved past import aliases.

    Returns:
        Optional[Fix]: The replacement, or None when the call must be left alone.
    """
    if self.refusal_reason(function_name):
      return None

    call_info = build_call_info(full_text, call_start, callee_end)
    if call_info is None:
      return None

    return create_autofix_routing(call_info, self.semantics.get_target_pattern(function_name), function_name)

  def run(self, expression: str) -> ConversionResult:
    """
    Rewrites the lodash call that starts a standalone expression.

    Args:
        expression (str): e.g. `map(users, u => u.id)` or `!_.isNil(value)`.

    Returns:
        ConversionResult: The rewritten expression, or the input with the
        reason it was left unchanged.
    """
    located = self._locate(expression)
    if located is None:
      return ConversionResult(code=expression, errors=["No function call found"], success=False)

    call_start, callee_end, name = located
    pattern = self.semantics.get_target_pattern(name)

    reason = self.refusal_reason(name)
    if reason:
      return ConversionResult(
        code=expression,
        errors=[reason],
        success=False,
        function_name=name,
        target_pattern=pattern,
      )

    fix = self.fix_call(expression, call_start, callee_end, name)
    if fix is None:
      return ConversionResult(
        code=expression,
        errors=[f"No safe rewrite of this '{name}' call to {pattern}"],
        success=False,
        function_name=name,
        target_pattern=pattern,
      )

    return ConversionResult(
      code=apply_fix(expression, fix),
      function_name=name,
      target_pattern=pattern,
      fix=fix,
    )

  @staticmethod
  def _locate(expression: str) -> Optional[Tuple[int, int, str]]:
    match = _CALL_SITE_RE.match(expression)
    if not match:
      return None
    return match.start("callee"), match.end("name"), match.group("name")
