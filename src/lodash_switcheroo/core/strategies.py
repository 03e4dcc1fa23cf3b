"""
Generic Rewrite Strategies.

One strategy per pattern kind (see `lodash_switcheroo.core.classifier`):

- Zero-param static: ``now()`` -> ``Date.now()``
- Static method: ``keys(obj)`` -> ``Object.keys(obj)``, ``max(xs)`` -> ``Math.max(...xs)``
- Constructor: ``toNumber(s)`` -> ``Number(s)``
- Prototype method: ``map(xs, fn)`` -> ``xs.map(fn)``
- Fixed-param prototype method: ``last(xs)`` -> ``xs.at(-1)``
- Expression template: ``isNull(x)`` -> ``x === null``

Every strategy returns a `Fix` or None. None means the call does not have
the shape the strategy needs; it is never an error.
"""

import re
from typing import List, Optional, Tuple

from lodash_switcheroo.core.classifier import extract_static_method_info
from lodash_switcheroo.core.precedence import is_atomic_expression, needs_parentheses
from lodash_switcheroo.core.tokenizer import (
  extract_fixed_params,
  extract_method_name,
  find_first_top_level_comma,
  is_array_like_object,
  iter_code,
  split_top_level_arguments,
)
from lodash_switcheroo.core.types import CallInfo, Fix

# Natives that take their operands as separate arguments rather than an array.
SPREAD_VARIADIC_METHODS = frozenset({("Math", "max"), ("Math", "min")})

# Source functions whose predicate must be inverted when mapped to `filter`.
REJECT_FAMILY = frozenset({"reject"})

# Positional placeholders the expression strategy can bind, one group per template style.
EXPRESSION_BINDINGS: Tuple[Tuple[str, ...], ...] = (("value", "other"), ("a", "b"))

# Placeholders that only a specialized handler knows how to bind.
UNBOUND_PLACEHOLDERS = frozenset(
  {
    "args",
    "array",
    "end",
    "fn",
    "func",
    "iteratee",
    "key",
    "keys",
    "lower",
    "max",
    "min",
    "n",
    "number",
    "obj",
    "object",
    "predicate",
    "radix",
    "size",
    "start",
    "string",
    "upper",
    "wait",
  }
)

_IDENTIFIER_RE = re.compile(r"(?<![\w$.])[A-Za-z_$][\w$]{0,49}(?![\w$])")
_FUNCTION_LITERAL_RE = re.compile(r"^(?:async\s{1,10})?function\b")

# Context around a replaced call that never changes how the replacement binds.
_LEFT_SEPARATORS = frozenset("([{,;})]")
_RIGHT_SEPARATORS = frozenset(",;)]}:")
_OPERATOR_KEYWORDS = frozenset({"typeof", "void", "await", "delete", "new", "in", "instanceof"})
_COMPARISON_OPERATORS = ("==", "!=", "<=", ">=")
_TRAILING_WORD_RE = re.compile(r"[\w$]{1,20}$")
_LEADING_WORD_RE = re.compile(r"[\w$]{1,20}")
_TRAILING_OPERATOR_RE = re.compile(r"[+\-*/%<>=!&|^~?:.]{1,4}$")


def handle_negation_operator(call_info: CallInfo, expression: str) -> Tuple[int, str]:
  """
  Absorbs a `!` that directly precedes the call into the replacement.

  `!isNull(x)` must become `!(x === null)`, not `!x === null`.

  Args:
      call_info (CallInfo): The located call.
      expression (str): The replacement for the call itself.

  Returns:
      Tuple[int, str]: (range start, replacement text).
  """
  pos = call_info.call_start - 1
  text = call_info.full_text
  while pos >= 0 and pos < len(text) and text[pos].isspace():
    pos -= 1

  if 0 <= pos < len(text) and text[pos] == "!":
    return pos, f"!({expression})"
  return call_info.call_start, expression


def _binds_left(text: str, start: int) -> bool:
  """True if the code before `start` is an operator or keyword that binds tighter than a full expression."""
  before = text[:start].rstrip()
  if not before or before[-1] in _LEFT_SEPARATORS:
    return False
  word = _TRAILING_WORD_RE.search(before)
  if word:
    return word.group() in _OPERATOR_KEYWORDS
  run = _TRAILING_OPERATOR_RE.search(before)
  if not run:
    return False
  op = run.group()
  if op.endswith(("=>", ".", ":")) or (op.endswith("?") and not op.endswith("??")):
    return False
  if op.endswith("="):
    # comparison, unless it is a compound shift assignment
    return op.endswith(_COMPARISON_OPERATORS) and not op.endswith(("<<=", ">>="))
  return True


def _binds_right(text: str, end: int) -> bool:
  """True if the code after `end` continues the call as an operand (member access, call, operator)."""
  after = text[end:].lstrip()
  if not after or after[0] in _RIGHT_SEPARATORS or after.startswith(("//", "/*")):
    return False
  word = _LEADING_WORD_RE.match(after)
  if word:
    return word.group() in _OPERATOR_KEYWORDS
  return True


def make_fix(call_info: CallInfo, expression: str, negatable: bool = True) -> Fix:
  """
  Packages a replacement expression as a `Fix` covering the whole call.

  A non-atomic replacement is parenthesized when the surrounding code would
  otherwise bind into it: `add(a, b) * c` becomes `(a + b) * c`, while
  `x = add(a, b);` stays `x = a + b;`.

  Args:
      call_info (CallInfo): The located call.
      expression (str): Replacement text for the call.
      negatable (bool): If True, a preceding `!` is absorbed (see `handle_negation_operator`).
  """
  if negatable:
    start, text = handle_negation_operator(call_info, expression)
  else:
    start, text = call_info.call_start, expression
  if start == call_info.call_start and not is_atomic_expression(text):
    full_text = call_info.full_text
    if _binds_left(full_text, start) or _binds_right(full_text, call_info.call_end):
      text = f"({text})"
  return Fix(range=(start, call_info.call_end), text=text)


def safe_receiver(receiver: str) -> str:
  """
  Prepares an expression for use before a `.method(...)` suffix.

  Known array-like receivers are converted with `Array.from(...)`; anything
  with low-precedence operators is parenthesized.
  """
  if is_array_like_object(receiver):
    return f"Array.from({receiver})"
  return f"({receiver})" if needs_parentheses(receiver) else receiver


def split_receiver(params: str) -> Tuple[str, str]:
  """Splits an argument list into (receiver, remaining arguments)."""
  idx = find_first_top_level_comma(params)
  if idx == -1:
    return params.strip(), ""
  return params[:idx].strip(), params[idx + 1 :].strip()


def is_function_literal(text: str) -> bool:
  """True for arrow functions and `function` expressions."""
  return "=>" in text or bool(_FUNCTION_LITERAL_RE.match(text.strip()))


def create_zero_param_static_fix(call_info: CallInfo, pattern: str) -> Fix:
  """
  Emits `Type.method()`. Original arguments are discarded: nullary natives
  never receive forwarded arguments.
  """
  return make_fix(call_info, f"{pattern}()", negatable=False)


def create_static_method_fix(call_info: CallInfo, pattern: str) -> Optional[Fix]:
  """
  Emits `Type.method(args)`.

  For spread-variadic natives (`Math.max`, `Math.min`) a single non-spread
  argument is spread: `max(xs)` -> `Math.max(...xs)`.
  """
  info = extract_static_method_info(pattern)
  if not info:
    return None

  obj, method = info
  params = call_info.params.strip()

  if info in SPREAD_VARIADIC_METHODS and params and not params.startswith("..."):
    if find_first_top_level_comma(params) == -1:
      params = f"...{params}"

  return make_fix(call_info, f"{obj}.{method}({params})", negatable=False)


def create_constructor_fix(call_info: CallInfo, pattern: str) -> Optional[Fix]:
  """
  Emits `Type(args)`. A conversion call without arguments has no safe native
  form and is declined.
  """
  params = call_info.params.strip()
  if not params:
    return None
  return make_fix(call_info, f"{pattern}({params})", negatable=False)


def create_prototype_method_fix(
  call_info: CallInfo,
  pattern: str,
  function_name: Optional[str] = None,
) -> Optional[Fix]:
  """
  Moves the first argument into receiver position: `map(xs, fn)` -> `xs.map(fn)`.

  The reject family inverts its predicate:
  `reject(xs, isEven)` -> `xs.filter(item => !isEven(item))`, and function
  literals are parenthesized: `xs.filter(item => !(x => x.ok)(item))`.

  Args:
      call_info (CallInfo): The located call.
      pattern (str): A `Type.prototype.method` pattern.
      function_name (str, optional): Source function name.

  Returns:
      Optional[Fix]: The fix, or None without a receiver or method.
  """
  method = extract_method_name(pattern)
  if not method:
    return None

  receiver, rest = split_receiver(call_info.params)
  if not receiver:
    return None
  target = safe_receiver(receiver)

  if function_name in REJECT_FAMILY and method == "filter":
    if not rest:
      return None
    predicate = f"({rest})" if is_function_literal(rest) else rest
    return make_fix(call_info, f"{target}.filter(item => !{predicate}(item))", negatable=False)

  return make_fix(call_info, f"{target}.{method}({rest})", negatable=False)


def create_fixed_param_prototype_method_fix(call_info: CallInfo, pattern: str) -> Optional[Fix]:
  """
  Emits `receiver.method(p1, p2)` with the parameters decoded from the
  pattern: `Array.prototype.at[-1]` on `last(xs)` gives `xs.at(-1)`.

  The whole argument list is the receiver, so calls with more than one
  argument are declined.
  """
  method = extract_method_name(pattern)
  fixed_params = extract_fixed_params(pattern)
  if not method or fixed_params is None:
    return None

  receiver = call_info.params.strip()
  if not receiver or find_first_top_level_comma(receiver) != -1:
    return None

  return make_fix(call_info, f"{safe_receiver(receiver)}.{method}({fixed_params})", negatable=False)


def _placeholder_sites(template: str) -> List[Tuple[int, int, str]]:
  """Identifiers of a template that are code (not literal text, not property names)."""
  code_positions = {i for i, _ in iter_code(template)}
  return [(m.start(), m.end(), m.group()) for m in _IDENTIFIER_RE.finditer(template) if m.start() in code_positions]


def _is_delimited_slot(template: str, start: int, end: int) -> bool:
  """True if the slot is a whole argument or element: `f(value)`, `[value, x]`."""
  left = template[:start].rstrip()[-1:]
  right = template[end:].lstrip()[:1]
  return left in ("(", "[", ",") and right in (")", "]", ",") and bool(left) and bool(right)


def create_expression_fix(call_info: CallInfo, pattern: str) -> Optional[Fix]:
  """
  Instantiates an expression template with the call's arguments.

  `value` / `other` (or `a` / `b`) are replaced by the first and second
  top-level arguments. An argument that needs parentheses is wrapped unless
  its slot is already a complete argument of an enclosing call or array.

  Declines when:
  - the call has no arguments, or one of them is empty
  - the template binds no placeholder, or uses one only a specialized handler can bind
  - the number of arguments differs from the number of bound placeholders

  Args:
      call_info (CallInfo): The located call.
      pattern (str): The expression template.

  Returns:
      Optional[Fix]: The fix, or None.
  """
  args = split_top_level_arguments(call_info.params)
  if not args or any(not arg for arg in args):
    return None

  sites = _placeholder_sites(pattern)
  names = {name for _, _, name in sites}
  if names & UNBOUND_PLACEHOLDERS:
    return None

  for group in EXPRESSION_BINDINGS:
    if group[0] in names:
      break
  else:
    return None

  required = max(group.index(name) for name in names if name in group) + 1
  if len(args) != required:
    return None

  pieces = []
  last = 0
  for start, end, name in sites:
    if name not in group:
      continue
    arg = args[group.index(name)]
    if needs_parentheses(arg) and not _is_delimited_slot(pattern, start, end):
      arg = f"({arg})"
    pieces.append(pattern[last:start])
    pieces.append(arg)
    last = end
  pieces.append(pattern[last:])

  return make_fix(call_info, "".join(pieces))
