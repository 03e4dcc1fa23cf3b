"""
lodash-switcheroo Package.

An autofix engine that rewrites lodash calls into native JavaScript
(`_.map(xs, fn)` -> `xs.map(fn)`, `_.isNil(v)` -> `v == null`).

This package exposes the engine and configuration utilities for
programmatic usage.

Usage
-----

Simple Expression Rewrite
^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import lodash_switcheroo as ls
    print(ls.fix('_.groupBy(items, "category")'))
    # Object.groupBy(items, item => item.category)

Located Calls (Host Integration)
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from lodash_switcheroo import AutofixEngine, RuntimeConfig, apply_fix

    engine = AutofixEngine(config=RuntimeConfig(exclude=["merge"]))
    text = "const total = sum(values) + _.max(scores);"
    fix = engine.fix_call(text, call_start=28, callee_end=33, function_name="max")
    if fix:
        text = apply_fix(text, fix)
"""

from typing import List, Optional

from lodash_switcheroo.config import RuntimeConfig
from lodash_switcheroo.core.conversion_result import ConversionResult
from lodash_switcheroo.core.engine import AutofixEngine, apply_fix, build_call_info
from lodash_switcheroo.core.types import CallInfo, Fix
from lodash_switcheroo.semantics.manager import SemanticsManager

__version__ = "0.1.0"


def fix(
  expression: str,
  include: Optional[List[str]] = None,
  exclude: Optional[List[str]] = None,
  allow_unsafe: bool = False,
  semantics: Optional[SemanticsManager] = None,
) -> str:
  """
  Rewrites a single lodash call expression into native JavaScript.

  This is a high-level convenience wrapper around the `AutofixEngine`.

  Args:
      expression (str): The call, with or without a namespace (`_.map(...)`, `map(...)`).
      include (list, optional): Only rewrite these functions.
      exclude (list, optional): Never rewrite these functions.
      allow_unsafe (bool): Also rewrite entries marked exclude_by_default.
      semantics (SemanticsManager, optional): An existing catalogue instance.
          If None, a new one is loaded from disk.

  Returns:
      str: The rewritten expression.

  Raises:
      ValueError: If the call cannot be rewritten (or include and exclude are both given).
  """
  config = RuntimeConfig(include=include, exclude=exclude, allow_unsafe=allow_unsafe)
  engine = AutofixEngine(semantics=semantics, config=config)

  result = engine.run(expression)
  if not result.success:
    error_msg = "\n".join(result.errors)
    raise ValueError(f"Rewrite failed:\n{error_msg}")

  return result.code


__all__ = [
  "AutofixEngine",
  "CallInfo",
  "ConversionResult",
  "Fix",
  "RuntimeConfig",
  "SemanticsManager",
  "apply_fix",
  "build_call_info",
  "fix",
  "__version__",
]
