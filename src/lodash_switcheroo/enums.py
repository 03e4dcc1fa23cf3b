"""
Enumerations for lodash-switcheroo.

This module defines standard enumerations used across the codebase for
catalogue categorization and target-pattern classification.
"""

from enum import Enum


class FunctionCategory(str, Enum):
  """
  Categorization of lodash functions into catalogue files.

  Used to route definitions to specific JSON files in `src/lodash_switcheroo/semantics/`.
  """

  ARRAY = "array"
  COLLECTION = "collection"
  OBJECT = "object"
  STRING = "string"
  NUMBER = "number"
  LANG = "lang"
  FUNCTION = "function"
  DATE = "date"
  UTIL = "util"


class SafetyLevel(str, Enum):
  """
  How safely a native alternative replaces the lodash call.
  """

  SAFE = "safe"
  CAUTION = "caution"
  UNSAFE = "unsafe"


class PatternKind(str, Enum):
  """
  Structural kinds of a target pattern.

  The kind is always derived from the shape of the pattern string by
  `lodash_switcheroo.core.classifier.classify_pattern`; it is never stored
  alongside the pattern.
  """

  ZERO_PARAM_STATIC = "zero_param_static"  # Date.now
  STATIC_METHOD = "static_method"  # Object.keys, Math.max
  CONSTRUCTOR = "constructor"  # Number, String
  PROTOTYPE_METHOD = "prototype_method"  # Array.prototype.map, Array.prototype.at[0]
  EXPRESSION = "expression"  # value === null, a + b
