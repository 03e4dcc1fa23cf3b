"""
Pydantic Schemas for the Native Alternatives Catalogue.

This module defines the data structure of the JSON catalogue files
(`k_array.json`, `k_object.json`, ...). Each file maps lodash function names
to the native construct that replaces them:

    {
      "category": "array",
      "alternatives": {
        "first": {
          "native": "Array.prototype.at[0]",
          "description": "Get first element",
          "safety": {"level": "safe"}
        }
      }
    }

The `native` string is the target pattern consumed by the router.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from lodash_switcheroo.enums import FunctionCategory, SafetyLevel


class SafetyInfo(BaseModel):
  """
  Behavioral differences between the lodash function and its native form.
  """

  level: SafetyLevel = Field(SafetyLevel.SAFE, description="How closely the native form matches lodash.")
  concerns: List[str] = Field(default_factory=list, description="Known behavioral differences.")
  mitigation: Optional[str] = Field(None, description="How to account for the differences.")


class UsageExample(BaseModel):
  """Before/after pair shown in listings."""

  lodash: str
  native: str


class NativeAlternative(BaseModel):
  """
  Catalogue entry for a single lodash function.
  """

  model_config = ConfigDict(extra="forbid")

  native: str = Field(..., min_length=1, description="Target pattern (e.g. 'Array.prototype.map').")
  description: str = Field("", description="Human readable summary.")
  category: Optional[FunctionCategory] = Field(
    None,
    description="Filled from the enclosing file when omitted.",
  )
  safety: SafetyInfo = Field(default_factory=SafetyInfo)
  example: Optional[UsageExample] = None
  notes: List[str] = Field(default_factory=list)
  related: List[str] = Field(default_factory=list, description="Related lodash functions.")
  exclude_by_default: bool = Field(
    False,
    description="If True, the autofix is only offered when unsafe rewrites are allowed.",
  )


class CatalogueFile(BaseModel):
  """
  One `k_<category>.json` file.
  """

  category: FunctionCategory
  alternatives: Dict[str, NativeAlternative] = Field(default_factory=dict)
