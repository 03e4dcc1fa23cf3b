"""
Data structures representing the output of the autofix engine.

This module defines the `ConversionResult` Pydantic model, which encapsulates
the rewritten code, the applied fix, and any reason the rewrite was refused.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from lodash_switcheroo.core.types import Fix


class ConversionResult(BaseModel):
  """
  Container for the result of rewriting one expression.
  """

  code: str = Field(default="", description="The rewritten source (the input when nothing changed).")
  errors: List[str] = Field(default_factory=list, description="Reasons the rewrite was refused.")
  success: bool = Field(default=True, description="True if a fix was produced and applied.")
  function_name: Optional[str] = Field(None, description="The lodash function found at the call site.")
  target_pattern: Optional[str] = Field(None, description="The catalogue pattern used for routing.")
  fix: Optional[Fix] = Field(None, description="The applied replacement.")

  @property
  def has_errors(self) -> bool:
    """
    Check if the result contains any error messages.

    Returns:
        True if one or more errors are present.
    """
    return len(self.errors) > 0
