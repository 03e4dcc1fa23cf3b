"""
Data structures exchanged between the call-site locator, the autofix core and
the host's fix-application layer.

Both models are immutable. A `CallInfo` is built fresh for every located call
and a `Fix` is emitted at most once per call.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CallInfo(BaseModel):
  """
  One located call expression.

  `params` is the literal text between the call's matched parentheses.
  `full_text` is the enclosing source, used for lookarounds such as a
  preceding negation operator.
  """

  model_config = ConfigDict(frozen=True)

  call_start: int = Field(..., ge=0, description="Offset of the first character of the callee.")
  call_end: int = Field(..., description="Offset just past the closing parenthesis.")
  params: str = Field("", description="Raw argument text between the parentheses.")
  full_text: str = Field("", description="Enclosing source text.")

  @model_validator(mode="after")
  def _check_offsets(self) -> "CallInfo":
    if self.call_start >= self.call_end:
      raise ValueError(f"call_start ({self.call_start}) must be before call_end ({self.call_end})")
    return self


class Fix(BaseModel):
  """
  A single text replacement of `full_text[range[0]:range[1]]` with `text`.
  """

  model_config = ConfigDict(frozen=True)

  range: Tuple[int, int] = Field(..., description="Half-open [start, end) replacement range.")
  text: str = Field(..., description="Replacement text.")

  @model_validator(mode="after")
  def _check_range(self) -> "Fix":
    start, end = self.range
    if start < 0 or start > end:
      raise ValueError(f"Invalid fix range: {self.range}")
    return self
