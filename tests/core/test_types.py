"""
Tests for CallInfo and Fix models.
"""

import pytest
from pydantic import ValidationError

from lodash_switcheroo.core.types import CallInfo, Fix


def test_call_info_defaults():
  info = CallInfo(call_start=0, call_end=5)
  assert info.params == ""
  assert info.full_text == ""


@pytest.mark.parametrize("start, end", [(5, 5), (6, 2), (-1, 3)])
def test_call_info_rejects_bad_offsets(start, end):
  with pytest.raises(ValidationError):
    CallInfo(call_start=start, call_end=end)


def test_models_are_frozen():
  info = CallInfo(call_start=0, call_end=3, params="x", full_text="f(x)")
  with pytest.raises(ValidationError):
    info.params = "y"

  fix = Fix(range=(0, 4), text="x")
  with pytest.raises(ValidationError):
    fix.text = "y"


def test_fix_range_validation():
  assert Fix(range=(2, 2), text="").range == (2, 2)
  with pytest.raises(ValidationError):
    Fix(range=(3, 1), text="x")
  with pytest.raises(ValidationError):
    Fix(range=(-1, 2), text="x")
