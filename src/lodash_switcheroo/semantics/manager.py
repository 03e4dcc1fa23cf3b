"""
SemanticsManager for Catalogue Loading and Lookup.

Loads every `k_<category>.json` file of the semantics directory into a single
name -> `NativeAlternative` index. Files that fail to parse or validate are
reported and skipped; the rest of the catalogue stays usable.
"""

import json
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

from lodash_switcheroo.enums import FunctionCategory
from lodash_switcheroo.semantics.paths import resolve_semantics_dir
from lodash_switcheroo.semantics.schema import CatalogueFile, NativeAlternative
from lodash_switcheroo.utils.console import log_warning


class SemanticsManager:
  """
  Central database of native alternatives.
  """

  def __init__(self, semantics_dir: Optional[Path] = None):
    """
    Args:
        semantics_dir: Overrides the packaged catalogue directory.
    """
    self.semantics_dir = Path(semantics_dir) if semantics_dir else resolve_semantics_dir()
    self.data: Dict[str, NativeAlternative] = {}
    self._key_origins: Dict[str, str] = {}
    self._load_catalogue()

  def _load_catalogue(self) -> None:
    if not self.semantics_dir.exists():
      log_warning(f"Catalogue directory not found: {self.semantics_dir}")
      return

    for fpath in sorted(self.semantics_dir.glob("k_*.json")):
      try:
        with open(fpath, "r", encoding="utf-8") as f:
          content = json.load(f)
        catalogue = CatalogueFile.model_validate(content)
      except (OSError, json.JSONDecodeError, ValidationError) as e:
        log_warning(f"Error loading {fpath.name}: {e}")
        continue
      self._merge(catalogue, fpath.name)

  def _merge(self, catalogue: CatalogueFile, filename: str) -> None:
    for name, alternative in catalogue.alternatives.items():
      if name in self.data:
        log_warning(f"'{name}' from {filename} overrides the entry from {self._key_origins[name]}")
      if alternative.category is None:
        alternative = alternative.model_copy(update={"category": catalogue.category})
      self.data[name] = alternative
      self._key_origins[name] = filename

  def get_alternative(self, name: str) -> Optional[NativeAlternative]:
    """Returns the catalogue entry for a lodash function, if any."""
    return self.data.get(name)

  def get_target_pattern(self, name: str) -> Optional[str]:
    """
    Returns the target pattern used by the router.

    Args:
        name: Lodash function name (e.g. "groupBy").

    Returns:
        Optional[str]: The pattern (e.g. "Object.groupBy(array, iteratee)"), or None.
    """
    alternative = self.data.get(name)
    return alternative.native if alternative else None

  def list_alternatives(self, category: Optional[FunctionCategory] = None) -> Dict[str, NativeAlternative]:
    """
    Lists catalogue entries sorted by name, optionally restricted to one category.
    """
    if category is not None:
      category = FunctionCategory(category)
    return {
      name: self.data[name] for name in sorted(self.data) if category is None or self.data[name].category == category
    }
