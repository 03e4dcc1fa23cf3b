"""
Path Resolution Utilities for the Catalogue.

Locates the directory holding the `k_*.json` files, either in the source
tree or inside an installed distribution.
"""

from importlib.resources import files
from pathlib import Path


def resolve_semantics_dir() -> Path:
  """
  Locates the directory containing the catalogue JSON files.

  Prioritizes the local file system (relative to this file) so that tests
  and editable installs read the source of truth. Falls back to package
  resources for installed distributions.

  Returns:
      Path: The absolute path to the 'semantics' directory.
  """
  local_path = Path(__file__).parent
  if (local_path / "k_array.json").exists():
    return local_path

  return Path(str(files("lodash_switcheroo.semantics")))
