"""
Runtime Configuration Store.

Controls which lodash functions the autofix engine may rewrite. Settings are
read from the `[tool.lodash_switcheroo]` table of the nearest `pyproject.toml`
and overridden by explicit (CLI) arguments:

    [tool.lodash_switcheroo]
    exclude = ["merge", "cloneDeep"]
    allow_unsafe = false
    plugin_paths = ["tools/lodash_plugins"]
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from lodash_switcheroo.utils.console import log_warning

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the autofix engine.

  `include` and `exclude` are mutually exclusive:

  - include mode: only the listed functions are rewritten
  - exclude mode: every function except the listed ones is rewritten
  - neither: every function with a catalogue entry is rewritten
  """

  include: Optional[List[str]] = Field(None, description="Only these functions are rewritten.")
  exclude: Optional[List[str]] = Field(None, description="These functions are never rewritten.")
  allow_unsafe: bool = Field(
    False,
    description="If True, entries marked exclude_by_default are rewritten too.",
  )
  plugin_paths: List[Path] = Field(default_factory=list, description="External directories to scan for handlers.")

  @model_validator(mode="after")
  def _check_exclusive(self) -> "RuntimeConfig":
    if self.include is not None and self.exclude is not None:
      raise ValueError('Cannot specify both "include" and "exclude" options. Use only one.')
    return self

  @property
  def mode(self) -> str:
    """One of 'include', 'exclude' or 'permissive'."""
    if self.include is not None:
      return "include"
    if self.exclude is not None:
      return "exclude"
    return "permissive"

  def is_allowed(self, function_name: str) -> bool:
    """
    Checks whether a function may be rewritten.

    Args:
        function_name (str): The lodash function name.

    Returns:
        bool: False if the include/exclude lists block it.
    """
    if self.include is not None:
      return function_name in self.include
    if self.exclude is not None:
      return function_name not in self.exclude
    return True

  def blocked_reason(self) -> str:
    """Human-readable reason used when `is_allowed` is False."""
    if self.exclude is not None:
      return "excluded by configuration"
    if self.include is not None:
      return "not in the allowed functions list"
    return "blocked by default configuration"

  @classmethod
  def load(
    cls,
    include: Optional[List[str]] = None,
    exclude: Optional[List[str]] = None,
    allow_unsafe: Optional[bool] = None,
    plugin_paths: Optional[List[Path]] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    An explicit `include` replaces a TOML `exclude` (and vice versa) so that the
    command line can switch modes.

    Args:
        include (Optional[List[str]]): Override for the include list.
        exclude (Optional[List[str]]): Override for the exclude list.
        allow_unsafe (Optional[bool]): Override for the unsafe switch.
        plugin_paths (Optional[List[Path]]): Extra handler directories, appended to the TOML ones.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.

    Raises:
        pydantic.ValidationError: If both include and exclude end up set.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)

    # 1. Include / Exclude
    if include is not None or exclude is not None:
      final_include, final_exclude = include, exclude
    else:
      final_include = toml_config.get("include")
      final_exclude = toml_config.get("exclude")

    # 2. Unsafe rewrites
    if allow_unsafe is not None:
      final_unsafe = allow_unsafe
    else:
      final_unsafe = toml_config.get("allow_unsafe", False)

    # 3. External Plugins (relative to the pyproject.toml that names them)
    raw_paths = toml_config.get("plugin_paths", [])
    base_dir = toml_dir or Path.cwd()
    final_plugin_paths = [(base_dir / Path(p)).resolve() for p in raw_paths]
    final_plugin_paths.extend(Path(p).resolve() for p in plugin_paths or [])

    return cls(
      include=final_include,
      exclude=final_exclude,
      allow_unsafe=final_unsafe,
      plugin_paths=final_plugin_paths,
    )


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches parents for 'pyproject.toml' and extracts the tool table.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError) as e:
        log_warning(f"Ignoring unreadable {toml_path}: {e}")
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("lodash_switcheroo", {}), parent

  return {}, None


def parse_cli_list(items: Optional[List[str]]) -> Optional[List[str]]:
  """
  Flattens repeated and comma-separated CLI values.

  `["map,filter", "groupBy"]` gives `["map", "filter", "groupBy"]`.

  Args:
      items (Optional[List[str]]): Raw values collected by argparse.

  Returns:
      Optional[List[str]]: The names, or None when the option was not given.
  """
  if items is None:
    return None
  names = []
  for item in items:
    names.extend(part.strip() for part in item.split(",") if part.strip())
  return names
