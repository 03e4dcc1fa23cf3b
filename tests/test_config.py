"""
Tests for RuntimeConfig loading and gating.
"""

import pytest
from pydantic import ValidationError

from lodash_switcheroo.config import RuntimeConfig, parse_cli_list


def _pyproject(directory, body):
  (directory / "pyproject.toml").write_text(body, encoding="utf-8")


def test_defaults_are_permissive():
  config = RuntimeConfig()
  assert config.mode == "permissive"
  assert config.is_allowed("anything")
  assert not config.allow_unsafe
  assert config.plugin_paths == []


def test_include_and_exclude_are_exclusive():
  with pytest.raises(ValidationError, match="Cannot specify both"):
    RuntimeConfig(include=["map"], exclude=["filter"])


def test_include_mode():
  config = RuntimeConfig(include=["map"])
  assert config.mode == "include"
  assert config.is_allowed("map")
  assert not config.is_allowed("filter")
  assert config.blocked_reason() == "not in the allowed functions list"


def test_exclude_mode():
  config = RuntimeConfig(exclude=["merge"])
  assert config.mode == "exclude"
  assert not config.is_allowed("merge")
  assert config.is_allowed("map")
  assert config.blocked_reason() == "excluded by configuration"


def test_load_reads_tool_table(tmp_path):
  _pyproject(
    tmp_path,
    """
[tool.lodash_switcheroo]
exclude = ["merge", "cloneDeep"]
allow_unsafe = true
plugin_paths = ["handlers"]
""",
  )
  nested = tmp_path / "src" / "app"
  nested.mkdir(parents=True)

  config = RuntimeConfig.load(search_path=nested)
  assert config.exclude == ["merge", "cloneDeep"]
  assert config.allow_unsafe
  assert config.plugin_paths == [(tmp_path / "handlers").resolve()]


def test_cli_arguments_override_toml(tmp_path):
  _pyproject(tmp_path, '[tool.lodash_switcheroo]\nexclude = ["merge"]\nallow_unsafe = true\n')

  config = RuntimeConfig.load(include=["map"], allow_unsafe=False, search_path=tmp_path)
  assert config.include == ["map"]
  assert config.exclude is None
  assert not config.allow_unsafe


def test_cli_plugin_paths_are_appended(tmp_path):
  _pyproject(tmp_path, '[tool.lodash_switcheroo]\nplugin_paths = ["a"]\n')
  config = RuntimeConfig.load(plugin_paths=[tmp_path / "b"], search_path=tmp_path)
  assert config.plugin_paths == [(tmp_path / "a").resolve(), (tmp_path / "b").resolve()]


def test_toml_with_both_modes_is_rejected(tmp_path):
  _pyproject(tmp_path, '[tool.lodash_switcheroo]\ninclude = ["map"]\nexclude = ["merge"]\n')
  with pytest.raises(ValidationError):
    RuntimeConfig.load(search_path=tmp_path)


def test_unreadable_toml_is_ignored(tmp_path):
  _pyproject(tmp_path, "[tool.lodash_switcheroo\nbroken")
  config = RuntimeConfig.load(search_path=tmp_path)
  assert config.mode == "permissive"


def test_other_tool_tables_are_ignored(tmp_path):
  _pyproject(tmp_path, '[tool.black]\nline-length = 120\n')
  assert RuntimeConfig.load(search_path=tmp_path) == RuntimeConfig()


@pytest.mark.parametrize(
  "items, expected",
  [
    (None, None),
    ([], []),
    (["map"], ["map"]),
    (["map,filter", "groupBy"], ["map", "filter", "groupBy"]),
    ([" map , ,filter "], ["map", "filter"]),
  ],
)
def test_parse_cli_list(items, expected):
  assert parse_cli_list(items) == expected
