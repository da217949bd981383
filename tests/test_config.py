"""
Tests for RuntimeConfig loading and validation.
"""

import pytest

from html_to_element.config import RuntimeConfig


def _write_toml(directory, body):
  (directory / "pyproject.toml").write_text(body, encoding="utf-8")


def test_defaults(tmp_path):
  config = RuntimeConfig.load(search_path=tmp_path)
  assert config.factory == "createElement"
  assert config.indent_width == 2
  assert config.indent == "  "


def test_loads_tool_section(tmp_path):
  _write_toml(tmp_path, '[tool.html_to_element]\nfactory = "h"\nindent_width = 4\n')

  config = RuntimeConfig.load(search_path=tmp_path)

  assert config.factory == "h"
  assert config.indent == "    "


def test_searches_parent_directories(tmp_path):
  _write_toml(tmp_path, '[tool.html_to_element]\nfactory = "React.createElement"\n')
  nested = tmp_path / "src" / "views"
  nested.mkdir(parents=True)

  assert RuntimeConfig.load(search_path=nested).factory == "React.createElement"


def test_cli_overrides_toml(tmp_path):
  _write_toml(tmp_path, '[tool.html_to_element]\nfactory = "h"\nindent_width = 4\n')

  config = RuntimeConfig.load(factory="Preact.h", indent_width=3, search_path=tmp_path)

  assert config.factory == "Preact.h"
  assert config.indent_width == 3


def test_other_tool_sections_ignored(tmp_path):
  _write_toml(tmp_path, '[tool.other]\nfactory = "nope"\n')
  assert RuntimeConfig.load(search_path=tmp_path).factory == "createElement"


@pytest.mark.parametrize("factory", ["1abc", "React.", "a b", ""])
def test_invalid_factory(factory):
  with pytest.raises(ValueError, match="Invalid factory"):
    RuntimeConfig(factory=factory)


def test_invalid_indent(tmp_path):
  _write_toml(tmp_path, "[tool.html_to_element]\nindent_width = 0\n")
  with pytest.raises(ValueError):
    RuntimeConfig.load(search_path=tmp_path)
