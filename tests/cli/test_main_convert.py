"""
Tests for CLI argument handling and dispatch.
"""

import os
import sys
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from html_to_element.cli.__main__ import main


@patch("html_to_element.cli.commands.handle_convert")
def test_convert_dispatch(mock_handle):
  """
  Scenario: User runs `html-to-element convert page.js --lines 3:9 --in-place --factory h`.
  Expectation: Handler receives parsed values.
  """
  mock_handle.return_value = 0

  assert main(["convert", "page.js", "--lines", "3:9", "--in-place", "--factory", "h", "--indent", "4"]) == 0

  mock_handle.assert_called_once()
  args, kwargs = mock_handle.call_args
  assert args[0] == Path("page.js")
  assert kwargs["lines"] == "3:9"
  assert kwargs["in_place"] is True
  assert kwargs["factory"] == "h"
  assert kwargs["indent_width"] == 4
  assert kwargs["output_path"] is None


@patch("html_to_element.cli.commands.handle_convert")
def test_convert_defaults_to_stdin(mock_handle):
  mock_handle.return_value = 1

  assert main(["convert"]) == 1

  args, kwargs = mock_handle.call_args
  assert args[0] is None
  assert kwargs["in_place"] is False


def test_command_required():
  with pytest.raises(SystemExit):
    main([])


def test_command_execution_via_python_m():
  """
  Verify that `python -m html_to_element` works (module execution).
  """
  src = str(Path(__file__).parents[2] / "src")
  result = subprocess.run(
    [sys.executable, "-m", "html_to_element", "--help"],
    capture_output=True,
    text=True,
    env={**os.environ, "PYTHONPATH": src},
  )

  assert result.returncode == 0, result.stderr
  assert "usage:" in result.stdout
  assert "html-to-element" in result.stdout
