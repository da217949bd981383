"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console capture fixture for log assertions.
"""

import io
import sys
import pytest
from pathlib import Path

from rich.console import Console

# Add src to path so we can import 'html_to_element' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from html_to_element.utils.console import reset_console, set_console  # noqa: E402


@pytest.fixture
def captured_console():
  """Routes log output to a recording console for the duration of a test."""
  capture = Console(file=io.StringIO(), record=True, width=200)
  set_console(capture)
  yield capture
  reset_console()
