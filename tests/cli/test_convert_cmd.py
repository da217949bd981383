"""
Tests for the 'convert' command handler.

Verifies:
1. Whole-file conversion to stdout and to --out.
2. Line-range selection substitution (--lines, --in-place).
3. Failures leave the document untouched and return exit code 1.
"""

import io

import pytest

from html_to_element.cli.handlers.convert import handle_convert, parse_line_range


@pytest.fixture
def document(tmp_path):
  path = tmp_path / "view.js"
  path.write_text('const el = (\n<div class="a"></div>\n);\n', encoding="utf-8")
  return path


def test_parse_line_range():
  assert parse_line_range("2:4") == (2, 4)
  assert parse_line_range("3") == (3, 3)


@pytest.mark.parametrize("bad", ["0:1", "4:2", "a:b", ":"])
def test_parse_line_range_rejects(bad):
  with pytest.raises(ValueError):
    parse_line_range(bad)


def test_convert_file_to_stdout(tmp_path, capsys, captured_console):
  path = tmp_path / "snippet.html"
  path.write_text("<p>Hello</p>\n", encoding="utf-8")

  assert handle_convert(path) == 0

  out = capsys.readouterr().out
  assert out == 'createElement("p", null,\n  "Hello"\n)\n'
  assert "Converted" in captured_console.export_text()


def test_convert_lines_in_place(document, captured_console):
  assert handle_convert(document, lines="2:2", in_place=True) == 0

  assert document.read_text(encoding="utf-8") == (
    'const el = (\ncreateElement("div", {\n  className: "a"\n})\n);\n'
  )
  assert "Replaced lines 2-2" in captured_console.export_text()


def test_convert_to_out_file(document, tmp_path):
  dest = tmp_path / "out" / "view.js"
  assert handle_convert(document, output_path=dest, lines="2", factory="React.createElement") == 0

  assert 'React.createElement("div"' in dest.read_text(encoding="utf-8")
  # Source untouched
  assert document.read_text(encoding="utf-8").startswith("const el = (\n<div")


def test_failure_leaves_document_untouched(document, captured_console):
  before = document.read_text(encoding="utf-8")
  document.write_text("\n" + before, encoding="utf-8")
  original = document.read_text(encoding="utf-8")

  assert handle_convert(document, lines="1:1", in_place=True) == 1

  assert document.read_text(encoding="utf-8") == original
  assert "Conversion failed" in captured_console.export_text()


def test_range_beyond_document(document, captured_console):
  assert handle_convert(document, lines="2:10", in_place=True) == 1
  assert "exceeds document length" in captured_console.export_text()


def test_invalid_range_argument(document, captured_console):
  assert handle_convert(document, lines="5:2") == 1
  assert "Invalid line range" in captured_console.export_text()


def test_missing_input(tmp_path, captured_console):
  assert handle_convert(tmp_path / "nope.html") == 1
  assert "Input not found" in captured_console.export_text()


def test_in_place_requires_file(captured_console):
  assert handle_convert(None, in_place=True) == 1


def test_stdin_input(monkeypatch, capsys):
  monkeypatch.setattr("sys.stdin", io.StringIO("<hr>"))
  assert handle_convert(None) == 0
  assert capsys.readouterr().out == 'createElement("hr")\n'


def test_invalid_factory_override(document, captured_console):
  assert handle_convert(document, factory="1nope") == 1
  assert "Invalid factory" in captured_console.export_text()
