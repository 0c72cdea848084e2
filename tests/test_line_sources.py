"""
Tests for line sources.
"""

import io
from pathlib import Path

import pytest

import merchant
from merchant.line_sources import FileLineSource, ListLineSource, StreamLineSource


def test_list_line_source():
	"""
	Verify that lines are returned in order and trimmed, and that exhaustion is reported.
	"""

	source = ListLineSource(["  glob is I ", "how much is glob ?\n"])

	assert source.get_current_line() == ""
	assert source.get_input()
	assert source.get_current_line() == "glob is I"
	assert source.get_input()
	assert source.get_current_line() == "how much is glob ?"
	assert not source.get_input()
	assert source.get_current_line() == ""
	assert not source.get_input()

def test_stream_line_source():
	"""
	Verify that lines are read from a text stream.
	"""

	source = StreamLineSource(io.StringIO("glob is I\r\n\nprok is V"))
	lines = []

	while source.get_input():
		lines.append(source.get_current_line())

	assert lines == ["glob is I", "", "prok is V"]

def test_file_line_source(tmp_path: Path):
	"""
	Verify that lines are read from a UTF-8 file.
	"""

	file_path = tmp_path / "input.txt"
	file_path.write_text("glob is I\nglob glob Silver is 34 Credits\n", encoding="utf-8")

	source = FileLineSource(file_path)
	lines = []

	while source.get_input():
		lines.append(source.get_current_line())

	assert lines == ["glob is I", "glob glob Silver is 34 Credits"]

def test_file_line_source_missing_file(tmp_path: Path):
	"""
	Verify that a missing file raises an exception.
	"""

	with pytest.raises(merchant.InvalidFileException):
		FileLineSource(tmp_path / "missing.txt")

def test_file_line_source_not_utf8(tmp_path: Path):
	"""
	Verify that a file that isn't UTF-8 raises an exception.
	"""

	file_path = tmp_path / "latin1.txt"
	file_path.write_bytes("glob is I\nm\xe9tal is V\n".encode("latin-1"))

	with pytest.raises(merchant.InvalidFileException):
		FileLineSource(file_path)
