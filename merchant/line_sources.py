"""
Sources that hand lines to the interpreter one at a time.
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO, Union

import merchant


class LineSource:
	"""
	A source of input lines.

	Call `get_input()` to advance to the next line, then `get_current_line()` to read it.
	"""

	def __init__(self, lines: Iterable[str]):
		self._lines: Iterator[str] = iter(lines)
		self._current_line: Optional[str] = None

	def get_input(self) -> bool:
		"""
		Advance to the next line.

		OUTPUTS
		True if a line was fetched, False if the source is exhausted
		"""

		try:
			self._current_line = next(self._lines).strip()
		except StopIteration:
			self._current_line = None
			return False

		return True

	def get_current_line(self) -> str:
		"""
		Return the most recently fetched line with surrounding whitespace removed,
		or an empty string if there is no current line.
		"""

		return self._current_line or ""

class ListLineSource(LineSource):
	"""
	A line source backed by an in-memory list of strings.
	"""

	def __init__(self, lines: List[str]):
		super().__init__(list(lines))

class StreamLineSource(LineSource):
	"""
	A line source reading from an open text stream, like `sys.stdin`.

	The stream is not closed by this class.
	"""

	def __init__(self, stream: TextIO):
		super().__init__(stream)

class FileLineSource(LineSource):
	"""
	A line source backed by a UTF-8 text file.

	The whole file is read when the source is created.
	"""

	def __init__(self, file_path: Union[Path, str]):
		self.file_path = Path(file_path)

		try:
			with open(self.file_path, "r", encoding="utf-8") as file:
				lines = file.read().splitlines()
		except OSError as ex:
			raise merchant.InvalidFileException(f"Couldn’t open file: [path][link=file://{self.file_path}]{self.file_path}[/][/].") from ex
		except UnicodeDecodeError as ex:
			raise merchant.InvalidFileException(f"File is not UTF-8: [path][link=file://{self.file_path}]{self.file_path}[/][/].") from ex

		super().__init__(lines)
