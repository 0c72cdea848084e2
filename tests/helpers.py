"""
Common helper functions for tests.
"""

import os
import shlex
import subprocess
from pathlib import Path
from typing import Optional

import pytest

def run(cmd: str, stdin_text: Optional[str] = None) -> subprocess.CompletedProcess:
	"""
	Run the provided shell string as a command in a subprocess. Returns a
	status object when the command completes.

	If `stdin_text` is given it is piped to the command; otherwise the command's
	stdin is empty.
	"""
	args = shlex.split(cmd)
	current_environment = os.environ.copy()
	current_environment["COLUMNS"] = "1000000"

	if stdin_text is None:
		return subprocess.run(args, stdin=subprocess.DEVNULL, stderr=subprocess.PIPE, check=False, env=current_environment)

	return subprocess.run(args, input=stdin_text.encode(), stderr=subprocess.PIPE, check=False, env=current_environment)

def must_run(cmd: str, stdin_text: Optional[str] = None) -> None:
	"""
	Run the provided shell string as a command in a subprocess. Forces a
	test failure if the command fails.
	"""
	result = run(cmd, stdin_text)
	if result.returncode == 0:
		if not result.stderr:
			return
		pytest.fail(f"stderr was not empty after command '{cmd}'\n{result.stderr.decode()}")
	else:
		fail_msg = f"error code {result.returncode} from command '{cmd}'"
		if result.stderr:
			fail_msg += "\n" + result.stderr.decode()
		pytest.fail(fail_msg)

def output_is_golden(results: str, golden_file: Path, update_golden: bool) -> bool:
	"""
	Verify the output from a test matches the contents of the golden file.
	"""
	__tracebackhide__ = True # pylint: disable=unused-variable

	if update_golden:
		with open(golden_file, "w", encoding="utf-8") as file:
			file.write(results)

	# Output of stdout should match expected output
	with open(golden_file, encoding="utf-8") as file:
		assert file.read() == results

	return True
