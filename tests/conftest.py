"""
Customization functions for pytest.
"""

import os
from pathlib import Path
from typing import Generator

import pytest

from merchant.interpreter import CommandInterpreter

pytest.register_assert_rewrite("helpers")

def pytest_addoption(parser):
	"""
	Additional pytest command-line options.
	"""
	parser.addoption("--save-golden-files", action="store_true", default=False, help="Save updated versions of all golden output files")

@pytest.fixture
def interpreter() -> CommandInterpreter:
	"""
	Return a fresh interpreter with no units or metals assigned.
	"""
	return CommandInterpreter()

@pytest.fixture(scope="session")
def data_dir() -> Path:
	"""
	Return the Path object for the directory containing test data.
	"""
	return Path(__file__).parent / "data"

@pytest.fixture
def work__directory(tmp_path: Path) -> Generator:
	"""Return the Path object for a temporary working directory. The current working
	directory is updated to this temporary directory until the test returns.
	"""
	old_working_directory = os.getcwd()
	os.chdir(tmp_path)
	yield tmp_path
	os.chdir(old_working_directory)

@pytest.fixture(scope="session")
def update_golden(pytestconfig) -> bool:
	"""
	Save updated versions of all golden output files when this flag is True.
	"""
	return pytestconfig.getoption("--save-golden-files")
