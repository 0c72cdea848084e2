#!/usr/bin/env python3
"""
The setup script used to package the merchant library and executable.

To build the project, enter the project's root directory and do:
python3 setup.py bdist_wheel

After the project has been built, you can install it locally:
pip3 install dist/merchant-*.whl
"""

import re
from pathlib import Path
from setuptools import find_packages, setup


# Get the long description from the README file
def _get_file_contents(file_path: Path) -> str:
	"""
	Helper function to get README contents
	"""

	with open(file_path, encoding="utf-8") as file:
		return file.read()

def _get_version() -> str:
	"""
	Helper function to get VERSION from source code
	"""

	source_path = Path(__file__).resolve().parent / "merchant" / "__init__.py"
	contents = _get_file_contents(source_path)
	match = re.search(r'^VERSION = "([^"]+)"$', contents, flags=re.MULTILINE)
	if not match:
		raise RuntimeError(f"VERSION not found in {source_path}")
	return match.group(1)

setup(
	version=_get_version(),
	name="merchant",
	description="An interpreter for the merchant’s language of intergalactic units, metals, and credits.",
	long_description=_get_file_contents(Path(__file__).resolve().parent / "README.md"),
	long_description_content_type="text/markdown",
	classifiers=[
		"Development Status :: 5 - Production/Stable",
		"Intended Audience :: Developers",
		"Topic :: Text Processing :: Linguistic",
		"Programming Language :: Python :: 3"
	],
	keywords="roman numerals interpreter",
	packages=find_packages(exclude=["tests", "tests.*"]),
	include_package_data=True,
	entry_points={
		"console_scripts": [
			"merchant = merchant.main:main",
		],
	},
	python_requires=">=3.8",
	install_requires=[
		"psutil>=5.9.6",
		"regex>=2023.10.3",
		"rich>=13.7.0",
		"roman>=4.1"
	],
	extras_require={
		"test": [
			"pytest>=7.4.0"
		]
	}
)
