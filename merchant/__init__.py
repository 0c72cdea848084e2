#!/usr/bin/env python3
"""
Defines various package-level constants and helper functions.
"""

import os
import sys
from typing import Union

from rich.console import Console
from rich.theme import Theme
import regex

VERSION = "1.2.0"
FALLBACK_MESSAGE = "I have no idea what you are talking about"
DEFAULT_INPUT_FILENAME = "input.txt"
RICH_THEME = Theme({
	"text": "bright_blue",
	"val": "bright_blue",
	"path": "bright_blue"
})

class MerchantException(Exception):
	""" Wrapper class for merchant exceptions """

	code = 0

# Note that we skip error codes 1 and 2 as they have special meanings:
# http://www.tldp.org/LDP/abs/html/exitcodes.html

class GrammarException(MerchantException):
	""" Sentence is missing the keyword `is` """
	code = 3

class UnrecognizedInstructionException(MerchantException):
	""" Instruction is neither a unit nor a metal assignment """
	code = 4

class UnknownUnitException(MerchantException):
	""" Unit has not been assigned a numeral """
	code = 5

class UnknownMetalException(MerchantException):
	""" Metal has not been assigned a value """
	code = 6

class UnanswerableQuestionException(MerchantException):
	""" Question is neither `how much` nor `how many` """
	code = 7

class InvalidNumeralException(MerchantException):
	""" Invalid Roman numeral """
	code = 8

class InvalidFileException(MerchantException):
	""" Invalid file """
	code = 9

class InvalidAmountException(MerchantException):
	""" Amount of credits too large to compute """
	code = 10

def prep_output(message: str, plain_output: bool = False) -> str:
	"""
	Return a message formatted for the chosen output style, i.e., color or plain.
	"""

	if plain_output:
		# Replace color markup with `
		message = regex.sub(r"\[(?:/|text|val|path|link)(?:=[^\]]*?)*\]", "`", message)
		message = regex.sub(r"`+", "`", message)

	return message

def print_error(message: Union[MerchantException, str], plain_output: bool = False) -> None:
	"""
	Helper function to print a colored error message to the console.

	Allowed BBCode tags:
	[link=foo]bar[/] - Hyperlink
	[path] - Filesystem path or glob
	[val] - A numeral, amount, or other literal value
	[text] - Non-semantic text that requires color
	"""

	# We have to print to stdout in case we're called from GNU Parallel, otherwise weird newline issues occur
	output_file = sys.stdout if is_called_from_parallel() else sys.stderr

	console = Console(file=output_file, highlight=False, theme=RICH_THEME, force_terminal=is_called_from_parallel()) # force_terminal prints colors when called from GNU Parallel

	if plain_output:
		console.print(f"[Error] {prep_output(str(message), True)}")
	else:
		console.print(f"[white on red bold] Error [/] {message}")

def is_called_from_parallel(return_none=True) -> Union[bool,None]:
	"""
	Decide if we're being called from GNU parallel.
	This is good to know in case we want to tweak some output.

	This is almost always passed directly to the force_terminal option of rich.console(),
	meaning that `None` means "guess terminal status" and `False` means "no colors at all".
	We typically want to guess, so this returns None by default if not called from Parallel.
	To return false in that case, pass return_none=False
	"""

	import psutil # pylint: disable=import-outside-toplevel

	try:
		for line in psutil.Process(psutil.Process().ppid()).cmdline():
			if regex.search(fr"{os.sep}parallel$", line):
				return True
	except psutil.Error:
		# If we can't figure it out, don't worry about it
		pass

	return None if return_none else False
