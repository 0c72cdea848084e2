"""
This module implements the `merchant encode` command.
"""

import argparse
import sys

from rich.markup import escape

import merchant
import merchant.numerals


DESCRIPTION = "Convert a decimal number to a Roman numeral."

def run(plain_output: bool) -> int:
	"""
	Entry point for `merchant encode`
	"""

	parser = argparse.ArgumentParser(description=DESCRIPTION)
	parser.add_argument("-n", "--no-newline", dest="newline", action="store_false", help="don’t end output with a newline")
	parser.add_argument("numbers", metavar="INTEGER", nargs="*", help="an integer")
	args = parser.parse_args()

	lines = []

	if not sys.stdin.isatty():
		for line in sys.stdin:
			lines.append(line.rstrip("\n"))

	for line in args.numbers:
		lines.append(line)

	for line in lines:
		try:
			numeral = merchant.numerals.encode(int(line))
		except ValueError:
			merchant.print_error(f"Not an integer: [text]{escape(line)}[/]", plain_output=plain_output)
			return merchant.InvalidNumeralException.code
		except merchant.InvalidNumeralException as ex:
			merchant.print_error(ex, plain_output=plain_output)
			return ex.code

		if args.newline:
			print(numeral)
		else:
			print(numeral, end="")

	return 0
