"""
This module implements the `merchant decode` command.
"""

import argparse
import sys

from rich.markup import escape

import merchant
import merchant.numerals


DESCRIPTION = "Convert a string of Roman numeral letters to a decimal number."

def run(plain_output: bool) -> int:
	"""
	Entry point for `merchant decode`
	"""

	parser = argparse.ArgumentParser(description=DESCRIPTION, epilog="Non-canonical strings like IIII are accepted unless --strict is given.")
	parser.add_argument("-n", "--no-newline", dest="newline", action="store_false", help="don’t end output with a newline")
	parser.add_argument("-s", "--strict", action="store_true", help="reject strings that aren’t canonical Roman numerals")
	parser.add_argument("numerals", metavar="NUMERAL", nargs="*", help="a string of Roman numeral letters")
	args = parser.parse_args()

	lines = []

	if not sys.stdin.isatty():
		for line in sys.stdin:
			lines.append(line.rstrip("\n"))

	for line in args.numerals:
		lines.append(line)

	for line in lines:
		numerals = line.strip().upper()

		if not merchant.numerals.is_numeral_string(numerals):
			merchant.print_error(f"Not a Roman numeral: [text]{escape(line)}[/]", plain_output=plain_output)
			return merchant.InvalidNumeralException.code

		try:
			value = merchant.numerals.decode(numerals, args.strict)
		except merchant.InvalidNumeralException as ex:
			merchant.print_error(ex, plain_output=plain_output)
			return ex.code

		if args.newline:
			print(value)
		else:
			print(value, end="")

	return 0
