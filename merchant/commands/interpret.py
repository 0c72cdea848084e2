"""
This module implements the `merchant interpret` command.
"""

import argparse
import sys
from pathlib import Path

import merchant
from merchant.interpreter import CommandInterpreter
from merchant.line_sources import FileLineSource, StreamLineSource


DESCRIPTION = "Read sentences in the merchant’s language and print the answers to any questions."

def run(plain_output: bool) -> int:
	"""
	Entry point for `merchant interpret`
	"""

	parser = argparse.ArgumentParser(description=DESCRIPTION, epilog=f"If no files are given and nothing is piped to stdin, read {merchant.DEFAULT_INPUT_FILENAME} in the current directory.")
	parser.add_argument("-s", "--strict", action="store_true", help="reject unit sequences that don’t form a canonical Roman numeral")
	parser.add_argument("-V", "--verbose", action="store_true", help="print the reason input couldn’t be understood to stderr")
	parser.add_argument("targets", metavar="FILE", nargs="*", help="a text file containing one sentence per line")
	args = parser.parse_args()

	interpreter = CommandInterpreter(strict=args.strict)
	sources = []

	if not args.targets and not sys.stdin.isatty():
		sources.append(StreamLineSource(sys.stdin))
	else:
		targets = args.targets if args.targets else [merchant.DEFAULT_INPUT_FILENAME]

		for target in targets:
			try:
				sources.append(FileLineSource(Path(target)))
			except merchant.InvalidFileException as ex:
				merchant.print_error(ex, plain_output=plain_output)
				return ex.code

	for source in sources:
		return_code = interpreter.process_input(source, args.verbose, plain_output)

		# The whole run stops at the first sentence that can't be understood
		if return_code:
			return return_code

	return 0
