"""
This file contains the entry point for the `merchant` command.
"""

import argparse
import importlib
import pkgutil
import sys
from types import ModuleType
from typing import Dict

import merchant
import merchant.commands


def get_commands() -> Dict[str, ModuleType]:
	"""
	Helper function to map each command name to the submodule of merchant.commands that implements it.

	Each submodule has a one-line `DESCRIPTION` and a `run(plain_output)` function returning the exit code.
	"""

	commands = {}
	for module_info in sorted(pkgutil.iter_modules(merchant.commands.__path__), key=lambda module_info: module_info.name):
		commands[module_info.name.replace("_", "-")] = importlib.import_module(f"merchant.commands.{module_info.name}")

	return commands

def main() -> None:
	"""
	Entry point for the main `merchant` executable.

	Options before the command name belong to `merchant` itself; everything after it is
	handed to the command, which parses it from `sys.argv`.
	"""

	commands = get_commands()

	parser = argparse.ArgumentParser(description="Interpret the merchant’s language of intergalactic units and metals.")
	parser.add_argument("-p", "--plain", dest="plain_output", action="store_true", help="print plain text output, without colors or formatting")
	parser.add_argument("-v", "--version", action="version", version=merchant.VERSION, help="print version number and exit")
	parser.add_argument("command", metavar="COMMAND", choices=commands, help="one of: " + " ".join(commands))
	parser.add_argument("arguments", metavar="ARGS", nargs=argparse.REMAINDER, help="arguments for the command")
	args = parser.parse_args()

	sys.argv = [args.command] + args.arguments

	try:
		sys.exit(commands[args.command].run(args.plain_output))
	except KeyboardInterrupt:
		sys.exit(130) # See http://www.tldp.org/LDP/abs/html/exitcodes.html
