"""
This module implements the `merchant help` command.
"""

import argparse

from rich import box
from rich.console import Console
from rich.table import Table

import merchant
from merchant.main import get_commands


DESCRIPTION = "List the available commands."

def run(plain_output: bool) -> int:
	"""
	Entry point for `merchant help`
	"""

	parser = argparse.ArgumentParser(description=DESCRIPTION)
	parser.parse_args()

	commands = get_commands()

	print("The following commands are available:")

	if plain_output:
		for name, module in commands.items():
			print(f"{name}\t{module.DESCRIPTION}")
	else:
		table = Table(show_header=False, box=box.SIMPLE)
		table.add_column("Command", style="bold", no_wrap=True)
		table.add_column("Description")

		for name, module in commands.items():
			table.add_row(name, module.DESCRIPTION)

		Console(highlight=False, theme=merchant.RICH_THEME).print(table)

	return 0
