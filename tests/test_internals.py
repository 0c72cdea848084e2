"""
Test package-level helper functions
"""

import merchant


def test_prep_output_plain():
	"""
	Verify that color markup is replaced with backticks in plain output.
	"""

	message = "Couldn’t open file: [path][link=file:///tmp/input.txt]/tmp/input.txt[/][/]."

	assert merchant.prep_output(message, True) == "Couldn’t open file: `/tmp/input.txt`."
	assert merchant.prep_output(message) == message

def test_print_error_plain(capsys):
	"""
	Verify that errors are printed to stderr with a plain label.
	"""

	merchant.print_error(merchant.UnknownMetalException("Invalid input: metal [text]gold[/] has not been assigned a value."), plain_output=True)

	out, err = capsys.readouterr()
	assert not out
	assert err == "[Error] Invalid input: metal `gold` has not been assigned a value.\n"

def test_exception_codes_are_unique():
	"""
	Verify that every exception has its own exit code, skipping 1 and 2.
	"""

	codes = [exception.code for exception in merchant.MerchantException.__subclasses__()]

	assert len(codes) == len(set(codes))
	assert min(codes) == 3
