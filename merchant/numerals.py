"""
Conversion between Roman numeral strings and integers.

Numeral strings handed to `decode()` are built by concatenating the letters
that a sequence of units resolves to, so they are not guaranteed to be
canonical Roman numerals. By default they are decoded permissively.
"""

from typing import Tuple

import roman

import merchant


BASE_NUMERALS = {
	"M": 1000,
	"D": 500,
	"C": 100,
	"L": 50,
	"X": 10,
	"V": 5,
	"I": 1
}

SUBTRACTIVE_NUMERALS = {
	"CM": 900,
	"CD": 400,
	"XC": 90,
	"XL": 40,
	"IX": 9,
	"IV": 4
}

# All 13 symbols, highest value first
NUMERAL_SYMBOLS: Tuple[Tuple[str, int], ...] = tuple(sorted({**BASE_NUMERALS, **SUBTRACTIVE_NUMERALS}.items(), key=lambda item: item[1], reverse=True))

def is_numeral_letter(value: str) -> bool:
	"""
	Return True if `value` is exactly one of the seven base numeral letters.
	"""

	return value in BASE_NUMERALS

def is_numeral_string(value: str) -> bool:
	"""
	Return True if every character of `value` is one of the seven base numeral letters.
	"""

	return all(letter in BASE_NUMERALS for letter in value)

def decode(numerals: str, strict: bool = False) -> int:
	"""
	Convert a string of concatenated Roman numeral symbols into an integer.

	Each symbol is consumed from the front of the string as many times as it repeats,
	from the highest value to the lowest. Non-canonical runs like `IIII` are accepted
	unless `strict` is set.

	INPUTS
	numerals: A string of Roman numeral symbols, like `MCMXLIV`
	strict: If True, raise an exception if `numerals` is not a canonical Roman numeral

	OUTPUTS
	The integer value of the string; 0 for an empty string
	"""

	if strict and numerals:
		try:
			roman.fromRoman(numerals)
		except roman.RomanError as ex:
			raise merchant.InvalidNumeralException(f"Not a canonical Roman numeral: [val]{numerals}[/].") from ex

	result = 0
	for symbol, value in NUMERAL_SYMBOLS:
		while numerals.startswith(symbol):
			result += value
			numerals = numerals[len(symbol):]

	return result

def encode(value: int) -> str:
	"""
	Convert a positive integer into its canonical Roman numeral.
	"""

	try:
		return roman.toRoman(value)
	except roman.RomanError as ex:
		raise merchant.InvalidNumeralException(f"Can’t convert [val]{value}[/] to a Roman numeral.") from ex
