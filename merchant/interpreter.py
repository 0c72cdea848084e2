"""
Defines the CommandInterpreter class, which reads sentences in the merchant's
language, learns units and metal values, and answers questions about them.
"""

from typing import Dict, List, Optional, Tuple, Union

import regex
from rich.markup import escape

import merchant
import merchant.numerals
from merchant.line_sources import LineSource


SENTENCE_SEPARATOR = " is "
HOW_MUCH_KEYWORD = "how much"
HOW_MANY_KEYWORD = "how many"
METAL_ASSIGNMENT_PATTERN = regex.compile(r"^(\d+) credits$", flags=regex.IGNORECASE)

def format_amount(amount: Union[int, float]) -> str:
	"""
	Format a credit amount for output.

	Integral amounts are printed without a decimal part; other amounts are printed
	with up to 14 significant digits.
	"""

	if isinstance(amount, float) and amount.is_integer():
		amount = int(amount)

	if isinstance(amount, int):
		try:
			return str(amount)
		except ValueError as ex:
			raise merchant.InvalidAmountException("Invalid input: the amount of credits has too many digits to print.") from ex

	return f"{amount:.14g}"

class CommandInterpreter:
	"""
	Interprets one sentence at a time.

	Instructions teach the interpreter which Roman numeral letter a unit stands for, and
	how many credits a quantity of a metal is worth. Questions ask for the value of a
	sequence of units, or the credit value of a quantity of a metal.

	Assignments persist for the lifetime of the instance. Use one instance per session.
	"""

	def __init__(self, strict: bool = False):
		self.strict = strict
		self._unit_numerals: Dict[str, str] = {}
		self._metal_values: Dict[str, Union[int, float]] = {}

	@property
	def units(self) -> Dict[str, str]:
		"""
		A copy of the map of unit names to Roman numeral letters.
		"""

		return dict(self._unit_numerals)

	@property
	def metals(self) -> Dict[str, Union[int, float]]:
		"""
		A copy of the map of lowercase metal names to their value in credits per unit.
		"""

		return dict(self._metal_values)

	def process_command(self, line: str) -> Optional[str]:
		"""
		Process a single sentence.

		INPUTS
		line: An instruction, like `glob is I`, or a question, like `how much is glob glob?`

		OUTPUTS
		The answer if `line` is a question, or None if it is an instruction
		"""

		line = line.strip()

		if is_question(line):
			return self._answer_question(line)

		self._process_instruction(line)

		return None

	def process_input(self, source: LineSource, verbose: bool = False, plain_output: bool = False) -> int:
		"""
		Process every line of `source`, printing each answer.

		On the first error, print the fallback message and stop reading lines. A blank
		line is an error like any other sentence without ` is `.

		OUTPUTS
		0 if every line was processed, otherwise the code of the exception that stopped processing
		"""

		try:
			while source.get_input():
				answer = self.process_command(source.get_current_line())

				if answer is not None:
					print(answer)

		except merchant.MerchantException as ex:
			print(merchant.FALLBACK_MESSAGE)

			if verbose:
				merchant.print_error(ex, plain_output=plain_output)

			return ex.code

		return 0

	def _process_instruction(self, line: str) -> None:
		left_side, right_side = split_sentence(line)

		if merchant.numerals.is_numeral_letter(right_side):
			self._unit_numerals[left_side] = right_side
			return

		match = METAL_ASSIGNMENT_PATTERN.match(right_side)
		if match:
			metal, units = separate_metal_from_units(left_side)
			units_value = self.convert_units_to_integer(units)

			try:
				credits_amount = int(match[1])

				# A quantity of zero can't be valued; store 0 instead of dividing by it
				if units_value > 0:
					metal_value = credits_amount // units_value if credits_amount % units_value == 0 else credits_amount / units_value
				else:
					metal_value = 0

			except (ValueError, OverflowError) as ex:
				raise merchant.InvalidAmountException(f"Invalid input: [val]{len(match[1])}[/]-digit amount of credits is too large.") from ex

			self._metal_values[metal] = metal_value
			return

		raise merchant.UnrecognizedInstructionException(f"Invalid input: [text]{escape(right_side)}[/] is neither a Roman numeral letter nor an amount of credits.")

	def _answer_question(self, line: str) -> str:
		left_side, right_side = split_sentence(line)

		if HOW_MUCH_KEYWORD in left_side:
			units = right_side.split()

			if not units:
				raise merchant.UnknownUnitException("Invalid input: no units were given.")

			units_value = self.convert_units_to_integer(units)

			return f"{right_side} is {units_value}"

		if HOW_MANY_KEYWORD in left_side:
			metal, units = separate_metal_from_units(right_side)

			if metal not in self._metal_values:
				raise merchant.UnknownMetalException(f"Invalid input: metal [text]{escape(metal)}[/] has not been assigned a value.")

			units_value = self.convert_units_to_integer(units)

			return f"{right_side} is {format_amount(units_value * self._metal_values[metal])} Credits"

		raise merchant.UnanswerableQuestionException(f"Invalid input: questions must ask [text]{HOW_MUCH_KEYWORD}[/] or [text]{HOW_MANY_KEYWORD}[/].")

	def convert_units_to_integer(self, units: List[str]) -> int:
		"""
		Convert a sequence of unit names into an integer.

		The Roman numeral letters of the units are concatenated in order, then decoded.

		INPUTS
		units: A list of unit names that have already been assigned a letter

		OUTPUTS
		The decoded value of the units
		"""

		numerals = ""
		for unit in units:
			if unit not in self._unit_numerals:
				raise merchant.UnknownUnitException(f"Invalid input: unknown unit [text]{escape(unit)}[/].")

			numerals += self._unit_numerals[unit]

		return merchant.numerals.decode(numerals, self.strict)

def is_question(line: str) -> bool:
	"""
	Return True if the trimmed line is a question.
	"""

	return line.endswith("?")

def split_sentence(line: str) -> Tuple[str, str]:
	"""
	Split a sentence on its first ` is `.

	OUTPUTS
	A tuple of (left side, right side); the right side is stripped of surrounding spaces and question marks
	"""

	if SENTENCE_SEPARATOR not in line:
		raise merchant.GrammarException(f"Invalid input: missing the keyword [text]is[/] in [text]{escape(line)}[/].")

	left_side, right_side = line.split(SENTENCE_SEPARATOR, 1)

	return (left_side.strip(), right_side.strip(" ?"))

def separate_metal_from_units(text: str) -> Tuple[str, List[str]]:
	"""
	Separate the metal name, which is the last word of `text`, from the units before it.

	OUTPUTS
	A tuple of (lowercase metal name, list of unit names)
	"""

	tokens = text.split()

	if not tokens:
		return ("", [])

	return (tokens[-1].lower(), tokens[:-1])
