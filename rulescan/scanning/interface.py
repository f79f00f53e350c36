"""
Scanning Interface Definitions.
"""
import sys
from typing import NamedTuple, Optional

class Rule(NamedTuple):
	"""
	One lexical definition: a regular-expression pattern and a display name.
	`provenance` is the character offset of the pattern within the grammar
	text it was read from, or None for rules built directly in code.
	"""
	pattern: str
	name: str
	provenance: Optional[int] = None

class Match(NamedTuple):
	matched: bool
	length: int = 0

NO_MATCH = Match(False)

class MatchEvent(NamedTuple):
	""" What a scanner reports for each token it recognizes. """
	position: int
	text: str
	rule: Rule


class ScanError(ValueError):
	""" Base class of all exceptions arising from the scanning machinery. """

class GrammarSourceUnavailable(ScanError):
	def __init__(self, path):
		super().__init__("%s: File Not Found"%path)
		self.path = path

class GrammarDefinitionError(ScanError):
	"""
	A grammar record that cannot be read as a rule. `where` is the slice of the
	grammar text at fault, and `source` the SourceText it belongs to.
	"""
	def __init__(self, problem, line_number, where:slice=None, source=None):
		super().__init__('At line %d: %s'%(line_number, problem))
		self.problem, self.line_number = problem, line_number
		self.where, self.source = where, source

class PatternCompileError(ScanError):
	"""
	Raised if a rule's pattern is not a valid regular expression.
	Parameters are:
		the offending rule.
		the underlying `re.error`, which knows the message and position.
		the rule's index within its grammar, when known.
	"""
	def __init__(self, rule:Rule, cause, index=None):
		super().__init__("Malformed pattern %r for %r: %s"%(rule.pattern, rule.name, cause.msg))
		self.rule, self.cause, self.index = rule, cause, index

	@property
	def offset(self) -> int:
		""" Where within the pattern text the trouble was noticed. """
		return self.cause.pos or 0

class InvalidInvocation(ScanError): pass

class SinkOverflow(ScanError):
	def __init__(self, capacity):
		super().__init__("Token sink is full at capacity %d"%capacity)
		self.capacity = capacity


class ScanListener:
	"""
	Implement this interface to observe a scan as it happens.
	The scanning algorithm itself never prints; anything visible comes from here.
	"""
	def on_match(self, event:MatchEvent):
		""" A rule recognized `event.text` at `event.position`. """

	def on_stuck(self, position:int, char:str):
		""" No rule matched at `position`; `char` is about to be dropped. """

class EchoListener(ScanListener):
	""" Prints each token and its rule name, separated by a tab, one per line. """
	def __init__(self, stream=None):
		self.stream = stream

	def on_match(self, event:MatchEvent):
		print("%s\t%s"%(event.text, event.rule.name), file=self.stream or sys.stdout)
