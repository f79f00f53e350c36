"""
A grammar is nothing more than a priority-ordered list of rules. This module
also knows how to read one from the plain-text grammar format:

	pattern    name of the rule, which runs to the end of the line

The pattern is the first field on the line, up to a space, tab, form feed or
vertical tab, so a pattern cannot contain a literal blank (use \\s or \\x20
instead). The name is whatever follows, with surrounding blanks trimmed. Lines
end at \\n, \\r\\n or \\r; any other control character is part of the record.
Blank lines are skipped. There is no comment syntax: `#` is a perfectly good pattern.
"""
import os, re
from typing import Iterable, Sequence

from .scanning.interface import Rule, GrammarSourceUnavailable, GrammarDefinitionError, InvalidInvocation
from .scanning.matcher import PatternMatcher
from .support.failureprone import SourceText

DEFAULT_GRAMMAR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'default.tok')

RECORD = re.compile(r'[ \t\f\v]*([^ \t\f\v]+)(?:[ \t\f\v]+(.*?))?[ \t\f\v]*$')

class Grammar:
	"""
	An ordered, read-only sequence of rules, where order is priority.
	The source text (if known) comes along for the sake of error reports.
	"""
	def __init__(self, rules:Iterable[Rule], source:SourceText=None):
		self.rules : Sequence[Rule] = tuple(rules)
		self.source = source
		self.matcher = PatternMatcher(self.rules)

	def __len__(self): return len(self.rules)
	def __iter__(self): return iter(self.rules)
	def __getitem__(self, item): return self.rules[item]

	def validate(self):
		""" Compile every pattern now, so that a bad one fails before any scanning starts. """
		self.matcher.compile_all()
		return self

	@classmethod
	def of(cls, *pairs):
		""" Convenience: Grammar.of((pattern, name), ...) """
		return cls(Rule(pattern, name) for pattern, name in pairs)


def check_count(count):
	if count is not None and count <= 0:
		raise InvalidInvocation("number of rules must be positive")

def each_rule(source:SourceText) -> Iterable[Rule]:
	for row, offset, line in source.each_line():
		m = RECORD.match(line)
		if m is None: continue
		pattern, name = m.groups()
		left = offset + m.start(1)
		if not name:
			raise GrammarDefinitionError("Rule %r has no name."%pattern, row, slice(left, left+len(pattern)), source)
		yield Rule(pattern, name, left)

def parse_grammar(text:str, count:int=None, *, filename:str=None) -> Grammar:
	"""
	Read at most `count` rules (or all of them if count is None) from grammar text.
	A source with fewer rules than requested simply yields the rules it has.
	"""
	check_count(count)
	source = SourceText(text, filename=filename)
	rules = []
	for rule in each_rule(source):
		rules.append(rule)
		if len(rules) == count: break
	return Grammar(rules, source)

def load_grammar(path, count:int=None) -> Grammar:
	check_count(count)
	try:
		with open(path, encoding='utf-8') as fh: text = fh.read()
	except OSError as e:
		raise GrammarSourceUnavailable(path) from e
	return parse_grammar(text, count, filename=os.path.basename(path))

def default_grammar(count:int=None) -> Grammar:
	return load_grammar(DEFAULT_GRAMMAR, count)
