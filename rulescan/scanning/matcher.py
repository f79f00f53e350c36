"""
Anchored trial-matching of one rule against the unconsumed rest of the input.

The scanner never searches: it asks each rule in turn whether the pattern matches
starting exactly where the cursor sits, and the pattern sees nothing but the
remaining suffix. The suffix is not the beginning of anything, so `^` never
matches. To arrange that, the suffix goes behind a one-character sentinel and
matching starts just past it. A NUL is neither a word character nor a line break,
so `\\b` treats the start of the suffix as it would the start of a string, and
(?m)^ stays blind there too. `$` still matches at the end of the input.
"""
import re
from typing import Sequence

from .interface import Rule, Match, NO_MATCH, PatternCompileError

NOT_BOL = '\x00'

def compile_pattern(rule:Rule, index=None) -> re.Pattern:
	try: return re.compile(rule.pattern)
	except re.error as e:
		raise PatternCompileError(rule, e, index) from None

def remainder(text:str, position:int) -> str:
	""" The subject for every trial at `position`; see the module docstring. """
	return NOT_BOL + text[position:]

def match_remainder(compiled:re.Pattern, subject:str) -> Match:
	m = compiled.match(subject, 1)
	if m is None: return NO_MATCH
	return Match(True, m.end() - 1)

def try_match_at(compiled:re.Pattern, text:str) -> Match:
	"""
	Does the pattern match at the very start of `text`, the remaining suffix of the input?
	A match found later on does not count.
	"""
	return match_remainder(compiled, NOT_BOL + text)


class PatternMatcher:
	"""
	Keeps one compiled form per rule for as long as the grammar lives.
	Compilation happens on the first trial of each rule unless `compile_all` is called first.
	"""
	def __init__(self, rules:Sequence[Rule]):
		self.__rules = rules
		self.__compiled = [None] * len(rules)

	def compiled(self, index:int) -> re.Pattern:
		pattern = self.__compiled[index]
		if pattern is None:
			pattern = self.__compiled[index] = compile_pattern(self.__rules[index], index)
		return pattern

	def compile_all(self):
		for index in range(len(self.__rules)): self.compiled(index)

	def first_match(self, text:str, position:int) -> tuple[int, Match]:
		"""
		First-match-wins: the lowest-numbered rule matching at `position` is chosen,
		however much longer a later rule's match might have been.
		Returns (None, NO_MATCH) if no rule applies.
		"""
		subject = remainder(text, position)
		for index in range(len(self.__rules)):
			match = match_remainder(self.compiled(index), subject)
			if match.matched: return index, match
		return None, NO_MATCH
