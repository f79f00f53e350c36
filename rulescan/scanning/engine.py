"""
The scan-and-advance loop, and the sink which collects its tokens.
"""
import re
from typing import Optional

from .interface import MatchEvent, ScanListener, SinkOverflow

WHITESPACE = re.compile(r'[ \t\n\r\f\v]*') # ASCII whitespace only

class TokenSink:
	"""
	An ordered, append-only buffer of fixed capacity. Slots past the produced
	tokens hold None, so the count of tokens can be read off the slots alone.
	A string of length L yields at most L tokens, which makes len(text) a safe capacity.
	"""
	def __init__(self, capacity:int):
		self.__slots = [None] * capacity
		self.__size = 0

	def append(self, token:str):
		if self.__size >= len(self.__slots): raise SinkOverflow(len(self.__slots))
		self.__slots[self.__size] = token
		self.__size += 1

	def capacity(self): return len(self.__slots)
	def __len__(self): return self.__size
	def __iter__(self): return iter(self.__slots[:self.__size])
	def __getitem__(self, item): return self.tokens()[item]
	def __repr__(self): return "<TokenSink %d/%d %r>"%(self.__size, len(self.__slots), self.tokens())

	def tokens(self) -> list[str]: return self.__slots[:self.__size]
	def slots(self) -> list[Optional[str]]: return list(self.__slots)

	def release(self) -> list[str]:
		""" Hand over the tokens and mark every slot empty again. """
		tokens = self.tokens()
		self.__slots = [None] * len(self.__slots)
		self.__size = 0
		return tokens


class Scanner:
	"""
	Repeated anchored trial-matches against an ordered list of rules.

	At each position: skip whitespace, then try the rules in order. The first rule
	to match wins, and its text becomes a token. If nothing matches, the character
	under the cursor is dropped without comment. Either way the cursor moves forward
	by at least one character, so a rule that matches the empty string yields an
	empty token but cannot stall the scan. That one-character step is taken at the start
	of the following item, so `match()` and `slice()` still describe the empty token.

	Iterating over a scanner yields a MatchEvent per token. The listener (if any) hears
	about matches and dropped characters as they happen.
	"""

	def __init__(self, text:str, grammar, listener:ScanListener=None, at=0):
		self.__text = text
		self.__size = len(text)
		self.__matcher = grammar.matcher
		self.__rules = grammar.rules
		self.listener = listener or ScanListener()
		self.left = self.right = at
		self.__owed = 0

	def has_more(self):
		return self.right + self.__owed < self.__size

	def skip_whitespace(self):
		self.left = self.right = WHITESPACE.match(self.__text, self.right).end()

	def scan_one_item(self) -> Optional[MatchEvent]:
		""" Advance past the next token (or dropped character) and return the event, if any. """
		self.right += self.__owed
		self.__owed = 0
		self.skip_whitespace()
		if not self.has_more(): return None
		cursor = self.left
		index, match = self.__matcher.first_match(self.__text, cursor)
		if not match.matched:
			self.right = cursor + 1
			self.listener.on_stuck(cursor, self.__text[cursor])
			return None
		self.right = cursor + match.length
		event = MatchEvent(cursor, self.match(), self.__rules[index])
		if not match.length: self.__owed = 1
		self.listener.on_match(event)
		return event

	def __iter__(self):
		while self.has_more():
			event = self.scan_one_item()
			if event is not None: yield event

	def slice(self):
		""" Return a slice-object corresponding to the extent of the most recent item. """
		return slice(self.left, self.right)
	def match(self):
		""" Return the actual matched text """
		return self.__text[self.left:self.right]


def tokenize(grammar, text:str, *, capacity:int=None, listener:ScanListener=None) -> TokenSink:
	"""
	Scan the whole of `text` and return the recognized substrings in order.
	Capacity defaults to len(text), which no scan can exceed.
	"""
	sink = TokenSink(len(text) if capacity is None else capacity)
	for event in Scanner(text, grammar, listener):
		sink.append(event.text)
	return sink
