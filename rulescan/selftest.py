"""
The acceptance fixtures for the packaged C-like grammar, and the harness which runs them.

`same_tokens` is the comparison used by default: same length, same content.
The reference harness only compared up to the length of the shorter sequence,
which lets missing or extra trailing tokens slip by; `prefix_equal` reproduces
that looser check for anyone who needs the old behaviour.
"""
import sys
from typing import Sequence

from .scanning.interface import ScanError, ScanListener, EchoListener
from .scanning.engine import tokenize

FIXTURES = [
	("for (int i = 0; i < 10; i++) {}", [
		"for", "(", "int", "i", "=", "0", ";", "i", "<", "10", ";", "i", "++", ")", "{", "}",
	]),
	("", []),
	("array[xyz ] += pi 3.14159e-10     ", ["array", "[", "xyz", "]", "+=", "pi", "3.14159e-10"]),
	("0x4356abdc 0777 []", ["0x4356abdc", "0777", "[", "]"]),
	("while (i >> 1 >= 0 && b & 2 == NULL)", [
		"while", "(", "i", ">>", "1", ">=", "0", "&&", "b", "&", "2", "==", "NULL", ")",
	]),
	# Every punctuator, jammed together.
	("()[]{}.->sizeof,!~>><<^|++--+/||&&?:==!=<><=>==+=-=*=/=%=>>=<<=&=^=|=&-*\"'#", [
		"(", ")", "[", "]", "{", "}", ".", "->", "sizeof", ",", "!", "~", ">>", "<<", "^", "|", "++", "--",
		"+", "/", "||", "&&", "?", ":", "==", "!=", "<", ">", "<=", ">=", "=", "+=", "-=",
		"*=", "/=", "%=", ">>=", "<<=", "&=", "^=", "|=", "&", "-", "*", "\"", "'", "#",
	]),
]

class SelfTestFailure(ScanError):
	def __init__(self, case_number, expect, found):
		super().__init__("Test %d failed: expected %r, found %r"%(case_number, expect, found))
		self.case_number, self.expect, self.found = case_number, expect, found

def same_tokens(a:Sequence[str], b:Sequence[str]) -> bool:
	return len(a) == len(b) and all(x == y for x, y in zip(a, b))

def prefix_equal(a:Sequence[str], b:Sequence[str]) -> bool:
	""" Agrees as far as the shorter sequence goes. This is weak: [] is prefix-equal to anything. """
	return all(x == y for x, y in zip(a, b))

def run_self_test(grammar, *, fixtures=FIXTURES, compare=same_tokens, listener:ScanListener=None, out=None):
	"""
	Scan each fixture, report progress on `out` (stdout by default), and raise
	SelfTestFailure at the first case whose tokens do not compare equal.
	"""
	out = out or sys.stdout
	if listener is None: listener = EchoListener(out)
	for case_number, (text, expect) in enumerate(fixtures, 1):
		print("=========== BEGINNING TEST %d ==========="%case_number, file=out)
		print("input: %r\n"%text, file=out)
		sink = tokenize(grammar, text, listener=listener)
		found = sink.release()
		if not compare(found, expect): raise SelfTestFailure(case_number, expect, found)
		print("============ TEST %d PASSED ============\n"%case_number, file=out)
	print("==============> All tests passed <==============", file=out)
