import unittest

from rulescan.scanning.interface import Rule, Match, PatternCompileError
from rulescan.scanning.matcher import compile_pattern, try_match_at, PatternMatcher


class TestTryMatchAt(unittest.TestCase):
	def test_01_match_at_start(self):
		self.assertEqual(Match(True, 3), try_match_at(compile_pattern(Rule('[a-z]+', 'word')), 'abc def'))

	def test_02_later_match_does_not_count(self):
		compiled = compile_pattern(Rule('def', 'word'))
		self.assertFalse(try_match_at(compiled, 'abc def').matched)
		self.assertEqual(Match(True, 3), try_match_at(compiled, 'def'))

	def test_03_empty_match_is_a_match(self):
		self.assertEqual(Match(True, 0), try_match_at(compile_pattern(Rule('x*', 'maybe')), 'bc'))

	def test_04_caret_never_matches(self):
		for pattern in ('^a', '(?m)^a', r'\Aa'):
			with self.subTest(pattern=pattern):
				self.assertFalse(try_match_at(compile_pattern(Rule(pattern, 'anchored a')), 'a a').matched)

	def test_04a_end_anchor_is_end_of_input(self):
		compiled = compile_pattern(Rule('a$', 'last a'))
		self.assertFalse(try_match_at(compiled, 'a a').matched)
		self.assertEqual(Match(True, 1), try_match_at(compiled, 'a'))

	def test_04b_consumed_input_is_invisible(self):
		matcher = PatternMatcher((Rule('(?<=a)b', 'b after a'), Rule(r'\bb', 'b at a word start')))
		self.assertEqual((1, Match(True, 1)), matcher.first_match('ab', 1))
		self.assertFalse(try_match_at(compile_pattern(Rule(r'\Bb', 'b inside a word')), 'b').matched)

	def test_05_malformed(self):
		rule = Rule('[a-', 'broken', 17)
		with self.assertRaises(PatternCompileError) as cm:
			compile_pattern(rule, 4)
		e = cm.exception
		self.assertIs(rule, e.rule)
		self.assertEqual(4, e.index)
		self.assertEqual(0, e.offset)


class TestPatternMatcher(unittest.TestCase):
	RULES = (Rule('a', 'one'), Rule('a+', 'many'), Rule('b+', 'bees'))

	def test_01_first_match_wins(self):
		matcher = PatternMatcher(self.RULES)
		self.assertEqual((0, Match(True, 1)), matcher.first_match('aaa', 0))
		self.assertEqual((2, Match(True, 2)), matcher.first_match('abb', 1))
		self.assertEqual((None, Match(False)), matcher.first_match('abc', 2))

	def test_02_compiled_once(self):
		matcher = PatternMatcher(self.RULES)
		self.assertIs(matcher.compiled(1), matcher.compiled(1))

	def test_03_compile_all_finds_late_errors(self):
		matcher = PatternMatcher(self.RULES + (Rule('*', 'nothing to repeat'),))
		self.assertEqual(0, matcher.first_match('a', 0)[0])
		with self.assertRaises(PatternCompileError) as cm:
			matcher.compile_all()
		self.assertEqual(3, cm.exception.index)


if __name__ == '__main__':
	unittest.main()
