import unittest
import io

from rulescan import grammar, selftest
from rulescan.scanning.engine import Scanner, tokenize

C_LIKE = grammar.default_grammar()

class TestFixtures(unittest.TestCase):
	def test_01_each_fixture(self):
		for text, expect in selftest.FIXTURES:
			with self.subTest(text=text):
				self.assertEqual(expect, tokenize(C_LIKE, text).tokens())

	def test_02_harness_reports(self):
		out = io.StringIO()
		selftest.run_self_test(C_LIKE, out=out)
		report = out.getvalue()
		self.assertIn("TEST 6 PASSED", report)
		self.assertIn("0x4356abdc\thexadecimal integer constant\n", report)
		self.assertTrue(report.rstrip().endswith("All tests passed <=============="))

	def test_03_harness_fails_on_mismatch(self):
		fixtures = [("a b", ["a", "b"]), ("a b", ["a"])]
		with self.assertRaises(selftest.SelfTestFailure) as cm:
			selftest.run_self_test(C_LIKE, fixtures=fixtures, out=io.StringIO())
		self.assertEqual(2, cm.exception.case_number)
		self.assertEqual(["a", "b"], cm.exception.found)

	def test_04_loose_comparison_passes_the_same_mismatch(self):
		fixtures = [("a b", ["a"])]
		selftest.run_self_test(C_LIKE, fixtures=fixtures, compare=selftest.prefix_equal, out=io.StringIO())

	def test_05_keywords_need_a_boundary(self):
		self.assertEqual(["format", "=", "doubled"], tokenize(C_LIKE, "format = doubled").tokens())
		events = list(Scanner("double do", C_LIKE))
		self.assertEqual(["keyword double", "keyword do"], [e.rule.name for e in events])

	def test_06_comments_and_literals(self):
		self.assertEqual(
			['/* a * b */', 'x', '=', '"s \\" t"', ';', "'\\n'", '// rest of line'],
			tokenize(C_LIKE, '/* a * b */ x = "s \\" t"; \'\\n\' // rest of line').tokens(),
		)

	def test_07_unknown_characters_are_dropped(self):
		self.assertEqual(["a", "b"], tokenize(C_LIKE, "a @ $ b `").tokens())


class TestComparison(unittest.TestCase):
	def test_strict(self):
		self.assertTrue(selftest.same_tokens([], []))
		self.assertTrue(selftest.same_tokens(["a", "b"], ("a", "b")))
		self.assertFalse(selftest.same_tokens(["a"], ["a", "b"]))
		self.assertFalse(selftest.same_tokens(["a", "c"], ["a", "b"]))

	def test_prefix(self):
		self.assertTrue(selftest.prefix_equal(["a"], ["a", "b"]))
		self.assertTrue(selftest.prefix_equal([], ["anything"]))
		self.assertFalse(selftest.prefix_equal(["a", "c"], ["a", "b"]))


if __name__ == '__main__':
	unittest.main()
