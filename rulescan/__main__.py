"""
Tokenize a string according to a grammar of (pattern, name) rules,
printing each token and the name of the rule that recognized it.

The rules are tried in the order the grammar file lists them, and the first
to match wins. Whitespace is skipped; characters no rule recognizes are dropped.

Examples:
  py -m rulescan "for (int i = 0; i < 10; i++) {}"
  py -m rulescan "x := 1" --grammar my_grammar.tok --count 10
  py -m rulescan --test
  py -m rulescan -- "-=1"     (put -- before a string that starts with a minus sign)
"""

import sys, argparse

from rulescan import grammar, selftest
from rulescan.scanning.interface import ScanError, PatternCompileError, GrammarDefinitionError, EchoListener
from rulescan.scanning.engine import tokenize
from rulescan.support.failureprone import Issue, Severity, Evidence

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m rulescan', description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument('text', nargs='?', help='the string to tokenize')
	parser.add_argument('-g', '--grammar', default=grammar.DEFAULT_GRAMMAR, help='path to a grammar file (default: the bundled C-like grammar)')
	parser.add_argument('-n', '--count', type=int, help='read only this many rules from the grammar file')
	parser.add_argument('--test', action='store_true', help='run the built-in acceptance tests instead of tokenizing TEXT')
	parser.add_argument('--loose', action='store_true', help='with --test, compare tokens only up to the shorter sequence, as the reference harness did')
	args = parser.parse_args(argv)
	if args.test == (args.text is not None):
		parser.error('give either a string to tokenize or --test, but not both')
	if args.loose and not args.test:
		parser.error('--loose only applies to --test')
	return args

def report_pattern_error(e:PatternCompileError, source):
	rule = e.rule
	if source is None or rule.provenance is None:
		print(e.args[0], file=sys.stderr)
		return
	left = rule.provenance + min(e.offset, len(rule.pattern))
	evidence = Evidence(slice(left, rule.provenance + len(rule.pattern)), e.cause.msg)
	Issue("compiling patterns", Severity.ERROR, "Malformed pattern for rule %r."%rule.name, {None: [evidence]}).emit(lambda _: source)

def main(args):
	try:
		the_grammar = grammar.load_grammar(args.grammar, args.count)
		the_grammar.validate()
		if args.test:
			compare = selftest.prefix_equal if args.loose else selftest.same_tokens
			selftest.run_self_test(the_grammar, compare=compare)
		else:
			tokenize(the_grammar, args.text, listener=EchoListener())
	except PatternCompileError as e:
		report_pattern_error(e, the_grammar.source)
		exit(1)
	except GrammarDefinitionError as e:
		if e.source is None: print(e.args[0], file=sys.stderr)
		else: e.source.complain(e.where, e.problem)
		exit(1)
	except ScanError as e:
		print(e.args[0], file=sys.stderr)
		exit(1)

if __name__ == '__main__': main(parse_arguments())
