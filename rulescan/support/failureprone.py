"""
Pointing at the trouble in a grammar file.

The loader and the matcher only know character offsets. A SourceText turns an
offset into a line and column, pulls out that line, and draws it with carets
underneath. Lines end at \\n, \\r\\n or a lone \\r, and nowhere else; the loader
reads records by the same rule, so line numbers in error reports always agree
with the records they describe.
"""

import bisect, re, sys
from typing import NamedTuple, Any
from enum import Enum

LINE_BREAK = re.compile(r'\r\n?|\n')

class Severity(Enum):
	ERROR = "Error"

class Evidence(NamedTuple):
	slice:slice
	caption: str = "here"

	def width(self): return self.slice.stop - self.slice.start

class Issue(NamedTuple):
	"""
	A problem worth showing with context. `evidence` maps a key, which the `fetch`
	function given to `as_text` resolves to a SourceText, onto Evidence within that text.
	"""
	phase: str
	severity: Severity
	description: str
	evidence: dict[Any, list[Evidence]]

	def as_text(self, fetch) -> str:
		lines = ["%s while %s: %s"%(self.severity.value, self.phase, self.description)]
		for key, evidence in self.evidence.items():
			source = fetch(key)
			if source.filename: lines.append("Excerpt from %s :"%source.filename)
			for e in evidence:
				row, col = source.locate(e.slice.start)
				lines.append(illustration(source.line(row), col, e.width(), prefix='% 6d :'%row, caption=e.caption))
		return "\n".join(lines)

	def emit(self, fetch, file=None):
		print(self.as_text(fetch), file=file or sys.stderr)

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" The line, then carets under columns start .. start+width (at least one). Tabs line up. """
	indent = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	carets = '^' * max(1, min(width, len(single_line) - start))
	return "%s%s\n%s%s %s"%(prefix, single_line.rstrip(), indent, carets, caption)

class SourceText:
	""" A text, its name if it came from a file, and the bookkeeping to find its lines. """
	def __init__(self, content:str, filename:str=None):
		self.content = content
		self.filename = filename
		self.__starts = None

	def each_line(self):
		""" Yield (row, offset, text) per line, rows counting from one, line breaks removed. """
		row, left = 1, 0
		for brk in LINE_BREAK.finditer(self.content):
			yield row, left, self.content[left:brk.start()]
			row, left = row + 1, brk.end()
		if left < len(self.content): yield row, left, self.content[left:]

	def __line_starts(self) -> list[int]:
		if self.__starts is None:
			self.__starts = [0] + [brk.end() for brk in LINE_BREAK.finditer(self.content)] + [len(self.content)]
		return self.__starts

	def locate(self, index:int) -> tuple[int, int]:
		""" Row (from one) and column (from zero) of a character offset. """
		starts = self.__line_starts()
		r = bisect.bisect_right(starts, index, hi=len(starts) - 1) - 1
		return r + 1, index - starts[r]

	def line(self, row:int) -> str:
		starts = self.__line_starts()
		return self.content[starts[row - 1]:starts[row]]

	def complaint(self, a_slice:slice, message:str) -> str:
		row, col = self.locate(a_slice.start)
		where = "At" if self.filename is None else self.filename + ":"
		return "%s line %d, column %d: %s\n%s"%(
			where, row, col + 1, message,
			illustration(self.line(row), col, a_slice.stop - a_slice.start, prefix=' >>> '),
		)

	def complain(self, a_slice:slice, message:str):
		print(self.complaint(a_slice, message), file=sys.stderr)
