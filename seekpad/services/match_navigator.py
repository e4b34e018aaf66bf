"""Service layer for match search and navigation.

Python's ``re`` module only offers forward iteration over matches, so the
navigator keeps an ordered log of the match start offsets it has visited
and rebuilds its cursor from the beginning of the document whenever it has
to move backward.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, NamedTuple, Optional

log = logging.getLogger(__name__)


class SearchError(Exception):
	"""Base class for match navigation errors."""


class InvalidPatternError(SearchError, ValueError):
	"""Raised when a regular expression cannot be compiled."""

	def __init__(self, pattern: str, error: re.error) -> None:
		"""Initialize the error.

		Args:
			pattern: The search text that failed to compile.
			error: The underlying ``re.error``.
		"""
		super().__init__(f"Invalid regular expression {pattern!r}: {error}")
		self.pattern = pattern
		self.error = error


class NoActiveSearchError(SearchError, RuntimeError):
	"""Raised when navigating before a search has been started."""

	def __init__(self) -> None:
		"""Initialize the error."""
		super().__init__("No search has been started")


class MatchSpan(NamedTuple):
	"""Half-open ``[start, end)`` range of a match in the searched text."""

	start: int
	end: int

	@property
	def length(self) -> int:
		"""Number of characters covered by the match."""
		return self.end - self.start


def compile_search_pattern(
	search_text: str, is_regex: bool, case_sensitive: bool = True
) -> re.Pattern:
	"""Compile the user search text into a pattern.

	When *is_regex* is False the text is escaped so that regex
	metacharacters are matched literally.

	Args:
		search_text: The raw text entered by the user.
		is_regex: Whether the text is a regular expression.
		case_sensitive: Whether the pattern is case-sensitive.

	Returns:
		The compiled pattern.

	Raises:
		InvalidPatternError: If the regular expression is malformed.
	"""
	flags = re.UNICODE
	if not case_sensitive:
		flags |= re.IGNORECASE
	expression = search_text if is_regex else re.escape(search_text)
	try:
		return re.compile(expression, flags)
	except re.error as e:
		raise InvalidPatternError(search_text, e) from e


class MatchCursor:
	"""Forward-only, resettable iteration over the matches of a pattern.

	Attributes:
		pattern: The compiled pattern.
		text: The text snapshot the pattern is applied to.
		current: The match the cursor is positioned on, or None when the
			cursor has not started or is exhausted.
	"""

	def __init__(self, pattern: re.Pattern, text: str) -> None:
		"""Initialize the cursor before the first match.

		Args:
			pattern: The compiled pattern.
			text: The text to iterate over.
		"""
		self.pattern = pattern
		self.text = text
		self.current: Optional[re.Match] = None
		self._matches: Iterator[re.Match] = iter(())
		self.reset()

	def reset(self) -> None:
		"""Move the cursor back before the first match."""
		self._matches = self.pattern.finditer(self.text)
		self.current = None

	def find(self) -> Optional[re.Match]:
		"""Advance to the next match.

		Returns:
			The next match, or None when no match is left.
		"""
		self.current = next(self._matches, None)
		return self.current


class MatchNavigator:
	"""Stateful navigation through the matches of a search.

	Attributes:
		visited_starts: Start offsets of the matches passed since the cursor
			was last reset, in scan order.
	"""

	def __init__(self) -> None:
		"""Initialize a navigator with no active search."""
		self._cursor: Optional[MatchCursor] = None
		self.visited_starts: list[int] = []

	@property
	def has_active_search(self) -> bool:
		"""Whether a search has been started successfully."""
		return self._cursor is not None

	@property
	def current_match(self) -> Optional[MatchSpan]:
		"""The match the cursor is positioned on, if any."""
		if self._cursor is None or self._cursor.current is None:
			return None
		return self._span(self._cursor.current)

	@staticmethod
	def _span(match: re.Match) -> MatchSpan:
		return MatchSpan(match.start(), match.end())

	def _require_cursor(self) -> MatchCursor:
		if self._cursor is None:
			raise NoActiveSearchError()
		return self._cursor

	def start_search(
		self,
		document: str,
		search_text: str,
		is_regex: bool,
		case_sensitive: bool = True,
	) -> Optional[MatchSpan]:
		"""Start a new search and move to the first match.

		An empty *search_text* is not special-cased: like any regular
		expression engine, it produces a zero-length match at every
		position of the document.

		Args:
			document: The full document text to search.
			search_text: The text or regular expression to look for.
			is_regex: Whether *search_text* is a regular expression.
			case_sensitive: Whether matching is case-sensitive.

		Returns:
			The first match, or None if the document has no match.

		Raises:
			InvalidPatternError: If *search_text* is a malformed regular
				expression. The navigator is then left without an active
				search.
		"""
		self.visited_starts.clear()
		self._cursor = None
		pattern = compile_search_pattern(search_text, is_regex, case_sensitive)
		self._cursor = MatchCursor(pattern, document)
		log.debug(
			"Search started: pattern=%r, regex=%s, document length=%d",
			pattern.pattern,
			is_regex,
			len(document),
		)
		return self._advance(self._cursor)

	def _advance(self, cursor: MatchCursor) -> Optional[MatchSpan]:
		match = cursor.find()
		if match is None:
			return None
		self.visited_starts.append(match.start())
		return self._span(match)

	def next(self) -> Optional[MatchSpan]:
		"""Move to the next match.

		After the last match, one call returns None and rewinds the cursor,
		so the following call lands on the first match again.

		Returns:
			The next match, or None at the end of a cycle.

		Raises:
			NoActiveSearchError: If no search has been started.
		"""
		cursor = self._require_cursor()
		span = self._advance(cursor)
		if span is None:
			log.debug("No next match, rewinding cursor")
			self.visited_starts.clear()
			cursor.reset()
		return span

	def previous(self) -> Optional[MatchSpan]:
		"""Move to the previous match.

		From the first match this wraps to the last one. Right after
		:meth:`next` reported the end of a cycle, it moves back to the last
		match.

		Returns:
			The previous match, or None if the document has no match.

		Raises:
			NoActiveSearchError: If no search has been started.
		"""
		cursor = self._require_cursor()
		if len(self.visited_starts) > 1:
			target = len(self.visited_starts) - 2
		else:
			cursor.reset()
			match_count = sum(1 for _match in iter(cursor.find, None))
			if match_count == 0:
				self.visited_starts.clear()
				cursor.reset()
				return None
			target = match_count - 1
		return self._rebuild_to(cursor, target)

	def _rebuild_to(
		self, cursor: MatchCursor, target: int
	) -> Optional[MatchSpan]:
		"""Rescan from the start and stop on the match at index *target*.

		Matches are located by their scan index rather than by start offset:
		a lazy pattern can yield an empty match and a non-empty one at the
		same offset.
		"""
		self.visited_starts.clear()
		cursor.reset()
		span = None
		while len(self.visited_starts) <= target:
			span = self._advance(cursor)
			if span is None:
				break
		return span
