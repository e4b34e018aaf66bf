"""Presenter for the search toolbar.

Owns the match navigator and the search history, leaving the view
responsible only for widget management.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import TYPE_CHECKING, Callable, Optional

from seekpad.decorators import ensure_no_task_running, measure_time
from seekpad.services.match_navigator import (
	InvalidPatternError,
	MatchNavigator,
	MatchSpan,
	NoActiveSearchError,
)

if TYPE_CHECKING:
	from seekpad.views.main_frame import MainFrame

log = logging.getLogger(__name__)


def adjust_control_position(text: str, position: int) -> int:
	"""Convert a Python string offset into a native text control position.

	Native multiline text controls on Windows count a line break as two
	positions and characters outside the Basic Multilingual Plane as two
	UTF-16 code units.

	Args:
		text: The text displayed in the control.
		position: The offset in the Python string.

	Returns:
		The matching position in the control.
	"""
	relevant_text = text[:position]
	count_high_surrogates = sum(1 for c in relevant_text if ord(c) >= 0x10000)
	count_line_breaks = relevant_text.count("\n")
	return position + count_high_surrogates + count_line_breaks


class SelectionTargetAdapter:
	"""Adapter that exposes a wx.TextCtrl as a search target.

	Wraps a wx.TextCtrl (or compatible) to provide a plain Python
	interface usable by SearchPresenter without importing wx.
	"""

	def __init__(self, ctrl, native_positions: Optional[bool] = None) -> None:
		"""Initialise the adapter.

		Args:
			ctrl: A wx.TextCtrl or compatible widget.
			native_positions: Whether offsets must be converted with
				:func:`adjust_control_position`. Defaults to True on Windows.
		"""
		self._ctrl = ctrl
		if native_positions is None:
			native_positions = sys.platform == "win32"
		self._native_positions = native_positions

	def get_text(self) -> str:
		"""Return the full text content of the control."""
		return self._ctrl.GetValue()

	def set_selection(self, text: str, span: MatchSpan) -> None:
		"""Select a match, put the caret at its end and focus the control.

		Args:
			text: The text the span refers to.
			span: The match to select.
		"""
		start, end = span
		if self._native_positions:
			start = adjust_control_position(text, start)
			end = adjust_control_position(text, end)
		self._ctrl.SetInsertionPoint(end)
		self._ctrl.SetSelection(start, end)
		self._ctrl.SetFocus()


class SearchPresenter:
	"""Presenter for the search toolbar of the main frame.

	Every navigator call goes through a single lock, so starting a search
	on the worker thread and navigating from the UI thread never overlap.

	Attributes:
		view: The MainFrame view instance.
		target: The SelectionTargetAdapter wrapping the edited text control.
		navigator: The match navigator holding the search state.
		search_list: History of search strings, most recent last.
		history_size: Maximum number of entries kept in search_list.
		case_sensitive: Whether searches are case-sensitive.
		task: The worker thread of the running search, if any.
	"""

	def __init__(
		self,
		view: MainFrame,
		target: SelectionTargetAdapter,
		navigator: Optional[MatchNavigator] = None,
		initial_search_list: Optional[list[str]] = None,
		history_size: int = 20,
		case_sensitive: bool = True,
	) -> None:
		"""Initialise the presenter.

		Args:
			view: The MainFrame view.
			target: Adapter wrapping the text control being searched.
			navigator: Navigator to use; a new one is created if None.
			initial_search_list: Pre-populated search history.
			history_size: Maximum number of history entries.
			case_sensitive: Whether searches are case-sensitive.
		"""
		self.view = view
		self.target = target
		self.navigator = navigator or MatchNavigator()
		self.history_size = history_size
		self.search_list: list[str] = list(initial_search_list or [])
		self._trim_history()
		self.case_sensitive = case_sensitive
		self.task: Optional[threading.Thread] = None
		self._lock = threading.Lock()
		self._search_text = ""
		self._document = ""

	def _add_to_history(self, search_text: str) -> None:
		"""Record a search string, moving it to the end if already present."""
		if not search_text:
			return
		if search_text in self.search_list:
			self.search_list.remove(search_text)
		self.search_list.append(search_text)
		self._trim_history()

	def _trim_history(self) -> None:
		"""Drop the oldest search strings beyond history_size."""
		overflow = len(self.search_list) - self.history_size
		if overflow > 0:
			del self.search_list[:overflow]

	@ensure_no_task_running
	def on_start_search(self) -> None:
		"""Start a new search from the current view state.

		The document text is captured here, on the UI thread; the pattern
		compilation and the first scan run on a worker thread.
		"""
		search_text = self.view.get_search_text()
		use_regex = self.view.get_use_regex()
		self._add_to_history(search_text)
		self.view.sync_history(self.search_list, search_text)
		document = self.target.get_text()
		log.debug(
			"Starting search for %r (regex=%s) in %d characters",
			search_text,
			use_regex,
			len(document),
		)
		self.task = threading.Thread(
			target=self._do_start_search,
			args=(document, search_text, use_regex),
			daemon=True,
		)
		self.task.start()

	@measure_time
	def _do_start_search(
		self, document: str, search_text: str, use_regex: bool
	) -> None:
		"""Worker thread: run the first scan and notify the view via CallAfter."""
		import wx

		with self._lock:
			self._search_text = search_text
			self._document = document
			try:
				span = self.navigator.start_search(
					document, search_text, use_regex, self.case_sensitive
				)
			except InvalidPatternError as e:
				log.warning("Invalid search pattern: %s", e)
				wx.CallAfter(
					self.view.show_error,
					# Translators: Error shown when the user enters an invalid regular expression
					_("Invalid regular expression: %s") % e.error,
				)
				return
		wx.CallAfter(self._apply_result, document, search_text, span)

	@ensure_no_task_running
	def on_next(self) -> None:
		"""Move to the next match."""
		self._navigate(self.navigator.next)

	@ensure_no_task_running
	def on_previous(self) -> None:
		"""Move to the previous match."""
		self._navigate(self.navigator.previous)

	def _navigate(self, step: Callable[[], Optional[MatchSpan]]) -> None:
		"""Run a navigator step under the lock and apply its result.

		Args:
			step: The bound navigator method to call.
		"""
		with self._lock:
			try:
				span = step()
			except NoActiveSearchError:
				log.debug("Navigation requested without an active search")
				self.view.show_status(
					# Translators: Status message shown when next or previous match is requested before any search
					_("Start a search first.")
				)
				return
			document = self._document
			search_text = self._search_text
		self._apply_result(document, search_text, span)

	def _apply_result(
		self, document: str, search_text: str, span: Optional[MatchSpan]
	) -> None:
		"""Select the located match, or report that nothing was found.

		Args:
			document: The text the search ran on.
			search_text: The raw search text, used for the not-found message.
			span: The match to select, or None.
		"""
		if span is None:
			self.view.show_not_found(search_text)
			return
		self.view.show_status("")
		self.target.set_selection(document, span)
