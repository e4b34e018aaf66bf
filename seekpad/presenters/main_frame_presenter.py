"""Presenter for main frame orchestration logic.

Coordinates opening and saving the edited document. Delegates all pure-UI
operations back to the MainFrame view.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Optional

import seekpad.config as config
from seekpad.services.document_service import load_document, save_document

if TYPE_CHECKING:
	from seekpad.views.main_frame import MainFrame

log = logging.getLogger(__name__)


class MainFramePresenter:
	"""Orchestrates the document lifecycle of the editor.

	Attributes:
		view: The MainFrame view this presenter drives.
		conf: The application configuration.
		current_path: The file the document was opened from or saved to.
	"""

	def __init__(
		self, view: MainFrame, conf: Optional[config.SeekpadConfig] = None
	) -> None:
		"""Initialize the main frame presenter.

		Args:
			view: The MainFrame view instance.
			conf: The configuration to use; the global one if None.
		"""
		self.view = view
		self.conf = conf or config.conf()
		self.current_path: Optional[str] = None

	@property
	def default_directory(self) -> str:
		"""Directory proposed by the file dialogs."""
		return self.conf.editor.last_directory or os.path.expanduser("~")

	def _remember_path(self, path: str) -> None:
		self.current_path = path
		directory = os.path.dirname(os.path.abspath(path))
		self.view.update_title(os.path.basename(path))
		if directory == self.conf.editor.last_directory:
			return
		self.conf.editor.last_directory = directory
		try:
			self.conf.save()
		except OSError as e:
			log.error("Unable to save configuration: %s", e, exc_info=True)

	def on_open(self, path: str) -> bool:
		"""Load a file into the editor.

		Args:
			path: The file to open.

		Returns:
			True if the file was loaded.
		"""
		try:
			text = load_document(path, self.conf.editor.encoding)
		except OSError as e:
			log.error("Failed to open %s: %s", path, e, exc_info=True)
			self.view.show_error(
				# Translators: Error message when a file cannot be opened
				_("Failed to open file: %s") % e
			)
			return False
		self.view.set_document_text(text)
		self._remember_path(path)
		log.info("Opened %s", path)
		return True

	def on_save(self) -> bool:
		"""Save the document to its current file, asking for one if needed.

		Returns:
			True if the document was written.
		"""
		if self.current_path is None:
			path = self.view.ask_save_path(self.default_directory)
			if not path:
				return False
			return self.on_save_as(path)
		return self.on_save_as(self.current_path)

	def on_save_as(self, path: str) -> bool:
		"""Save the document to *path* and make it the current file.

		Args:
			path: The file to write.

		Returns:
			True if the document was written.
		"""
		try:
			save_document(
				path, self.view.get_document_text(), self.conf.editor.encoding
			)
		except OSError as e:
			log.error("Failed to save %s: %s", path, e, exc_info=True)
			self.view.show_error(
				# Translators: Error message when a file cannot be saved
				_("Failed to save file: %s") % e
			)
			return False
		self._remember_path(path)
		log.info("Saved %s", path)
		return True
