"""Tests for MainFramePresenter."""

import os
from unittest.mock import MagicMock

import pytest

from seekpad.config import EditorSettings
from seekpad.presenters.main_frame_presenter import MainFramePresenter


@pytest.fixture
def mock_conf():
	"""Build a configuration mock with real editor settings."""
	conf = MagicMock()
	conf.editor = EditorSettings()
	return conf


@pytest.fixture
def presenter(base_mock_view, mock_conf):
	"""Build a MainFramePresenter with a mock view and configuration."""
	return MainFramePresenter(view=base_mock_view, conf=mock_conf)


class TestDefaultDirectory:
	"""Tests for MainFramePresenter.default_directory."""

	def test_home_when_unset(self, presenter):
		"""The home directory is proposed when no directory is remembered."""
		assert presenter.default_directory == os.path.expanduser("~")

	def test_last_directory(self, presenter, mock_conf, tmp_path):
		"""The remembered directory is proposed."""
		mock_conf.editor.last_directory = str(tmp_path)
		assert presenter.default_directory == str(tmp_path)


class TestOnOpen:
	"""Tests for MainFramePresenter.on_open."""

	def test_loads_text_into_view(self, presenter, base_mock_view, text_file):
		"""The file content replaces the editor text."""
		assert presenter.on_open(str(text_file)) is True
		base_mock_view.set_document_text.assert_called_once_with(
			"cat cat dog cat\nsecond line\n"
		)
		base_mock_view.update_title.assert_called_once_with("test.txt")
		assert presenter.current_path == str(text_file)

	def test_remembers_directory(self, presenter, mock_conf, text_file):
		"""The directory of the opened file is saved to the configuration."""
		presenter.on_open(str(text_file))
		assert mock_conf.editor.last_directory == str(text_file.parent)
		mock_conf.save.assert_called_once()

	def test_same_directory_not_saved_again(
		self, presenter, mock_conf, text_file
	):
		"""The configuration is not rewritten for an unchanged directory."""
		mock_conf.editor.last_directory = str(text_file.parent)
		presenter.on_open(str(text_file))
		mock_conf.save.assert_not_called()

	def test_config_save_error_is_logged(
		self, presenter, mock_conf, base_mock_view, text_file
	):
		"""A configuration write failure does not prevent opening."""
		mock_conf.save.side_effect = OSError("read-only")
		assert presenter.on_open(str(text_file)) is True
		base_mock_view.show_error.assert_not_called()

	def test_missing_file_shows_error(
		self, presenter, base_mock_view, tmp_path
	):
		"""An unreadable file is reported and nothing is loaded."""
		assert presenter.on_open(str(tmp_path / "missing.txt")) is False
		base_mock_view.show_error.assert_called_once()
		base_mock_view.set_document_text.assert_not_called()
		assert presenter.current_path is None


class TestOnSave:
	"""Tests for MainFramePresenter.on_save and on_save_as."""

	def test_asks_for_path_first_time(
		self, presenter, base_mock_view, mock_conf, tmp_path
	):
		"""Without a current file the view is asked for a path."""
		path = tmp_path / "new.txt"
		base_mock_view.ask_save_path.return_value = str(path)
		base_mock_view.get_document_text.return_value = "hello"
		proposed_dir = presenter.default_directory
		assert presenter.on_save() is True
		base_mock_view.ask_save_path.assert_called_once_with(proposed_dir)
		assert proposed_dir == os.path.expanduser("~")
		assert mock_conf.editor.last_directory == str(tmp_path)
		assert path.read_text(encoding="utf-8") == "hello"
		assert presenter.current_path == str(path)

	def test_cancelled_dialog(self, presenter, base_mock_view):
		"""Cancelling the save dialog writes nothing."""
		base_mock_view.ask_save_path.return_value = None
		assert presenter.on_save() is False
		assert presenter.current_path is None

	def test_saves_to_opened_file(self, presenter, base_mock_view, text_file):
		"""The opened file is overwritten without asking."""
		presenter.on_open(str(text_file))
		base_mock_view.get_document_text.return_value = "edited"
		assert presenter.on_save() is True
		base_mock_view.ask_save_path.assert_not_called()
		assert text_file.read_text(encoding="utf-8") == "edited"

	def test_save_as_changes_current_file(
		self, presenter, base_mock_view, text_file, tmp_path
	):
		"""save as writes the new file and makes it current."""
		presenter.on_open(str(text_file))
		other = tmp_path / "other.txt"
		base_mock_view.get_document_text.return_value = "copy"
		assert presenter.on_save_as(str(other)) is True
		assert other.read_text(encoding="utf-8") == "copy"
		assert text_file.read_text(encoding="utf-8").startswith("cat")
		assert presenter.current_path == str(other)

	def test_write_error_shows_error(self, presenter, base_mock_view, tmp_path):
		"""A write failure is reported and the current file is unchanged."""
		base_mock_view.get_document_text.return_value = "text"
		target = tmp_path / "missing" / "out.txt"
		assert presenter.on_save_as(str(target)) is False
		base_mock_view.show_error.assert_called_once()
		assert presenter.current_path is None
