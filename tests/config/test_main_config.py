"""Tests for the SeekPad configuration."""

import pytest
import yaml
from pydantic import ValidationError
from pydantic_settings import SettingsConfigDict

import seekpad.config.config_helper as config_helper
import seekpad.global_vars as global_vars
from seekpad.config import LogLevelEnum, SearchSettings, SeekpadConfig
from seekpad.config.config_helper import (
	resolve_config_file,
	save_config_file,
	search_existing_path,
)


@pytest.fixture
def config_cls(tmp_path):
	"""Return a SeekpadConfig subclass reading a temporary YAML file."""

	class IsolatedConfig(SeekpadConfig):
		model_config = SettingsConfigDict(
			env_prefix="SEEKPAD_",
			extra="allow",
			yaml_file=tmp_path / "config.yml",
			yaml_file_encoding="UTF-8",
		)

	return IsolatedConfig


class TestDefaults:
	"""Tests for the default configuration values."""

	def test_general(self, config_cls):
		"""General settings default to the system language and debug logs."""
		conf = config_cls()
		assert conf.general.language == "auto"
		assert conf.general.log_level == LogLevelEnum.DEBUG

	def test_search(self, config_cls):
		"""Searches are literal and case-sensitive by default."""
		conf = config_cls()
		assert conf.search.use_regex is False
		assert conf.search.case_sensitive is True
		assert conf.search.history_size == 20

	def test_editor(self, config_cls):
		"""Documents are UTF-8 and no directory is remembered."""
		conf = config_cls()
		assert conf.editor.encoding == "utf-8"
		assert conf.editor.last_directory is None


class TestSources:
	"""Tests for the configuration sources."""

	def test_yaml_file(self, config_cls, tmp_path):
		"""Values are read from the YAML file."""
		(tmp_path / "config.yml").write_text(
			yaml.dump(
				{
					"general": {"log_level": "info"},
					"search": {"use_regex": True, "history_size": 5},
				}
			),
			encoding="UTF-8",
		)
		conf = config_cls()
		assert conf.general.log_level == LogLevelEnum.INFO
		assert conf.search.use_regex is True
		assert conf.search.history_size == 5

	def test_environment_variable(self, config_cls, monkeypatch):
		"""Sections can be set from SEEKPAD_ environment variables."""
		monkeypatch.setenv("SEEKPAD_SEARCH", '{"case_sensitive": false}')
		conf = config_cls()
		assert conf.search.case_sensitive is False

	def test_invalid_history_size(self):
		"""The history size is bounded."""
		with pytest.raises(ValidationError):
			SearchSettings(history_size=-1)


class TestSave:
	"""Tests for SeekpadConfig.save."""

	def test_only_non_default_values_saved(self, config_cls, mocker):
		"""Default values are left out of the saved file."""
		save_config_file = mocker.patch(
			"seekpad.config.main_config.save_config_file"
		)
		conf = config_cls()
		conf.search.use_regex = True
		conf.editor.last_directory = "/tmp/docs"
		conf.save()
		saved, file_name = save_config_file.call_args.args
		assert file_name == "config.yml"
		assert saved["search"] == {"use_regex": True}
		assert saved["editor"] == {"last_directory": "/tmp/docs"}
		assert not saved.get("general")


class TestSearchExistingPath:
	"""Tests for search_existing_path."""

	def test_first_existing_parent(self, tmp_path):
		"""The first path whose directory exists is chosen."""
		missing = tmp_path / "missing" / "config.yml"
		present = tmp_path / "config.yml"
		assert search_existing_path([missing, present]) == present

	def test_fallback_to_last(self, tmp_path):
		"""The last path is used when no candidate exists."""
		first = tmp_path / "a" / "config.yml"
		last = tmp_path / "b" / "config.yml"
		assert search_existing_path([first, last]) == last


class TestConfigFileLocation:
	"""Tests for the portable and platform config file locations."""

	@pytest.fixture
	def platform_dir(self, tmp_path, monkeypatch):
		"""Point the platform config directory to a temporary directory."""
		path = tmp_path / "platform"
		path.mkdir()
		monkeypatch.setattr(config_helper, "user_config_path", path)
		return path

	def test_platform_directory(self, platform_dir, monkeypatch):
		"""Without a portable directory the platform one is used."""
		monkeypatch.setattr(global_vars, "user_data_path", None)
		assert resolve_config_file("config.yml") == platform_dir / "config.yml"

	def test_portable_directory_preferred(
		self, platform_dir, tmp_path, monkeypatch
	):
		"""The portable user_data directory wins even before a first save."""
		portable = tmp_path / "user_data"
		portable.mkdir()
		monkeypatch.setattr(global_vars, "user_data_path", portable)
		assert resolve_config_file("config.yml") == portable / "config.yml"

	def test_save_writes_yaml(self, platform_dir, monkeypatch):
		"""Saved values are written to the resolved file in key order."""
		monkeypatch.setattr(global_vars, "user_data_path", None)
		save_config_file(
			{"search": {"use_regex": True}, "editor": {"encoding": "latin-1"}},
			"config.yml",
		)
		content = (platform_dir / "config.yml").read_text(encoding="UTF-8")
		assert yaml.safe_load(content) == {
			"search": {"use_regex": True},
			"editor": {"encoding": "latin-1"},
		}
		assert content.index("search") < content.index("editor")
