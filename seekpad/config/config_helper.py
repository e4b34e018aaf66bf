"""Location, loading and saving of the SeekPad YAML configuration file."""

import logging
from pathlib import Path

import yaml
from platformdirs import user_config_path as get_user_config_path
from pydantic_settings import (
	BaseSettings,
	PydanticBaseSettingsSource,
	SettingsConfigDict,
	YamlConfigSettingsSource,
)

import seekpad.global_vars as global_vars
from seekpad.consts import APP_AUTHOR, APP_NAME

log = logging.getLogger(__name__)


class SeekpadBaseSettings(BaseSettings):
	"""Settings read from config.yml, overridable with SEEKPAD_ variables."""

	@classmethod
	def settings_customise_sources(
		cls,
		settings_cls: BaseSettings,
		init_settings: PydanticBaseSettingsSource,
		env_settings: PydanticBaseSettingsSource,
		dotenv_settings: PydanticBaseSettingsSource,
		file_secret_settings: PydanticBaseSettingsSource,
	) -> tuple[PydanticBaseSettingsSource, ...]:
		"""Read the YAML file first, then the environment, then init values.

		Later sources override earlier ones, so an environment variable
		wins over config.yml. Dotenv and secret files are not used.

		Returns:
			The settings sources in loading order.
		"""
		return (
			YamlConfigSettingsSource(settings_cls),
			env_settings,
			init_settings,
		)


user_config_path = get_user_config_path(
	APP_NAME, APP_AUTHOR, roaming=True, ensure_exists=True
)


def get_config_file_paths(file_name: str) -> list[Path]:
	"""List the candidate locations of a config file, preferred first.

	A portable installation keeps its configuration in the user_data
	directory next to the executable; otherwise the platform config
	directory is used.

	Args:
		file_name: Name of the config file.

	Returns:
		The candidate paths.
	"""
	candidates = []
	if global_vars.user_data_path:
		candidates.append(global_vars.user_data_path / file_name)
	candidates.append(user_config_path / file_name)
	return candidates


def search_existing_path(paths: list[Path]) -> Path:
	"""Pick the first path that exists or could be created.

	A path whose directory exists is accepted even if the file itself is
	missing, so a first save lands in the preferred location.

	Args:
		paths: Candidate paths, preferred first.

	Returns:
		The chosen path, or the last candidate if none qualifies.
	"""
	for p in paths:
		if p.exists() or p.parent.exists():
			return p
	return paths[-1]


def resolve_config_file(file_name: str) -> Path:
	"""Return the path a config file is read from and saved to."""
	return search_existing_path(get_config_file_paths(file_name))


def get_settings_config_dict(file_name: str) -> SettingsConfigDict:
	"""Build the pydantic-settings configuration for a config file.

	Args:
		file_name: Name of the config file.

	Returns:
		The settings config dict.
	"""
	return SettingsConfigDict(
		env_prefix="SEEKPAD_",
		extra="allow",
		yaml_file=resolve_config_file(file_name),
		yaml_file_encoding="UTF-8",
	)


def save_config_file(conf_dict: dict, file_name: str) -> None:
	"""Write a config dictionary as YAML, keeping its key order.

	Args:
		conf_dict: The values to save.
		file_name: Name of the config file.
	"""
	conf_save_path = resolve_config_file(file_name)
	with conf_save_path.open(mode="w", encoding="UTF-8") as config_file:
		yaml.dump(conf_dict, config_file, indent=2, sort_keys=False)
	log.debug("Config saved to %s", conf_save_path)
