import logging
from functools import cache

from pydantic import BaseModel, Field

from seekpad.consts import DEFAULT_ENCODING

from .config_enums import LogLevelEnum
from .config_helper import (
	SeekpadBaseSettings,
	get_settings_config_dict,
	save_config_file,
)

log = logging.getLogger(__name__)

config_file_name = "config.yml"


class GeneralSettings(BaseModel):
	language: str = Field(default="auto")
	log_level: LogLevelEnum = Field(default=LogLevelEnum.DEBUG)


class SearchSettings(BaseModel):
	use_regex: bool = Field(default=False)
	case_sensitive: bool = Field(default=True)
	history_size: int = Field(default=20, ge=0, le=200)


class EditorSettings(BaseModel):
	encoding: str = Field(default=DEFAULT_ENCODING)
	last_directory: str | None = Field(default=None)


class SeekpadConfig(SeekpadBaseSettings):
	model_config = get_settings_config_dict(config_file_name)

	general: GeneralSettings = Field(default_factory=GeneralSettings)
	search: SearchSettings = Field(default_factory=SearchSettings)
	editor: EditorSettings = Field(default_factory=EditorSettings)

	def save(self):
		save_config_file(
			self.model_dump(
				mode="json",
				by_alias=True,
				exclude_defaults=True,
				exclude_none=True,
			),
			config_file_name,
		)


@cache
def get_seekpad_config() -> SeekpadConfig:
	log.debug("Loading SeekPad config")
	return SeekpadConfig()
