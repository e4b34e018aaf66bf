"""Configuration module for SeekPad."""

from .config_enums import LogLevelEnum
from .main_config import (
	EditorSettings,
	GeneralSettings,
	SearchSettings,
	SeekpadConfig,
)
from .main_config import get_seekpad_config as conf

__all__ = [
	"conf",
	"EditorSettings",
	"GeneralSettings",
	"LogLevelEnum",
	"SearchSettings",
	"SeekpadConfig",
]
