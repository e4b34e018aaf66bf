"""Log file setup and uncaught exception logging for SeekPad.

The log file is rewritten at every start; a portable installation keeps it
in its user_data directory.
"""

import logging
import sys
from pathlib import Path
from types import TracebackType
from typing import Type

from platformdirs import user_log_path

import seekpad.global_vars as global_vars
from seekpad.consts import APP_AUTHOR, APP_NAME


def get_log_file_path() -> Path:
	"""Return the path of seekpad.log.

	Returns:
		The file inside the portable user_data directory when there is one,
		else inside the platform log directory.
	"""
	log_file_path = Path("seekpad.log")
	if global_vars.user_data_path:
		log_file_path = global_vars.user_data_path / log_file_path
	else:
		log_file_path = (
			user_log_path(APP_NAME, APP_AUTHOR, ensure_exists=True)
			/ log_file_path
		)
	return log_file_path


def setup_logging(level: str) -> None:
	"""Send log records to seekpad.log, and to the console when run from source.

	Args:
		level: Level name in any case, as given on the command line or stored
			in the config. 'off' disables filtering (NOTSET).
	"""
	level = level.upper()
	if level == "OFF":
		level = "NOTSET"
	handlers = [logging.FileHandler(get_log_file_path(), mode='w')]
	if not getattr(sys, "frozen", False):
		handlers.append(logging.StreamHandler())
	logging.basicConfig(
		level=level,
		format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
		handlers=handlers,
		force=True,
	)


def set_log_level(level: str) -> None:
	"""Apply a new level to the root logger and each of its handlers.

	Args:
		level: Upper-case level name.
	"""
	cur_level = logging.getLevelName(logging.root.getEffectiveLevel())
	if cur_level == level:
		return
	logging.root.setLevel(level)
	for handler in logging.root.handlers:
		handler.setLevel(level)
	new_level = logging.getLevelName(logging.root.getEffectiveLevel())
	logging.root.debug(f"Log level changed from {cur_level} to {new_level}")


def logging_uncaught_exceptions(
	exc_type: Type[BaseException],
	exc_value: BaseException,
	exc_traceback: TracebackType,
) -> None:
	"""sys.excepthook replacement writing crashes to the SeekPad log.

	The record goes to the logger named after the module of the exception
	class. Ctrl+C is logged at info level only.
	"""
	if issubclass(exc_type, KeyboardInterrupt):
		logging.info("Keyboard interrupt")
		return
	logging.getLogger(exc_type.__module__).error(
		"Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback)
	)
