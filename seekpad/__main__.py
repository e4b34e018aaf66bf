"""This module is the entry point for the SeekPad application.

It parses command-line arguments, stores them in the global variables and starts the wx application.
"""

import argparse

from seekpad import global_vars
from seekpad.consts import APP_NAME


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""Parse command-line arguments for the SeekPad application.

	Arguments:
		--language, -l (str | None): Sets the application language. Defaults to None.
		--log_level, -L (str | None): Sets the logging level, upper-cased. Valid levels are OFF, DEBUG, INFO, WARNING, ERROR, CRITICAL. Defaults to None.
		file (str | None): A text file to open at startup.

	Args:
		argv: The arguments to parse; sys.argv when None.

	Returns:
		argparse.Namespace: Parsed command-line arguments with their values.
	"""
	parser = argparse.ArgumentParser(description=f"Run {APP_NAME}")
	parser.add_argument(
		"--language",
		"-l",
		type=str,
		default=None,
		help="Set the application language",
	)
	parser.add_argument(
		"--log_level",
		"-L",
		type=str.upper,
		choices=["OFF", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
		default=None,
		help="Set the log level (case-insensitive)",
	)
	parser.add_argument(
		'file', nargs='?', help='Text file to open', default=None
	)
	return parser.parse_args(argv)


def main():
	"""Parse the command line and run the application main loop."""
	global_vars.args = parse_args()
	from seekpad.main_app import MainApp

	app = MainApp()
	app.MainLoop()


if __name__ == '__main__':
	main()
