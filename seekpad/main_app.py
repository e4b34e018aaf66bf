"""Module for the main application class and initialization.

This module contains the MainApp class, a subclass of wx.App responsible for
setting up logging, localization and the main window of SeekPad.
"""

import logging
import sys

import wx

import seekpad.config as config
import seekpad.global_vars as global_vars

# don't use relative import here, frozen builds fail to find the module
from seekpad.consts import APP_NAME
from seekpad.localization import init_translation
from seekpad.logger import (
	get_log_file_path,
	logging_uncaught_exceptions,
	setup_logging,
)

log = logging.getLogger(__name__)


class MainApp(wx.App):
	"""Main application class for SeekPad."""

	def OnInit(self) -> bool:
		"""Initialize the application and set up the main window.

		This method is called when the application starts and:
		- Configures exception handling and logging
		- Sets up localization and language
		- Creates the main application frame

		Returns:
			returns True to indicate successful application initialization
		"""
		sys.excepthook = logging_uncaught_exceptions
		self.conf = config.conf()
		args = global_vars.args
		log_level = (
			getattr(args, "log_level", None) or self.conf.general.log_level.name
		)
		setup_logging(log_level)
		log.debug(f"args: {args}")
		log.debug(f"config: {self.conf}")
		if getattr(sys, "frozen", False):
			log.info(
				"running frozen application: redirecting stdio to log file"
			)
			self.RedirectStdio(str(get_log_file_path()))
		language = (
			getattr(args, "language", None) or self.conf.general.language
		)
		self.locale = init_translation(language)
		log.info("translation initialized")
		self.init_main_frame(getattr(args, "file", None))
		log.info("Application started")
		return True

	def init_main_frame(self, open_file: str | None = None):
		"""Create the main frame, show it and make it the top window.

		Args:
			open_file: A document to open once the frame is created.
		"""
		from seekpad.views.main_frame import MainFrame

		self.frame = MainFrame(
			None,
			title=APP_NAME,
			conf=self.conf,
			size=(1000, 800),
			open_file=open_file,
		)
		self.frame.Centre()
		self.frame.Show()
		self.SetTopWindow(self.frame)

	def OnExit(self) -> int:
		"""Log the application shutdown.

		Returns:
			The exit code of the application.
		"""
		log.info("Application exited")
		return 0
