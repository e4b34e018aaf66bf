"""Main application frame for SeekPad.

This is the *view* layer: it creates menus, widgets, and handles pure-UI
events. Document handling is delegated to the MainFramePresenter and
searching to the SearchPresenter.
"""

import logging
from typing import Optional

import wx

import seekpad.config as config
from seekpad.consts import APP_NAME, TEXT_FILE_WILDCARD
from seekpad.presenters.main_frame_presenter import MainFramePresenter
from seekpad.presenters.search_presenter import (
	SearchPresenter,
	SelectionTargetAdapter,
)

log = logging.getLogger(__name__)


class MainFrame(wx.Frame):
	"""Main application frame for SeekPad.

	Attributes:
		conf: The application configuration.
		presenter: The MainFramePresenter instance.
		search_presenter: The SearchPresenter instance.
	"""

	def __init__(self, *args, **kwargs):
		"""Initialize the main application frame.

		Args:
			args: Variable length argument list passed to wx.Frame.
			kwargs: Keyword arguments with special handling for:
				conf: The seekpad configuration to use.
				open_file: Path to a document to open on startup.
		"""
		self.conf: config.SeekpadConfig = (
			kwargs.pop("conf", None) or config.conf()
		)
		open_file = kwargs.pop("open_file", None)
		super().__init__(*args, **kwargs)
		self.presenter = MainFramePresenter(self, self.conf)
		self.init_ui()
		self.search_presenter = SearchPresenter(
			self,
			SelectionTargetAdapter(self.text_area),
			history_size=self.conf.search.history_size,
			case_sensitive=self.conf.search.case_sensitive,
		)
		self.init_accelerators()
		if open_file:
			self.presenter.on_open(open_file)

	def init_ui(self):
		"""Create the menus, the search toolbar and the text area."""
		menu_bar = wx.MenuBar()

		file_menu = wx.Menu()
		open_item = file_menu.Append(
			wx.ID_OPEN,
			# Translators: A label for a menu item to open a file
			_("&Open...") + "\tCtrl+O",
		)
		self.Bind(wx.EVT_MENU, self.on_open, open_item)
		save_item = file_menu.Append(
			wx.ID_SAVE,
			# Translators: A label for a menu item to save the current file
			_("&Save") + "\tCtrl+S",
		)
		self.Bind(wx.EVT_MENU, self.on_save, save_item)
		save_as_item = file_menu.Append(
			wx.ID_SAVEAS,
			# Translators: A label for a menu item to save the document to another file
			_("Save &as...") + "\tCtrl+Shift+S",
		)
		self.Bind(wx.EVT_MENU, self.on_save_as, save_as_item)
		file_menu.AppendSeparator()
		quit_item = file_menu.Append(wx.ID_EXIT)
		self.Bind(wx.EVT_MENU, self.on_quit, quit_item)

		search_menu = wx.Menu()
		start_search_item = search_menu.Append(
			wx.ID_ANY,
			# Translators: A label for a menu item to start a search
			_("Start &search"),
		)
		self.Bind(wx.EVT_MENU, self.on_start_search, start_search_item)
		previous_match_item = search_menu.Append(
			wx.ID_ANY,
			# Translators: A label for a menu item to go to the previous match
			_("&Previous match") + "\tShift+F3",
		)
		self.Bind(wx.EVT_MENU, self.on_previous_match, previous_match_item)
		next_match_item = search_menu.Append(
			wx.ID_ANY,
			# Translators: A label for a menu item to go to the next match
			_("&Next match") + "\tF3",
		)
		self.Bind(wx.EVT_MENU, self.on_next_match, next_match_item)
		self.use_regex_item = search_menu.AppendCheckItem(
			wx.ID_ANY,
			# Translators: A label for a menu item to toggle regular expression search
			_("Use &regular expressions"),
		)
		self.Bind(wx.EVT_MENU, self.on_use_regex_menu, self.use_regex_item)

		# Translators: A label for the file menu
		menu_bar.Append(file_menu, _("&File"))
		# Translators: A label for the search menu
		menu_bar.Append(search_menu, _("&Search"))
		self.SetMenuBar(menu_bar)

		self.panel = wx.Panel(self)
		main_sizer = wx.BoxSizer(wx.VERTICAL)
		toolbar_sizer = wx.BoxSizer(wx.HORIZONTAL)

		# Translators: A label for the button to open a file
		self.open_button = wx.Button(self.panel, label=_("Open"))
		self.open_button.Bind(wx.EVT_BUTTON, self.on_open)
		toolbar_sizer.Add(self.open_button, flag=wx.ALL, border=2)
		# Translators: A label for the button to save the current file
		self.save_button = wx.Button(self.panel, label=_("Save"))
		self.save_button.Bind(wx.EVT_BUTTON, self.on_save)
		toolbar_sizer.Add(self.save_button, flag=wx.ALL, border=2)

		search_label = wx.StaticText(
			self.panel,
			# Translators: A label for the search field
			label=_("Searc&h for:"),
		)
		toolbar_sizer.Add(search_label, flag=wx.ALL | wx.CENTER, border=2)
		self.search_combo = wx.ComboBox(
			self.panel, style=wx.CB_DROPDOWN | wx.TE_PROCESS_ENTER
		)
		self.search_combo.Bind(wx.EVT_TEXT_ENTER, self.on_start_search)
		toolbar_sizer.Add(
			self.search_combo, proportion=1, flag=wx.ALL | wx.EXPAND, border=2
		)

		# Translators: A label for the button to start a search
		self.search_button = wx.Button(self.panel, label=_("Search"))
		self.search_button.Bind(wx.EVT_BUTTON, self.on_start_search)
		toolbar_sizer.Add(self.search_button, flag=wx.ALL, border=2)
		# Translators: A label for the button to go to the previous match
		self.previous_button = wx.Button(self.panel, label=_("Previous"))
		self.previous_button.Bind(wx.EVT_BUTTON, self.on_previous_match)
		toolbar_sizer.Add(self.previous_button, flag=wx.ALL, border=2)
		# Translators: A label for the button to go to the next match
		self.next_button = wx.Button(self.panel, label=_("Next"))
		self.next_button.Bind(wx.EVT_BUTTON, self.on_next_match)
		toolbar_sizer.Add(self.next_button, flag=wx.ALL, border=2)

		self.regex_checkbox = wx.CheckBox(
			self.panel,
			# Translators: A label for the checkbox to toggle regular expression search
			label=_("Use re&gex"),
		)
		self.regex_checkbox.Bind(wx.EVT_CHECKBOX, self.on_use_regex_checkbox)
		toolbar_sizer.Add(
			self.regex_checkbox, flag=wx.ALL | wx.CENTER, border=2
		)
		self.set_use_regex(self.conf.search.use_regex)

		main_sizer.Add(toolbar_sizer, flag=wx.ALL | wx.EXPAND, border=5)

		self.text_area = wx.TextCtrl(
			self.panel, style=wx.TE_MULTILINE | wx.TE_RICH2 | wx.HSCROLL
		)
		main_sizer.Add(
			self.text_area, proportion=1, flag=wx.ALL | wx.EXPAND, border=5
		)
		self.panel.SetSizer(main_sizer)
		self.CreateStatusBar()
		self.update_title(None)

	def init_accelerators(self):
		"""Bind keyboard shortcuts that have no menu item."""
		self.Bind(wx.EVT_CLOSE, self.on_close)
		focus_search_id = wx.NewIdRef()
		self.Bind(wx.EVT_MENU, self.on_focus_search, id=focus_search_id)
		self.SetAcceleratorTable(
			wx.AcceleratorTable([(wx.ACCEL_CTRL, ord("F"), focus_search_id)])
		)

	# -- Accessors used by the presenters --

	def get_document_text(self) -> str:
		"""Return the edited text."""
		return self.text_area.GetValue()

	def set_document_text(self, text: str):
		"""Replace the edited text and move the caret to the beginning."""
		self.text_area.SetValue(text)
		self.text_area.SetInsertionPoint(0)

	def get_search_text(self) -> str:
		"""Return the text typed in the search field."""
		return self.search_combo.GetValue()

	def get_use_regex(self) -> bool:
		"""Return whether the search text is a regular expression."""
		return self.regex_checkbox.GetValue()

	def set_use_regex(self, value: bool):
		"""Synchronize the regex checkbox and menu item."""
		self.regex_checkbox.SetValue(value)
		self.use_regex_item.Check(value)

	def sync_history(self, search_list: list[str], current: str):
		"""Refresh the search field choices and keep *current* typed in."""
		self.search_combo.SetItems(list(reversed(search_list)))
		self.search_combo.SetValue(current)

	def update_title(self, file_name: Optional[str]):
		"""Show the current file name in the title bar."""
		if file_name:
			self.SetTitle(f"{file_name} - {APP_NAME}")
		else:
			self.SetTitle(APP_NAME)

	def ask_save_path(self, default_dir: str) -> Optional[str]:
		"""Ask the user for a file to save to.

		Returns:
			The selected path, or None if the dialog was cancelled.
		"""
		with wx.FileDialog(
			self,
			# Translators: Title of the dialog used to save a file
			message=_("Save file"),
			defaultDir=default_dir,
			wildcard=TEXT_FILE_WILDCARD,
			style=wx.FD_SAVE | wx.FD_OVERWRITE_PROMPT,
		) as dlg:
			if dlg.ShowModal() != wx.ID_OK:
				return None
			return dlg.GetPath()

	def show_error(self, message: str):
		"""Display an error message box."""
		# Translators: Title of error message boxes
		wx.MessageBox(message, _("Error"), wx.OK | wx.ICON_ERROR, self)

	def show_status(self, message: str):
		"""Display a message in the status bar."""
		self.SetStatusText(message)

	def show_not_found(self, search_text: str):
		"""Report that no (further) match exists for *search_text*."""
		wx.Bell()
		self.show_status(
			# Translators: Status message when the search reaches the end of the matches
			_('No match found for "%s"') % search_text
		)

	# -- Event handlers --

	def on_open(self, event: wx.Event | None):
		"""Ask for a file and load it."""
		with wx.FileDialog(
			self,
			# Translators: Title of the dialog used to open a file
			message=_("Open file"),
			defaultDir=self.presenter.default_directory,
			wildcard=TEXT_FILE_WILDCARD,
			style=wx.FD_OPEN | wx.FD_FILE_MUST_EXIST,
		) as dlg:
			if dlg.ShowModal() != wx.ID_OK:
				return
			self.presenter.on_open(dlg.GetPath())

	def on_save(self, event: wx.Event | None):
		"""Save the document."""
		self.presenter.on_save()

	def on_save_as(self, event: wx.Event | None):
		"""Save the document to a new file."""
		path = self.ask_save_path(self.presenter.default_directory)
		if path:
			self.presenter.on_save_as(path)

	def on_start_search(self, event: wx.Event | None):
		"""Start a search with the current search field content."""
		self.search_presenter.on_start_search()

	def on_next_match(self, event: wx.Event | None):
		"""Select the next match."""
		self.search_presenter.on_next()

	def on_previous_match(self, event: wx.Event | None):
		"""Select the previous match."""
		self.search_presenter.on_previous()

	def on_use_regex_checkbox(self, event: wx.Event | None):
		"""Keep the menu item in sync with the checkbox."""
		self.use_regex_item.Check(self.regex_checkbox.GetValue())

	def on_use_regex_menu(self, event: wx.Event | None):
		"""Keep the checkbox in sync with the menu item."""
		self.regex_checkbox.SetValue(self.use_regex_item.IsChecked())

	def on_focus_search(self, event: wx.Event | None):
		"""Move the focus to the search field."""
		self.search_combo.SetFocus()
		self.search_combo.SelectAll()

	def on_quit(self, event: wx.Event | None):
		"""Close the main window."""
		self.Close()

	def on_close(self, event: wx.CloseEvent):
		"""Persist the regex preference and destroy the frame."""
		use_regex = self.get_use_regex()
		if use_regex != self.conf.search.use_regex:
			self.conf.search.use_regex = use_regex
			try:
				self.conf.save()
			except OSError as e:
				log.error("Unable to save configuration: %s", e, exc_info=True)
		self.Destroy()
