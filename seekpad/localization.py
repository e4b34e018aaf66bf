"""Module to handle the translation of the application."""

import gettext
import locale
import logging
from pathlib import Path
from typing import Optional

import wx
from babel import Locale, UnknownLocaleError

from .consts import APP_NAME, DEFAULT_LANG
from .global_vars import resource_path

log = logging.getLogger(__name__)


LOCALE_DIR = resource_path / Path("locale")


def get_app_locale(language: Optional[str]) -> Locale:
	"""Get the application locale from the system locale or the provided language.

	Args:
		language: The language to use for the application (default: None)

	Returns:
		The locale to use for the application.
	"""
	if language is None or language == "auto":
		language = locale.getlocale()[0] or DEFAULT_LANG
	try:
		return Locale.parse(language)
	except (ValueError, UnknownLocaleError):
		log.warning("Unknown language %r, using %s", language, DEFAULT_LANG)
		return Locale.parse(DEFAULT_LANG)


def get_wx_locale(current_locale: Locale) -> wx.Locale:
	"""Get the wxPython locale from the babel locale.

	Args:
		current_locale: The current locale to get the wxPython locale for.

	Returns:
		The wxPython locale object for the current locale.
	"""
	find_language = wx.Locale.FindLanguageInfo(current_locale.language)
	if find_language:
		log.debug(
			f"wxPython locale found for: {current_locale.english_name}({find_language.Language})"
		)
		return wx.Locale(find_language.Language)
	log.warning(f"wxPython locale not found for: {current_locale.english_name}")
	return wx.Locale(wx.LANGUAGE_DEFAULT)


def setup_translation(locale: Locale) -> None:
	"""Install the gettext translation matching the provided locale.

	Args:
		locale: The locale to use for the translation.
	"""
	translation = gettext.translation(
		domain=APP_NAME,
		localedir=LOCALE_DIR,
		languages=[str(locale)],
		fallback=True,
	)
	translation.install()
	log.debug(f"gettext Translation setup for: {locale.english_name}")


def init_translation(language: Optional[str]) -> wx.Locale:
	"""Initialize the translation for the application based on the provided language.

	Args:
		language: The language to use for the application (default: None)

	Returns:
		The wxPython locale object for the current locale.
	"""
	app_locale = get_app_locale(language)
	setup_translation(app_locale)
	return get_wx_locale(app_locale)
