"""Shared fixtures for presenter tests."""

from __future__ import annotations

import sys
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_wx(mocker):
	"""Replace the wx module with a mock running CallAfter immediately."""
	wx = MagicMock()
	wx.CallAfter.side_effect = lambda func, *args, **kwargs: func(
		*args, **kwargs
	)
	mocker.patch.dict(sys.modules, {"wx": wx})
	return wx


@pytest.fixture
def base_mock_view():
	"""Minimal view mock: search field, regex toggle and error display."""
	view = MagicMock()
	view.get_search_text.return_value = "cat"
	view.get_use_regex.return_value = False
	view.get_document_text.return_value = ""
	return view
