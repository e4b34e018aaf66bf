"""Common test fixtures for SeekPad."""

import gettext

import pytest

# views and presenters use the builtin ``_`` installed at application startup
gettext.NullTranslations().install()


@pytest.fixture
def text_file(tmp_path):
	"""Create and return a text file for testing."""
	test_file_path = tmp_path / "test.txt"
	test_file_path.write_text("cat cat dog cat\nsecond line\n", encoding="utf-8")
	return test_file_path
