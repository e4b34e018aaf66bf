"""Constant values used in the application."""

# application name
APP_NAME = "SeekPad"

# application author
APP_AUTHOR = "SeekPad"

# default application language
DEFAULT_LANG = "en"

# default encoding used to read and write documents
DEFAULT_ENCODING = "utf-8"

# file dialog wildcard for text documents
TEXT_FILE_WILDCARD = "Text files (*.txt)|*.txt|All files (*.*)|*.*"
