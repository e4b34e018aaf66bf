"""Service layer for reading and writing edited documents."""

from __future__ import annotations

import logging
from pathlib import Path

from seekpad.consts import DEFAULT_ENCODING

log = logging.getLogger(__name__)


def load_document(path: str | Path, encoding: str = DEFAULT_ENCODING) -> str:
	"""Read the whole content of a text file.

	Bytes that cannot be decoded with *encoding* are replaced instead of
	aborting the load.

	Args:
		path: The file to read.
		encoding: The text encoding of the file.

	Returns:
		The file content.

	Raises:
		OSError: If the file cannot be read.
	"""
	path = Path(path)
	log.debug("Loading document: %s", path)
	with path.open(mode="r", encoding=encoding, errors="replace") as f:
		return f.read()


def save_document(
	path: str | Path, text: str, encoding: str = DEFAULT_ENCODING
) -> None:
	"""Write *text* to a file, overwriting its previous content.

	Args:
		path: The file to write.
		text: The document text.
		encoding: The text encoding to use.

	Raises:
		OSError: If the file cannot be written.
	"""
	path = Path(path)
	log.debug("Saving document: %s (%d characters)", path, len(text))
	with path.open(mode="w", encoding=encoding, newline="") as f:
		f.write(text)
