"""Decorators shared by the SeekPad presenters."""

import logging
import time
from functools import wraps
from typing import Callable

logger = logging.getLogger(__name__)


def ensure_no_task_running(method: Callable):
	"""Refuse a presenter action while its search worker thread is alive.

	The navigator lock is held for the whole first scan, so waiting here
	would freeze the UI thread. The user is told to wait instead.

	Args:
		method: A method of a presenter with ``task`` and ``view`` attributes.

	Returns:
		The guarded method.
	"""

	@wraps(method)
	def wrapper(instance, *args, **kwargs):
		if instance.task is not None and instance.task.is_alive():
			logger.error("A search is already running.")
			instance.view.show_error(
				# Translators: Error shown when an action is requested while a search is still running
				_("A search is already running. Please wait for it to complete.")
			)
			return
		return method(instance, *args, **kwargs)

	return wrapper


def measure_time(method: Callable):
	"""Log how long a call took, at debug level.

	Used on the search worker to time the first scan of a document. Nothing
	is measured unless debug logging is enabled.

	Args:
		method: The function to time.

	Returns:
		The timed function.
	"""

	@wraps(method)
	def wrapper(*args, **kwargs):
		if not logger.isEnabledFor(logging.DEBUG):
			return method(*args, **kwargs)
		start = time.time()
		result = method(*args, **kwargs)
		logger.debug(
			f"{method.__module__}.{method.__qualname__} took {time.time() - start:.3f} seconds"
		)
		return result

	return wrapper
