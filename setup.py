"""Setup file for the project."""

from setuptools import setup

setup(
	message_extractors={
		"seekpad": [
			("*.py", "python", None),
			("config/**.py", "python", None),
			("presenters/**.py", "python", None),
			("views/**.py", "python", None),
		]
	}
)
