"""global variables for the seekpad application.

This module contains global variables that are used throughout the application, such as the user data path for portable installations, the resource path and the parsed command-line arguments.
"""

import sys
from pathlib import Path

# base directory of the application executable
base_path = Path(
	sys.executable if getattr(sys, "frozen", False) else __file__
).parent

# application configuration inside the base directory (useful for portable installations)
user_data_path = (
	base_path / Path("user_data")
	if (base_path / "user_data").exists()
	else None
)

# resource directory present in the base directory (contains translations)
resource_path = base_path / Path("res")

# command-line arguments parsed by the application
args = None
