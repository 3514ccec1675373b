"""Version information for nsdebug.

This file is the canonical source for the version number; ``setup.py``
reads it from here.
"""

__version__ = "0.3.0b0"
__app_name__ = "nsdebug"
