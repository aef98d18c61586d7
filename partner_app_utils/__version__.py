"""
Version information for partner_app_utils package.
"""

VERSION_MAJOR = 1
VERSION_MINOR = 0
VERSION_PATCH = 0
VERSION_SUFFIX = ""  # e.g., "a1", "rc1", or "" for final

__version__ = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}{VERSION_SUFFIX}"

PACKAGE_NAME = "partner-app-utils"

__all__ = ["__version__", "PACKAGE_NAME"]
